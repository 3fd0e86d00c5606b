"""Reserved-word filtering for bulk variable formatting."""

from .utils import debug_print

# Matched case-insensitively, so "Array" also covers "array"
RESERVED_WORDS = frozenset(
    word.lower()
    for word in [
        # JavaScript/TypeScript keywords
        "abstract", "arguments", "await", "boolean", "break", "byte", "case", "catch",
        "char", "class", "const", "continue", "debugger", "default", "delete", "do",
        "double", "else", "enum", "eval", "export", "extends", "false", "final",
        "finally", "float", "for", "function", "goto", "if", "implements", "import",
        "in", "instanceof", "int", "interface", "let", "long", "native", "new",
        "null", "package", "private", "protected", "public", "return", "short",
        "static", "super", "switch", "synchronized", "this", "throw", "throws",
        "transient", "true", "try", "typeof", "var", "void", "volatile", "while",
        "with", "yield", "async", "of", "from", "as", "any", "unknown", "never",
        "object", "string", "number", "bigint", "symbol", "undefined",
        # Common built-in objects and functions
        "console", "window", "document", "Array", "Object", "String", "Number",
        "Boolean", "Date", "RegExp", "Error", "JSON", "Math", "parseInt", "parseFloat",
        "isNaN", "isFinite", "encodeURI", "decodeURI", "setTimeout", "setInterval",
    ]
)


def is_reserved_word(word: str) -> bool:
    """Check if a word is a language keyword or common built-in name."""
    if word.lower() in RESERVED_WORDS:
        debug_print(f"Skipping reserved word {word}")  # pragma: no mutate
        return True
    return False
