"""Algorithmic case transformation utilities.

Identifiers are split into lowercase words by separators and case boundaries,
then reassembled under one of five naming conventions. No acronym dictionaries:
an all-caps run is only ever recognised by pattern matching.
"""

import re
from typing import Dict, List, Optional, Sequence

CAMEL_CASE = "camelCase"
PASCAL_CASE = "PascalCase"
SNAKE_CASE = "snake_case"
KEBAB_CASE = "kebab-case"
SCREAMING_SNAKE_CASE = "SCREAMING_SNAKE_CASE"

CONVENTIONS = (CAMEL_CASE, PASCAL_CASE, SNAKE_CASE, KEBAB_CASE, SCREAMING_SNAKE_CASE)

# Keys are lowercased with "_", "-" and spaces removed
CONVENTION_ALIASES: Dict[str, str] = {
    "camelcase": CAMEL_CASE,
    "camel": CAMEL_CASE,
    "lowercamel": CAMEL_CASE,
    "lowercamelcase": CAMEL_CASE,
    "pascalcase": PASCAL_CASE,
    "pascal": PASCAL_CASE,
    "uppercamel": PASCAL_CASE,
    "uppercamelcase": PASCAL_CASE,
    "snakecase": SNAKE_CASE,
    "snake": SNAKE_CASE,
    "kebabcase": KEBAB_CASE,
    "kebab": KEBAB_CASE,
    "dash": KEBAB_CASE,
    "dashcase": KEBAB_CASE,
    "screamingsnakecase": SCREAMING_SNAKE_CASE,
    "screamingsnake": SCREAMING_SNAKE_CASE,
    "screaming": SCREAMING_SNAKE_CASE,
    "constant": SCREAMING_SNAKE_CASE,
    "constantcase": SCREAMING_SNAKE_CASE,
    "uppersnake": SCREAMING_SNAKE_CASE,
    "upper": SCREAMING_SNAKE_CASE,
}

WORD_SEPARATORS = re.compile(r"[_\-\s]+")

# Order matters: an acronym run directly before a Capitalized word must stop one
# letter early ("XMLHttp" -> "XML", "Http"), before the Capitalized-word branch
# gets a chance to swallow the whole run.
CASE_BOUNDARY = re.compile(
    r"""
    [A-Z]+(?=[A-Z][a-z])   # acronym followed by a Capitalized word
    | [A-Z]?[a-z]+         # Capitalized or lowercase word
    | [A-Z]+(?![a-z])      # trailing acronym, or acronym before a digit
    | [0-9]+               # digits are always a word of their own
    """,
    re.VERBOSE,
)


def normalize_convention(convention: str) -> str:
    """Resolve a convention tag or alias to its canonical tag.

    Args:
        convention: Canonical tag ("snake_case") or alias ("snake", "constant")

    Returns:
        One of CONVENTIONS

    Raises:
        ValueError: if the name is not a known convention

    Examples:
        >>> normalize_convention('kebab')
        'kebab-case'
        >>> normalize_convention('SCREAMING_SNAKE_CASE')
        'SCREAMING_SNAKE_CASE'
    """
    if convention in CONVENTIONS:
        return convention

    key = re.sub(r"[_\-\s]", "", str(convention)).lower()
    if key in CONVENTION_ALIASES:
        return CONVENTION_ALIASES[key]

    error_msg = f"Unknown naming convention '{convention}'."
    suggestion = _find_similar_convention(key)
    if suggestion:
        error_msg += f" Did you mean '{suggestion}'?"
    raise ValueError(f"{error_msg} Choose one of: {', '.join(CONVENTIONS)}")


def _find_similar_convention(key: str) -> Optional[str]:
    """Find the convention whose alias contains, or is contained in, the given key."""
    if len(key) < 3:
        return None
    for alias, convention in CONVENTION_ALIASES.items():
        if key in alias or alias in key:
            return convention
    return None


def split_case_boundaries(fragment: str) -> List[str]:
    """Split a separator-free fragment on camelCase/PascalCase boundaries.

    Words keep their original casing. A fragment with no recognisable word
    is returned whole.

    Examples:
        >>> split_case_boundaries('XMLHttpRequest')
        ['XML', 'Http', 'Request']
        >>> split_case_boundaries('HTML5Parser')
        ['HTML', '5', 'Parser']
    """
    matches = CASE_BOUNDARY.findall(fragment)
    return matches or [fragment]


def tokenize(identifier: str) -> List[str]:
    """Split an identifier in any convention into lowercase words.

    Args:
        identifier: Name in camelCase, PascalCase, snake_case, kebab-case,
            SCREAMING_SNAKE_CASE or any mix of them

    Returns:
        Ordered list of non-empty lowercase words

    Examples:
        >>> tokenize('myVariable')
        ['my', 'variable']
        >>> tokenize('MY__VARIABLE')
        ['my', 'variable']
        >>> tokenize('getHTTPResponse2')
        ['get', 'http', 'response', '2']
    """
    words = []
    for fragment in WORD_SEPARATORS.split(identifier):
        if not fragment:
            continue
        words.extend(split_case_boundaries(fragment))
    return [word.lower() for word in words]


def capitalize(word: str) -> str:
    """Uppercase the first character and lowercase the rest ("XML" -> "Xml")."""
    if not word:
        return word
    return word[0].upper() + word[1:].lower()


def to_camel_case(words: Sequence[str]) -> str:
    if not words:
        return ""
    return words[0].lower() + "".join(capitalize(word) for word in words[1:])


def to_pascal_case(words: Sequence[str]) -> str:
    return "".join(capitalize(word) for word in words)


def to_snake_case(words: Sequence[str]) -> str:
    return "_".join(word.lower() for word in words)


def to_kebab_case(words: Sequence[str]) -> str:
    return "-".join(word.lower() for word in words)


def to_screaming_snake_case(words: Sequence[str]) -> str:
    return "_".join(word.upper() for word in words)


RENDERERS = {
    CAMEL_CASE: to_camel_case,
    PASCAL_CASE: to_pascal_case,
    SNAKE_CASE: to_snake_case,
    KEBAB_CASE: to_kebab_case,
    SCREAMING_SNAKE_CASE: to_screaming_snake_case,
}


def render(words: Sequence[str], convention: str) -> str:
    """Join words into a single identifier under the given convention.

    Args:
        words: Ordered words, any casing
        convention: Convention tag or alias

    Returns:
        The assembled identifier

    Examples:
        >>> render(['xml', 'http', 'request'], 'PascalCase')
        'XmlHttpRequest'
        >>> render(['my', 'variable'], 'SCREAMING_SNAKE_CASE')
        'MY_VARIABLE'
    """
    return RENDERERS[normalize_convention(convention)](list(words))


def convert(identifier: str, convention: str) -> str:
    """Convert an identifier to the given convention.

    Examples:
        >>> convert('XMLHttpRequest', 'snake_case')
        'xml_http_request'
        >>> convert('my-variable', 'SCREAMING_SNAKE_CASE')
        'MY_VARIABLE'
    """
    return render(tokenize(identifier), convention)
