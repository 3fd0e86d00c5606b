"""Core variable formatting operations for Variable Formatter.

Everything here works on plain strings and offsets: the caller supplies text
(a name, a document, selection ranges) and receives results and edits back.
"""

import re
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from .case_utils import CONVENTIONS, convert, normalize_convention
from .reserved import is_reserved_word
from .utils import debug_print

CHANGED = "changed"
NO_INPUT = "no_input"
INVALID_IDENTIFIER = "invalid_identifier"
NO_OP = "no_op"
NO_CANDIDATES = "no_candidates"

VARIABLE_NAME_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
# ASCII word boundaries, so "$" and non-ASCII letters never count as word characters
VARIABLE_SCAN_PATTERN = re.compile(r"\b[A-Za-z_$][A-Za-z0-9_$]*\b", re.ASCII)


class Match(NamedTuple):
    text: str
    start: int
    end: int


class Edit(NamedTuple):
    start: int
    end: int
    replacement: str


class FormatResult:
    """Outcome of a formatting request"""

    def __init__(self, status: str, convention: Optional[str] = None, original: str = "") -> None:
        """Initialize FormatResult with empty edit tracking."""
        self.status: str = status
        self.convention: Optional[str] = convention
        self.original: str = original
        self.converted: Optional[str] = None
        self.edits: List[Edit] = []
        self.invalid_selections: List[int] = []
        self.candidates: int = 0
        self.conversions: Dict[str, str] = {}
        self.multiple: bool = False

    @property
    def changed(self) -> bool:
        return self.status == CHANGED

    @property
    def ok(self) -> bool:
        """True for outcomes that are not user errors (changes and no-ops)."""
        return self.status in (CHANGED, NO_OP)

    @property
    def changed_count(self) -> int:
        return len(self.edits)

    @property
    def message(self) -> str:
        """User-facing description of the outcome."""
        if self.status == NO_INPUT:
            return "Please provide a variable name to format"
        if self.status == NO_CANDIDATES:
            return "No variables found in the current text"
        if self.status == INVALID_IDENTIFIER:
            if self.invalid_selections:
                return f"Invalid variable names in: {self.invalid_selection_labels()}"
            return f"'{self.original}' is not a valid variable name"
        if self.conversions:
            if self.status == NO_OP:
                return f"'{self.original}' is unchanged by every naming convention"
            return f"Previewed {len(self.conversions)} conventions for '{self.original}'"
        if self.multiple:
            if self.status == NO_OP:
                return f"All variables are already in {self.convention} format"
            return f"Converted {self.changed_count} variables to {self.convention}"
        if self.status == NO_OP:
            return f"Variable is already in {self.convention} format"
        return f"Variable formatted to {self.convention}: {self.converted}"

    def invalid_selection_labels(self) -> str:
        return ", ".join(f"Selection {position}" for position in self.invalid_selections)

    def to_dict(self) -> Dict:
        data = {
            "status": self.status,
            "convention": self.convention,
            "original": self.original,
            "converted": self.converted,
            "message": self.message,
        }
        if self.multiple:
            data["candidates"] = self.candidates
            data["changed_count"] = self.changed_count
            data["edits"] = [edit._asdict() for edit in self.edits]
            data["invalid_selections"] = list(self.invalid_selections)
        if self.conversions:
            data["conversions"] = dict(self.conversions)
        return data

    def __repr__(self) -> str:
        return f"FormatResult(status={self.status!r}, convention={self.convention!r}, edits={len(self.edits)})"


def is_valid_variable_name(text: str) -> bool:
    """Check if a string is a valid variable name"""
    return bool(VARIABLE_NAME_PATTERN.match(text.strip()))


def _check_input(text: str, convention: Optional[str]) -> Optional[FormatResult]:
    """Return an error result for empty or malformed input, else None."""
    if not text:
        debug_print("Empty input, nothing to format")  # pragma: no mutate
        return FormatResult(NO_INPUT, convention, text)
    if not is_valid_variable_name(text):
        debug_print(f"Rejected '{text}': not a valid variable name")  # pragma: no mutate
        return FormatResult(INVALID_IDENTIFIER, convention, text)
    return None


def format_variable(text: str, convention: str) -> FormatResult:
    """Format a single variable name.

    Args:
        text: Selected text, validated before conversion
        convention: Target convention tag or alias

    Returns:
        FormatResult with status CHANGED, NO_OP, NO_INPUT or INVALID_IDENTIFIER
    """
    convention = normalize_convention(convention)
    error = _check_input(text, convention)
    if error:
        return error

    converted = convert(text, convention)
    result = FormatResult(CHANGED if converted != text else NO_OP, convention, text)
    result.converted = converted
    debug_print(f"Formatted '{text}' -> '{converted}' ({convention})")  # pragma: no mutate
    return result


def preview_variable(text: str) -> FormatResult:
    """Convert one variable name to every convention for side-by-side comparison.

    Returns:
        FormatResult whose ``conversions`` maps each convention, in CONVENTIONS
        order, to the converted name. Status is NO_OP when no convention
        changes the name.
    """
    error = _check_input(text, None)
    if error:
        return error

    conversions = {convention: convert(text, convention) for convention in CONVENTIONS}
    changed = any(converted != text for converted in conversions.values())
    result = FormatResult(CHANGED if changed else NO_OP, None, text)
    result.conversions = conversions
    return result


def _selection_in_range(document: str, start: int, end: int) -> bool:
    return 0 <= start <= end <= len(document)


def format_selections(
    document: str, selections: Sequence[Tuple[int, int]], convention: str
) -> FormatResult:
    """Format multiple selected ranges of a document.

    With zero or one selection this behaves like format_variable on that range.
    Invalid selections (empty, out of range, not a variable name) are reported
    by 1-based position while the valid ones still produce edits.

    Returns:
        FormatResult with edits ordered by descending start offset
    """
    convention = normalize_convention(convention)

    if len(selections) <= 1:
        if not selections:
            return FormatResult(NO_INPUT, convention)
        start, end = selections[0]
        if not _selection_in_range(document, start, end):
            debug_print(f"Selection {start}:{end} is out of range")  # pragma: no mutate
            result = FormatResult(INVALID_IDENTIFIER, convention, document[start:end])
            result.invalid_selections.append(1)
            return result
        result = format_variable(document[start:end], convention)
        if result.changed:
            result.edits.append(Edit(start, end, result.converted))
        return result

    result = FormatResult(NO_OP, convention)
    result.multiple = True
    result.candidates = len(selections)

    for position in range(len(selections), 0, -1):
        start, end = selections[position - 1]
        if not _selection_in_range(document, start, end):
            debug_print(f"Selection {position} ({start}:{end}) is out of range")  # pragma: no mutate
            result.invalid_selections.append(position)
            continue

        selected_text = document[start:end]
        if not selected_text or not is_valid_variable_name(selected_text):
            result.invalid_selections.append(position)
            continue

        converted = convert(selected_text, convention)
        if converted != selected_text:
            result.edits.append(Edit(start, end, converted))

    result.invalid_selections.sort()
    result.edits.sort(key=lambda edit: edit.start, reverse=True)

    if result.edits:
        result.status = CHANGED
    elif len(result.invalid_selections) == len(selections):
        result.status = INVALID_IDENTIFIER

    debug_print(
        f"Selections: {len(result.edits)} changed, "
        f"{len(result.invalid_selections)} invalid of {len(selections)}"
    )  # pragma: no mutate
    return result


def find_all_variables(text: str) -> List[Match]:
    """Find all identifier-shaped words in the text, skipping reserved words."""
    matches = []
    for match in VARIABLE_SCAN_PATTERN.finditer(text):
        variable_name = match.group(0)
        if is_reserved_word(variable_name) or not is_valid_variable_name(variable_name):
            continue
        matches.append(Match(variable_name, match.start(), match.end()))

    debug_print(f"Found {len(matches)} variables in {len(text)} characters")  # pragma: no mutate
    return matches


def format_all_variables(text: str, convention: str) -> FormatResult:
    """Format every variable found in a document.

    Returns:
        FormatResult with NO_CANDIDATES when the scan finds nothing, otherwise
        one edit per changed variable in descending start order
    """
    convention = normalize_convention(convention)
    matches = find_all_variables(text)

    if not matches:
        return FormatResult(NO_CANDIDATES, convention)

    result = FormatResult(NO_OP, convention)
    result.multiple = True
    result.candidates = len(matches)

    # Back to front so each edit's offsets refer to still-untouched text
    for match in reversed(matches):
        formatted = convert(match.text, convention)
        if formatted != match.text:
            result.edits.append(Edit(match.start, match.end, formatted))

    if result.edits:
        result.status = CHANGED
    return result


def apply_edits(text: str, edits: Sequence[Edit]) -> str:
    """Apply edits to text as one unit.

    Edits are applied in descending start order so the offsets of edits not
    yet applied stay valid.

    Raises:
        ValueError: if an edit is out of range or overlaps another edit
    """
    ordered = sorted(edits, key=lambda edit: edit.start, reverse=True)
    limit = len(text)
    for edit in ordered:
        if edit.start < 0 or edit.start > edit.end:
            raise ValueError(f"Invalid edit range {edit.start}:{edit.end}")
        if edit.end > limit:
            raise ValueError(f"Edit {edit.start}:{edit.end} overlaps another edit or the end of text")
        limit = edit.start

    for edit in ordered:
        text = text[: edit.start] + edit.replacement + text[edit.end :]
    return text
