"""
Variable Formatter - convert identifiers between naming conventions.

This package splits identifiers into words regardless of their original
convention and reassembles them as camelCase, PascalCase, snake_case,
kebab-case or SCREAMING_SNAKE_CASE, for single names, selections, or every
variable in a document.
"""

from .case_utils import CONVENTIONS, convert, render, tokenize
from .cli import main
from .core import format_all_variables, format_variable, is_valid_variable_name
from .reserved import is_reserved_word
from .utils import debug_print

__version__ = "1.0.0"
__all__ = [
    "CONVENTIONS",
    "convert",
    "debug_print",
    "format_all_variables",
    "format_variable",
    "is_reserved_word",
    "is_valid_variable_name",
    "main",
    "render",
    "tokenize",
]
