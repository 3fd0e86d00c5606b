"""Utility functions for Variable Formatter."""

import datetime
import sys


class DebugContext:
    """Context manager for debug output"""

    def __init__(self, enabled=False):
        """Initialize debug context with optional enabled state."""
        self.enabled = enabled

    def print(self, *args, **kwargs):
        """Print debug messages with [DEBUG] prefix and timestamp when enabled"""
        if self.enabled:
            timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            debug_prefix = f"[DEBUG] {timestamp}"

            if args:
                first_arg = f"{debug_prefix} {args[0]}"
                print(first_arg, *args[1:], file=sys.stderr, **kwargs)
            else:
                print(debug_prefix, file=sys.stderr, **kwargs)

    def enable(self):
        """Enable debug output"""
        self.enabled = True

    def disable(self):
        """Disable debug output"""
        self.enabled = False


# Global debug context
_debug_context = DebugContext()


def debug_print(*args, **kwargs):
    """Print debug messages with [DEBUG] prefix and timestamp when debug mode is enabled"""
    _debug_context.print(*args, **kwargs)


def set_debug_enabled(value):
    """Set debug mode on or off"""
    if value:
        _debug_context.enable()
    else:
        _debug_context.disable()


def get_debug_enabled():
    """Get current debug mode state"""
    return _debug_context.enabled


def sanitize_input(value):
    """Strip surrounding whitespace and control characters from a CLI argument.

    Internal whitespace is kept: the tokenizer treats it as a word separator.
    """
    if not isinstance(value, str):
        return str(value)
    return "".join(ch for ch in value if ch.isprintable() or ch in " \t").strip()


def parse_range(text):
    """Parse a ``START:END`` selection argument into a tuple of ints.

    Examples:
    - "0:5" -> (0, 5)
    - "12:12" -> (12, 12)

    Raises:
        ValueError: if the text is not two non-negative integers with START <= END
    """
    start_text, sep, end_text = text.partition(":")
    if not sep:
        raise ValueError(f"Selection '{text}' must look like START:END")
    try:
        start, end = int(start_text), int(end_text)
    except ValueError:
        raise ValueError(f"Selection '{text}' must use integer offsets") from None
    if start < 0 or end < start:
        raise ValueError(f"Selection '{text}' is not a valid range")
    return start, end
