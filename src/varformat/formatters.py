"""Output formatting for Variable Formatter."""

from __future__ import annotations

import json
from typing import List

from tabulate import tabulate

from .core import FormatResult
from .utils import debug_print


def _truncate(value, width=60):
    value = str(value)
    if len(value) > width:
        return value[: width - 3] + "..."
    return value


def format_preview_table(result: FormatResult) -> str:
    """Format a preview as a convention / result / change table.

    Examples:
        camelCase   | myVariable | (no change)
        snake_case  | my_variable | myVariable -> my_variable
    """
    if not result.conversions:
        return result.message

    table_data = []
    for convention, converted in result.conversions.items():
        if converted == result.original:
            change = "(no change)"
        else:
            change = f"{result.original} -> {converted}"
        table_data.append([convention, converted, change])

    return tabulate(table_data, headers=["Convention", "Result", "Change"], tablefmt="grid")


def format_conversions_table(results: List[FormatResult]) -> str:
    """Format single-name conversions, one row per input name."""
    if not results:
        return "No results found."

    table_data = []
    for position, result in enumerate(results, start=1):
        converted = result.converted if result.converted is not None else ""
        table_data.append([position, result.original, converted, result.status])

    return tabulate(table_data, headers=["#", "Original", "Converted", "Status"], tablefmt="grid")


def format_edits_table(document: str, result: FormatResult) -> str:
    """Format the edits of a bulk or multi-selection result in document order."""
    if not result.edits:
        return result.message

    table_data = []
    for edit in sorted(result.edits, key=lambda e: e.start):
        original = document[edit.start : edit.end]
        table_data.append(
            [f"{edit.start}:{edit.end}", _truncate(original), _truncate(edit.replacement)]
        )

    debug_print(f"Rendering {len(table_data)} edits as table")  # pragma: no mutate
    return tabulate(table_data, headers=["Range", "Original", "Replacement"], tablefmt="grid")


def format_json_output(results) -> str:
    """Format one or more results as JSON output"""
    if isinstance(results, FormatResult):
        results = [results]
    return json.dumps({"results": [result.to_dict() for result in results]}, indent=2)
