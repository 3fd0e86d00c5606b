"""Tests for debug output and argument helpers."""

import pytest

from varformat.utils import (
    DebugContext,
    debug_print,
    get_debug_enabled,
    parse_range,
    sanitize_input,
    set_debug_enabled,
)


@pytest.mark.unit
class TestDebugOutput:
    def test_disabled_context_prints_nothing(self, capsys):
        DebugContext().print("hidden")
        assert capsys.readouterr().err == ""

    def test_enabled_context_prefixes_messages(self, capsys):
        context = DebugContext(enabled=True)
        context.print("visible", 42)
        err = capsys.readouterr().err
        assert err.startswith("[DEBUG] ")
        assert "visible 42" in err

    def test_module_level_toggle(self, capsys):
        set_debug_enabled(True)
        assert get_debug_enabled()
        debug_print("now you see me")
        set_debug_enabled(False)
        debug_print("now you don't")
        err = capsys.readouterr().err
        assert "now you see me" in err
        assert "now you don't" not in err


@pytest.mark.unit
class TestSanitizeInput:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("  myVar  ", "myVar"),
            ("my var", "my var"),
            ("my\x00Var", "myVar"),
            ("name\n", "name"),
            (42, "42"),
        ],
    )
    def test_sanitize(self, value, expected):
        assert sanitize_input(value) == expected


@pytest.mark.unit
class TestParseRange:
    @pytest.mark.parametrize("text,expected", [("0:5", (0, 5)), ("12:12", (12, 12))])
    def test_valid(self, text, expected):
        assert parse_range(text) == expected

    @pytest.mark.parametrize("text", ["5", "a:b", "5:2", "-1:3", ":"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_range(text)
