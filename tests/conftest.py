"""Shared fixtures for Variable Formatter tests."""

import pytest

from varformat.utils import set_debug_enabled

SAMPLE_JS_DOCUMENT = """\
let my_variable_name = 'test';
let MyVariableName = 'test';
const CONSTANT_VALUE = 42;

function calculate_total_price(item_list) {
    return item_list.length;
}

class user_profile_manager {
    constructor() {}
}
"""


@pytest.fixture
def sample_js_document():
    return SAMPLE_JS_DOCUMENT


@pytest.fixture
def sample_js_file(tmp_path):
    path = tmp_path / "sample.js"
    path.write_text(SAMPLE_JS_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_debug_mode():
    """Debug mode is module-level state; keep it off between tests."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch):
    """Never pick up a .varformat.yaml from the developer's machine."""
    monkeypatch.setattr("varformat.config.default_config_paths", lambda: [])
