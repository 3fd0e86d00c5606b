"""Default naming conventions per language and user configuration loading."""

import os
from typing import Any, Dict, Optional

import yaml

from .case_utils import CAMEL_CASE, KEBAB_CASE, PASCAL_CASE, SNAKE_CASE, normalize_convention
from .utils import debug_print

DEFAULT_CONVENTION = CAMEL_CASE

LANGUAGE_CONVENTIONS = {
    "javascript": CAMEL_CASE,
    "typescript": CAMEL_CASE,
    "java": CAMEL_CASE,
    "csharp": PASCAL_CASE,
    "python": SNAKE_CASE,
    "rust": SNAKE_CASE,
    "c": SNAKE_CASE,
    "cpp": SNAKE_CASE,
    "css": KEBAB_CASE,
    "scss": KEBAB_CASE,
    "less": KEBAB_CASE,
    "html": KEBAB_CASE,
}

CONFIG_FILENAME = ".varformat.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


def default_config_paths():
    """Config files searched when no path is given, first match wins."""
    return [
        os.path.join(os.getcwd(), CONFIG_FILENAME),
        os.path.join(os.path.expanduser("~"), CONFIG_FILENAME),
    ]


def get_recommended_convention(
    language_id: Optional[str], overrides: Optional[Dict[str, str]] = None
) -> str:
    """Get the recommended naming convention for a language.

    Args:
        language_id: Editor-style language id such as 'python' or 'csharp'
        overrides: Optional language -> convention mapping checked first

    Returns:
        Convention tag, camelCase for unknown languages
    """
    if not language_id:
        return DEFAULT_CONVENTION

    language = language_id.strip().lower()
    if overrides and language in overrides:
        return overrides[language]
    return LANGUAGE_CONVENTIONS.get(language, DEFAULT_CONVENTION)


def _validate_config(data: Any, source: str) -> Dict[str, Any]:
    """Normalise raw YAML data into {'languages': {...}, 'default_convention': ...}."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: top level must be a mapping")

    config: Dict[str, Any] = {}
    try:
        languages = data.get("languages") or {}
        if not isinstance(languages, dict):
            raise ConfigError(f"{source}: 'languages' must be a mapping")
        config["languages"] = {
            str(language).lower(): normalize_convention(str(convention))
            for language, convention in languages.items()
        }

        if data.get("default_convention"):
            config["default_convention"] = normalize_convention(
                str(data["default_convention"])
            )
    except ValueError as e:
        raise ConfigError(f"{source}: {e}") from e

    return config


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load user configuration from YAML.

    Args:
        path: Explicit config file. When omitted the default locations are
            searched and a missing file simply yields an empty config.

    Returns:
        dict with optional keys 'languages' and 'default_convention'

    Raises:
        ConfigError: explicit file missing, unreadable YAML, or bad values
    """
    if path:
        candidates = [path]
    else:
        candidates = [p for p in default_config_paths() if os.path.isfile(p)]
        if not candidates:
            debug_print("No config file found, using built-in defaults")  # pragma: no mutate
            return {}

    config_path = candidates[0]
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    config = _validate_config(data, config_path)
    debug_print(f"Loaded config from {config_path}: {config}")  # pragma: no mutate
    return config


def resolve_convention(
    convention: Optional[str] = None,
    language_id: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
) -> str:
    """Pick the convention to use: explicit, then language default, then config default."""
    config = config or {}
    if convention:
        debug_print(f"Using user-specified convention: {convention}")  # pragma: no mutate
        return normalize_convention(convention)

    if language_id:
        recommended = get_recommended_convention(language_id, config.get("languages"))
        debug_print(
            f"Using recommended convention for {language_id}: {recommended}"
        )  # pragma: no mutate
        return recommended

    if config.get("default_convention"):
        debug_print(
            f"Using config default convention: {config['default_convention']}"
        )  # pragma: no mutate
        return config["default_convention"]

    return DEFAULT_CONVENTION
