"""Tests for language defaults and YAML configuration."""

from unittest.mock import patch

import pytest

from varformat.config import (
    ConfigError,
    LANGUAGE_CONVENTIONS,
    get_recommended_convention,
    load_config,
    resolve_convention,
)


@pytest.mark.unit
class TestGetRecommendedConvention:
    @pytest.mark.parametrize(
        "language,expected",
        [
            ("javascript", "camelCase"),
            ("typescript", "camelCase"),
            ("java", "camelCase"),
            ("csharp", "PascalCase"),
            ("python", "snake_case"),
            ("rust", "snake_case"),
            ("c", "snake_case"),
            ("cpp", "snake_case"),
            ("css", "kebab-case"),
            ("scss", "kebab-case"),
            ("less", "kebab-case"),
            ("html", "kebab-case"),
        ],
    )
    def test_builtin_table(self, language, expected):
        assert get_recommended_convention(language) == expected

    @pytest.mark.parametrize("language", ["go", "haskell", "", None])
    def test_unknown_language_defaults_to_camel_case(self, language):
        assert get_recommended_convention(language) == "camelCase"

    def test_language_id_is_case_insensitive(self):
        assert get_recommended_convention("Python") == "snake_case"

    def test_overrides_take_precedence(self):
        overrides = {"python": "camelCase", "go": "PascalCase"}
        assert get_recommended_convention("python", overrides) == "camelCase"
        assert get_recommended_convention("go", overrides) == "PascalCase"
        assert get_recommended_convention("rust", overrides) == "snake_case"

    def test_table_has_twelve_languages(self):
        assert len(LANGUAGE_CONVENTIONS) == 12


@pytest.mark.unit
class TestLoadConfig:
    def test_reads_languages_and_default(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "default_convention: snake\n"
            "languages:\n"
            "  Go: PascalCase\n"
            "  javascript: kebab\n"
        )

        config = load_config(str(path))

        assert config["default_convention"] == "snake_case"
        assert config["languages"] == {"go": "PascalCase", "javascript": "kebab-case"}

    def test_empty_file_is_empty_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == {}

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read config file"):
            load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("languages: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(str(path))

    def test_unknown_convention_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("default_convention: Title Case\n")
        with pytest.raises(ConfigError, match="Unknown naming convention"):
            load_config(str(path))

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(str(path))

    def test_languages_must_be_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("languages: python\n")
        with pytest.raises(ConfigError, match="'languages' must be a mapping"):
            load_config(str(path))

    def test_no_default_file_is_empty_config(self, tmp_path):
        with patch(
            "varformat.config.default_config_paths", return_value=[str(tmp_path / "nope.yaml")]
        ):
            assert load_config() == {}

    def test_first_existing_default_file_wins(self, tmp_path):
        first = tmp_path / "first.yaml"
        second = tmp_path / "second.yaml"
        second.write_text("default_convention: kebab\n")
        with patch(
            "varformat.config.default_config_paths", return_value=[str(first), str(second)]
        ):
            assert load_config() == {"languages": {}, "default_convention": "kebab-case"}


@pytest.mark.unit
class TestResolveConvention:
    CONFIG = {"default_convention": "snake_case", "languages": {"go": "PascalCase"}}

    def test_explicit_convention_wins(self):
        assert resolve_convention("kebab", "python", self.CONFIG) == "kebab-case"

    def test_language_before_config_default(self):
        assert resolve_convention(None, "csharp", self.CONFIG) == "PascalCase"
        assert resolve_convention(None, "go", self.CONFIG) == "PascalCase"

    def test_config_default_without_language(self):
        assert resolve_convention(None, None, self.CONFIG) == "snake_case"

    def test_falls_back_to_camel_case(self):
        assert resolve_convention() == "camelCase"

    def test_invalid_explicit_convention_raises(self):
        with pytest.raises(ValueError):
            resolve_convention("nonsense")
