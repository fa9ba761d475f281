import pytest

from tablethemes.config import ThemeConfig, load_config

import settings.filesystem as fs_settings


class TestThemeConfig:

    def test_defaults(self):
        config = ThemeConfig.default()

        assert config.themes_file is None
        assert config.include_nested_tables
        assert config.shading_pattern == "clear"
        assert config.log_level == "INFO"

    def test_log_level_is_normalized(self):
        assert ThemeConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            ThemeConfig(log_level="verbose")

    def test_invalid_shading_pattern(self):
        with pytest.raises(ValueError):
            ThemeConfig(shading_pattern="dots")


class TestLoadConfig:

    def test_default_config_file(self):
        config = load_config(fs_settings.DEFAULT_CONFIG_LOC)
        assert config == ThemeConfig.default()

    def test_sections_are_flattened(self, tmp_path):
        fp = tmp_path / "config.yaml"
        fp.write_text(
            "themes:\n"
            "  THEMES_FILE: my_themes.yaml\n"
            "docx:\n"
            "  INCLUDE_NESTED_TABLES: false\n"
            "  SHADING_PATTERN: solid\n"
            "logging:\n"
            "  LOG_LEVEL: warning\n"
        )

        config = load_config(fp)

        assert config == ThemeConfig(
            themes_file="my_themes.yaml",
            include_nested_tables=False,
            shading_pattern="solid",
            log_level="WARNING"
        )

    def test_empty_sections(self, tmp_path):
        fp = tmp_path / "config.yaml"
        fp.write_text("themes:\ndocx:\n")

        assert load_config(fp) == ThemeConfig.default()

    def test_unknown_key(self, tmp_path):
        fp = tmp_path / "config.yaml"
        fp.write_text("docx:\n  TABLE_STYLE: grid\n")

        with pytest.raises(TypeError):
            load_config(fp)
