"""Unit tests for CLI configuration discovery, loading and precedence."""

import json

import pytest

from headless_highlighter.cli import apply_config_defaults, apply_env_vars_to_parser, create_parser
from headless_highlighter.cli.config import (
    discover_config_file,
    find_config_in_parents,
    get_env_var_value,
    load_config_file,
    normalize_key,
    parse_bool,
)
from headless_highlighter.exceptions import ConfigError


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Parsing of the supported configuration formats."""

    def test_toml(self, tmp_path):
        path = tmp_path / ".headless-highlighter.toml"
        path.write_text('case-sensitive = true\nwords = ["fox"]\n', encoding="utf-8")
        assert load_config_file(path) == {"case_sensitive": True, "words": ["fox"]}

    def test_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("output-format: markers\nactive-index: 2\n", encoding="utf-8")
        assert load_config_file(str(path)) == {"output_format": "markers", "active_index": 2}

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_json(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"auto_escape": True}), encoding="utf-8")
        assert load_config_file(path) == {"auto_escape": True}

    def test_pyproject_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.headless-highlighter]\nsanitize = "diacritics"\n')
        assert load_config_file(path) == {"sanitize": "diacritics"}

    def test_pyproject_without_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n')
        assert load_config_file(path) == {}

    @pytest.mark.parametrize(
        "filename,content,message",
        [
            ("bad.json", "{not json", "Invalid JSON"),
            ("list.json", "[1, 2]", "must contain an object"),
            ("bad.toml", "= nope", "Invalid TOML"),
            ("bad.yaml", "a: [unclosed", "Invalid YAML"),
            ("list.yaml", "- a\n- b\n", "must contain a mapping"),
            ("settings.ini", "[x]", "Unsupported config file format"),
        ],
    )
    def test_invalid_files(self, tmp_path, filename, content, message):
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError, match=message) as exc_info:
            load_config_file(path)
        assert exc_info.value.config_path == str(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="does not exist"):
            load_config_file(tmp_path / "missing.toml")


@pytest.mark.unit
@pytest.mark.cli
class TestDiscovery:
    """Config file discovery in parent and home directories."""

    def test_found_in_parent(self, tmp_path):
        config = tmp_path / ".headless-highlighter.yaml"
        config.write_text("auto-escape: true\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config.resolve()

    def test_pyproject_with_section_is_found(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.headless-highlighter]\nauto-escape = true\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == pyproject.resolve()

    def test_home_fallback(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        home = tmp_path / "home"
        home.mkdir()
        config = home / ".headless-highlighter.toml"
        config.write_text("auto-escape = true\n", encoding="utf-8")

        result = discover_config_file(start_dir=project, home_dir=home)
        assert result == config

    def test_nothing_found(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        home = tmp_path / "home"
        home.mkdir()
        assert discover_config_file(start_dir=project, home_dir=home) is None


@pytest.mark.unit
@pytest.mark.cli
class TestConfigPrecedence:
    """Config and environment values become parser defaults."""

    def test_config_values_become_defaults(self):
        parser = create_parser()
        words = apply_config_defaults(
            parser,
            {"case_sensitive": "yes", "active_index": "2", "output_format": "markers", "words": "fox"},
            "test.toml",
        )
        args = parser.parse_args(["text"])
        assert words == ["fox"]
        assert args.case_sensitive is True
        assert args.active_index == 2
        assert args.output_format == "markers"

    def test_flags_override_config(self):
        parser = create_parser()
        apply_config_defaults(parser, {"output_format": "markers"}, "test.toml")
        assert parser.parse_args(["text", "-f", "json"]).output_format == "json"

    def test_invalid_choice_raises(self):
        with pytest.raises(ConfigError, match="invalid choice"):
            apply_config_defaults(create_parser(), {"output_format": "pdf"}, "test.toml")

    def test_boolean_active_index_raises(self):
        with pytest.raises(ConfigError, match="expected an integer"):
            apply_config_defaults(create_parser(), {"active_index": True}, "test.toml")

    def test_negated_switch_is_set_by_destination(self):
        parser = create_parser()
        apply_config_defaults(parser, {"html_escape_text": False, "html_include_data_attributes": "no"}, "test.toml")
        args = parser.parse_args(["text"])
        assert args.html_escape_text is False
        assert args.html_include_data_attributes is False

    def test_mapping_values(self):
        parser = create_parser()
        apply_config_defaults(parser, {"highlight_style": {"color": "red"}}, "test.toml")
        apply_env_vars_to_parser(parser, {"HEADLESS_HIGHLIGHTER_ACTIVE_STYLE": '{"color": "blue"}'})
        args = parser.parse_args(["text"])
        assert args.highlight_style == {"color": "red"}
        assert args.active_style == {"color": "blue"}

    def test_invalid_mapping_value_raises(self):
        with pytest.raises(ConfigError, match="expected a table"):
            apply_config_defaults(create_parser(), {"highlight_style": ["red"]}, "test.toml")

    def test_renderer_options_from_env(self):
        parser = create_parser()
        apply_env_vars_to_parser(parser, {"HEADLESS_HIGHLIGHTER_MARKERS_OPEN_MARKER": "*"})
        assert parser.parse_args(["text"]).markers_open_marker == "*"

    def test_unknown_key_warns(self, caplog):
        with caplog.at_level("WARNING", logger="headless_highlighter"):
            apply_config_defaults(create_parser(), {"colour": "red", "text": "x"}, "test.toml")
        assert "'colour'" in caplog.text
        assert "'text'" in caplog.text

    def test_env_vars_become_defaults(self):
        parser = create_parser()
        apply_env_vars_to_parser(
            parser,
            {"HEADLESS_HIGHLIGHTER_AUTO_ESCAPE": "true", "HEADLESS_HIGHLIGHTER_HIGHLIGHT_CLASS_NAME": "hl"},
        )
        args = parser.parse_args(["text"])
        assert args.auto_escape is True
        assert args.highlight_class_name == "hl"

    def test_env_overrides_config_and_flags_override_env(self):
        parser = create_parser()
        apply_config_defaults(parser, {"output_format": "markers"}, "test.toml")
        apply_env_vars_to_parser(parser, {"HEADLESS_HIGHLIGHTER_OUTPUT_FORMAT": "json"})
        assert parser.parse_args(["text"]).output_format == "json"
        assert parser.parse_args(["text", "-f", "terminal"]).output_format == "terminal"

    def test_invalid_env_value_is_ignored(self, caplog):
        parser = create_parser()
        with caplog.at_level("WARNING", logger="headless_highlighter"):
            apply_env_vars_to_parser(parser, {"HEADLESS_HIGHLIGHTER_ACTIVE_INDEX": "first"})
        assert parser.parse_args(["text"]).active_index is None
        assert "Ignoring environment variable" in caplog.text


@pytest.mark.unit
def test_normalize_key():
    assert normalize_key(" case-sensitive ") == "case_sensitive"


@pytest.mark.unit
@pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("YES", True), ("on", True), ("no", False)])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


@pytest.mark.unit
def test_get_env_var_value():
    environ = {"HEADLESS_HIGHLIGHTER_LOG_LEVEL": "DEBUG"}
    assert get_env_var_value("log_level", environ) == "DEBUG"
    assert get_env_var_value("log-level", environ) == "DEBUG"
    assert get_env_var_value("log_file", environ) is None
