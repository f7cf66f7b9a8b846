"""Unit tests for generating CLI arguments from options dataclasses."""

import argparse

import pytest

from headless_highlighter.cli import create_parser
from headless_highlighter.cli.builder import OptionsArgumentBuilder, parse_json_object
from headless_highlighter.exceptions import ValidationError
from headless_highlighter.options import (
    HtmlRendererOptions,
    JinjaRendererOptions,
    MarkersRendererOptions,
    MatchOptions,
    PresentationOptions,
)


def build(options_class, argv, **kwargs):
    parser = argparse.ArgumentParser()
    builder = OptionsArgumentBuilder()
    builder.add_options_arguments(parser, options_class, **kwargs)
    return builder, parser, parser.parse_args(argv)


def flags(parser):
    return {option for action in parser._actions for option in action.option_strings}


@pytest.mark.unit
@pytest.mark.cli
class TestArgumentGeneration:
    """Flags derived from field metadata."""

    def test_excluded_fields_have_no_flag(self):
        _, parser, _ = build(MatchOptions, [])
        assert flags(parser) == {"-h", "--help", "--case-sensitive", "--auto-escape"}

    def test_cli_name_metadata_sets_flag(self):
        builder, parser, args = build(PresentationOptions, ["--class", "hl", "--active-class", "on"])
        assert {"--class", "--active-class", "--active-index", "--container-tag", "--mark-tag"} <= flags(parser)
        assert "--on-word-click" not in flags(parser)
        assert "--container-attrs" not in flags(parser)
        assert builder.dest_to_cli_flag["highlight_class_name"] == "--class"
        assert args.highlight_class_name == "hl"
        assert args.active_class_name == "on"

    def test_help_comes_from_metadata(self):
        _, parser, _ = build(PresentationOptions, [])
        help_by_flag = {action.option_strings[0]: action.help for action in parser._actions}
        assert help_by_flag["--class"] == "CSS class applied to highlighted chunks"
        assert help_by_flag["--mark-tag"] == "Tag of the element wrapping each highlight [advanced]"
        assert help_by_flag["--highlight-style"].endswith("[advanced] (JSON format)")

    def test_int_metadata_type(self):
        _, _, args = build(PresentationOptions, ["--active-index", "3"])
        assert args.active_index == 3

    def test_json_mapping_fields(self):
        _, _, args = build(PresentationOptions, ["--highlight-style", '{"color": "red"}'])
        assert args.highlight_style == {"color": "red"}
        assert args.active_style is None

    def test_true_default_becomes_negated_switch(self):
        _, parser, args = build(HtmlRendererOptions, ["--html-no-escape-text"], format_prefix="html")
        assert "--html-no-include-data-attributes" in flags(parser)
        assert args.html_escape_text is False
        assert args.html_include_data_attributes is True

    def test_dest_prefix_without_flag_prefix(self):
        _, parser, args = build(JinjaRendererOptions, ["--template", "t.j2", "--no-autoescape"], dest_prefix="jinja")
        assert {"--template", "--template-string", "--no-strict-undefined"} <= flags(parser)
        assert args.jinja_template_file == "t.j2"
        assert args.jinja_autoescape is False

    def test_rejects_non_dataclass(self):
        with pytest.raises(TypeError):
            OptionsArgumentBuilder().add_options_arguments(argparse.ArgumentParser(), dict)

    def test_full_parser_has_renderer_groups(self):
        parser_flags = flags(create_parser())
        assert {"--markers-open-marker", "--terminal-plain-style", "--html-highlight-index-attribute"} <= parser_flags
        assert "--sanitize" in parser_flags


@pytest.mark.unit
@pytest.mark.cli
class TestOptionsFromArgs:
    """Options rebuilt from parsed arguments."""

    def test_round_trip_with_prefix(self):
        builder, _, args = build(MarkersRendererOptions, ["--markers-open-marker", "*"], format_prefix="markers")
        options = builder.options_from_args(MarkersRendererOptions, args, "markers")
        assert options.open_marker == "*"
        assert options.close_marker == MarkersRendererOptions().close_marker

    def test_unset_values_keep_dataclass_defaults(self):
        builder, _, args = build(PresentationOptions, [])
        assert builder.options_from_args(PresentationOptions, args) == PresentationOptions()

    def test_overrides_supply_excluded_fields(self):
        builder, _, args = build(MatchOptions, ["--auto-escape"])
        sanitize = str.lower
        options = builder.options_from_args(MatchOptions, args, sanitize=sanitize)
        assert options.auto_escape is True
        assert options.sanitize is sanitize

    def test_invalid_values_raise_validation_error(self):
        builder, _, args = build(PresentationOptions, ["--mark-tag", ""])
        with pytest.raises(ValidationError, match="Invalid PresentationOptions"):
            builder.options_from_args(PresentationOptions, args)


@pytest.mark.unit
def test_parse_json_object():
    assert parse_json_object('{"a": 1}') == {"a": 1}
    with pytest.raises(argparse.ArgumentTypeError):
        parse_json_object("[1, 2]")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_json_object("{not json")
