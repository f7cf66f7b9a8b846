#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for headless-highlighter.

Examples
--------
Highlight words in a string as HTML:
    $ headless-highlighter "The quick brown fox" -w quick -w fox

Grep-style markers for a file, matching a phrase word by word:
    $ headless-highlighter --input notes.txt -w "quick fox" --split -f markers

Colored terminal output, accent-insensitive:
    $ headless-highlighter "Crème brûlée" -w creme --sanitize diacritics -f terminal

Render through a Jinja2 template:
    $ headless-highlighter --input page.txt -w error -f template --template hl.html.j2

Use environment variables for defaults:
    $ export HEADLESS_HIGHLIGHTER_CASE_SENSITIVE=true
    $ export HEADLESS_HIGHLIGHTER_OUTPUT_FORMAT=markers
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from headless_highlighter.chunks.finder import find_chunks
from headless_highlighter.chunks.types import Chunk, TextChunk
from headless_highlighter.cli.builder import OptionsArgumentBuilder, parse_json_object
from headless_highlighter.cli.config import (
    discover_config_file,
    get_env_var_value,
    load_config_file,
    parse_bool,
)
from headless_highlighter.constants import ENV_VAR_PREFIX, OUTPUT_FORMATS, SANITIZER_NAMES
from headless_highlighter.exceptions import ConfigError, HighlighterError, ValidationError
from headless_highlighter.logging_utils import configure_logging
from headless_highlighter.options.html import HtmlRendererOptions
from headless_highlighter.options.jinja import JinjaRendererOptions
from headless_highlighter.options.markers import MarkersRendererOptions
from headless_highlighter.options.match import MatchOptions
from headless_highlighter.options.presentation import PresentationOptions
from headless_highlighter.options.terminal import TerminalRendererOptions
from headless_highlighter.renderers.adapter import render_highlighted
from headless_highlighter.renderers.html import HtmlRenderer
from headless_highlighter.renderers.jinja import JinjaRenderer
from headless_highlighter.renderers.markers import MarkersRenderer
from headless_highlighter.renderers.terminal import TerminalRenderer
from headless_highlighter.utils.text import get_sanitizer, split_search_phrase

logger = logging.getLogger(__name__)

# Destinations that are never taken from config files or the environment
_NON_CONFIGURABLE = {"help", "text", "config", "no_config", "words"}

# (group title, options class, flag and destination prefix)
_RENDERER_OPTIONS = (
    ("html output", HtmlRendererOptions, "html"),
    ("markers output", MarkersRendererOptions, "markers"),
    ("terminal output", TerminalRendererOptions, "terminal"),
)


def create_parser(builder: Optional[OptionsArgumentBuilder] = None) -> argparse.ArgumentParser:
    """Build the argument parser.

    Matching, presentation and renderer flags are generated from the options
    dataclasses; ``--sanitize`` maps a name to a built-in sanitizer.
    """
    builder = builder or OptionsArgumentBuilder()
    parser = argparse.ArgumentParser(
        prog="headless-highlighter",
        description="Highlight occurrences of search words in text.",
        epilog=f"Any option can also be set with {ENV_VAR_PREFIX}<OPTION> or a .headless-highlighter.toml file.",
    )
    parser.add_argument("text", nargs="?", help="Text to highlight (reads --input or stdin when omitted)")
    parser.add_argument("-i", "--input", help="Read the text from a file ('-' for stdin)")
    parser.add_argument("-o", "--out", help="Write output to a file instead of stdout")
    parser.add_argument(
        "-w", "--word", dest="words", action="append", help="Search word or pattern (repeat for several words)"
    )
    parser.add_argument("--split", action="store_true", help="Split each --word on whitespace into separate words")

    matching = parser.add_argument_group("matching")
    builder.add_options_arguments(matching, MatchOptions)
    matching.add_argument(
        "--sanitize", choices=SANITIZER_NAMES, default="none", help="Normalize text and words before matching"
    )

    output = parser.add_argument_group("output")
    output.add_argument("-f", "--format", dest="output_format", choices=OUTPUT_FORMATS, default="html")
    builder.add_options_arguments(output, PresentationOptions)

    for title, options_class, prefix in _RENDERER_OPTIONS:
        builder.add_options_arguments(parser.add_argument_group(title), options_class, format_prefix=prefix)
    template = parser.add_argument_group("template output")
    builder.add_options_arguments(template, JinjaRendererOptions, dest_prefix="jinja")

    config = parser.add_argument_group("configuration")
    config.add_argument("--config", help="Configuration file (default: discovered automatically)")
    config.add_argument("--no-config", action="store_true", help="Do not load any configuration file")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument("--trace", action="store_true", help="Include timestamps and logger names in logs")
    return parser


def _coerce_for_action(action: argparse.Action, value: Any, source: str) -> Any:
    """Convert a config or environment value to what ``action`` would store.

    Values are keyed by destination, so ``html_escape_text = false`` sets the
    field even though its flag is ``--html-no-escape-text``.

    Raises
    ------
    ValueError
        If the value cannot be converted or is not an allowed choice

    """
    if isinstance(action, (argparse._StoreTrueAction, argparse._StoreFalseAction)):
        return parse_bool(value)
    if action.type is int:
        if isinstance(value, bool):
            raise ValueError(f"{source}: expected an integer for {action.dest}, got {value!r}")
        value = int(value)
    elif action.type is parse_json_object:
        if isinstance(value, str):
            try:
                value = parse_json_object(value)
            except argparse.ArgumentTypeError as e:
                raise ValueError(f"{source}: {e}") from e
        elif not isinstance(value, dict):
            raise ValueError(f"{source}: expected a table or JSON object for {action.dest}, got {value!r}")
    elif value is not None:
        value = str(value)
    if action.choices and value not in action.choices:
        raise ValueError(f"{source}: invalid choice {value!r} for {action.dest} (choose from {list(action.choices)})")
    return value


def apply_config_defaults(parser: argparse.ArgumentParser, config: Dict[str, Any], source: str) -> List[str]:
    """Install config file values as parser defaults.

    Returns the configured search words, which are kept apart from the
    parser so ``--word`` flags replace them instead of extending them.

    Raises
    ------
    ConfigError
        If a value has the wrong type or is not an allowed choice

    """
    actions = {action.dest: action for action in parser._actions}
    defaults: Dict[str, Any] = {}
    words: List[str] = []

    for key, value in config.items():
        if key == "words":
            words = [value] if isinstance(value, str) else [str(word) for word in value or []]
            continue
        action = actions.get(key)
        if action is None or key in _NON_CONFIGURABLE:
            logger.warning("Ignoring unknown configuration key %r in %s", key, source)
            continue
        try:
            defaults[key] = _coerce_for_action(action, value, source)
        except ValueError as e:
            raise ConfigError(str(e), source, e) from e

    parser.set_defaults(**defaults)
    return words


def apply_env_vars_to_parser(parser: argparse.ArgumentParser, environ: Optional[Dict[str, str]] = None) -> None:
    """Apply environment variables as parser defaults; flags still take precedence."""
    for action in parser._actions:
        if not action.dest or action.dest in _NON_CONFIGURABLE:
            continue
        env_value = get_env_var_value(action.dest, environ)
        if env_value is None:
            continue
        try:
            action.default = _coerce_for_action(action, env_value, f"{ENV_VAR_PREFIX}{action.dest.upper()}")
        except ValueError as e:
            logger.warning("Ignoring environment variable: %s", e)


def read_text(args: argparse.Namespace) -> str:
    """Return the text to highlight from the positional argument, --input, or stdin."""
    if args.text is not None:
        return args.text
    if args.input and args.input != "-":
        try:
            return Path(args.input).read_text(encoding="utf-8")
        except OSError as e:
            raise ValidationError(
                f"Cannot read input file {args.input}: {e}", parameter_name="input", parameter_value=args.input
            ) from e
    if args.input != "-" and sys.stdin.isatty():
        raise ValidationError("No text given; pass TEXT, --input FILE, or pipe text on stdin", parameter_name="text")
    return sys.stdin.read()


def collect_search_words(args: argparse.Namespace, config_words: Sequence[str]) -> List[str]:
    """Return the search words from flags, falling back to the configuration file."""
    words = list(args.words or config_words)
    if args.split:
        words = [part for word in words for part in split_search_phrase(word)]
    return words


def _to_json(text_chunks: List[TextChunk]) -> str:
    return json.dumps([text_chunk.to_dict() for text_chunk in text_chunks], ensure_ascii=False, indent=2)


def render_output(
    text: str, chunks: Sequence[Chunk], presentation: PresentationOptions, args: argparse.Namespace
) -> Any:
    """Render ``chunks`` in the format selected by ``args.output_format``."""
    builder = OptionsArgumentBuilder()
    output_format = args.output_format
    if output_format == "html":
        html_options = builder.options_from_args(HtmlRendererOptions, args, "html", presentation=presentation)
        return HtmlRenderer(html_options).render_element(render_highlighted(text, chunks, presentation))
    if output_format == "json":
        return render_highlighted(text, chunks, presentation, renderer=_to_json)
    if output_format == "markers":
        renderer = MarkersRenderer(builder.options_from_args(MarkersRendererOptions, args, "markers"))
        return render_highlighted(text, chunks, presentation, renderer=renderer)
    if output_format == "template":
        if not args.jinja_template_file and not args.jinja_template_string:
            raise ValidationError(
                "--template is required for --format template (or pass --template-string)", parameter_name="template"
            )
        renderer = JinjaRenderer(builder.options_from_args(JinjaRendererOptions, args, "jinja"))
        return render_highlighted(text, chunks, presentation, renderer=renderer)
    if output_format == "terminal":
        terminal = TerminalRenderer(builder.options_from_args(TerminalRendererOptions, args, "terminal"))
        # Files get ANSI text; stdout gets a rich Text printed by write_output
        terminal_renderer = terminal.render_to_string if args.out else terminal
        return render_highlighted(text, chunks, presentation, renderer=terminal_renderer)
    raise ValidationError(f"Unknown output format: {output_format}", parameter_name="output_format")


def write_output(output: Any, out_path: Optional[str]) -> None:
    """Write rendered output to ``out_path`` or stdout."""
    if not isinstance(output, str):
        from rich.console import Console

        Console().print(output, soft_wrap=True)
        return
    if out_path:
        Path(out_path).write_text(output, encoding="utf-8")
        logger.info("Wrote output to %s", out_path)
        return
    sys.stdout.write(output if output.endswith("\n") else output + "\n")


def run(args: argparse.Namespace, config_words: Sequence[str] = ()) -> int:
    """Highlight according to parsed arguments and write the result."""
    text = read_text(args)
    words = collect_search_words(args, config_words)
    if not words:
        logger.warning("No search words given; nothing will be highlighted")

    builder = OptionsArgumentBuilder()
    match_options = builder.options_from_args(MatchOptions, args, sanitize=get_sanitizer(args.sanitize))
    presentation = builder.options_from_args(PresentationOptions, args)

    chunks = find_chunks(text, words, match_options)
    logger.info("%d highlight(s) in %d character(s)", sum(1 for chunk in chunks if chunk.highlight), len(text))
    write_output(render_output(text, chunks, presentation, args), args.out)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command-line interface and return the exit code."""
    parser = create_parser()
    pre_args, _ = parser.parse_known_args(argv)

    config_words: List[str] = []
    if not pre_args.no_config:
        try:
            config_path = Path(pre_args.config) if pre_args.config else discover_config_file()
            if config_path is not None:
                config_words = apply_config_defaults(parser, load_config_file(config_path), str(config_path))
        except ConfigError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1

    apply_env_vars_to_parser(parser)
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.log_file, args.trace)

    try:
        return run(args, config_words)
    except HighlighterError as e:
        logger.error("%s", e.message)
        return 1


__all__ = [
    "apply_config_defaults",
    "apply_env_vars_to_parser",
    "collect_search_words",
    "create_parser",
    "main",
    "read_text",
    "render_output",
    "run",
]
