#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/cli/builder.py
"""Generate command-line arguments from options dataclasses.

Each field of an options dataclass becomes one flag, driven by the field's
``metadata``:

- ``help``: help text. Fields whose ``importance`` is not ``"core"`` get an
  ``[importance]`` suffix.
- ``cli_name``: flag name without the leading dashes. Defaults to the
  kebab-cased field name.
- ``exclude_from_cli``: skip the field.
- ``type``: value type for fields whose annotation cannot be resolved.
- ``choices``: allowed values.

Booleans that default to True become ``--no-<name>`` switches. With a format
prefix, flags read ``--<prefix>-<name>`` and destinations
``<prefix>_<field>``.
"""

from __future__ import annotations

import argparse
import collections.abc
import json
import logging
import types
from dataclasses import MISSING, Field, fields, is_dataclass
from typing import Any, Dict, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from headless_highlighter.exceptions import ValidationError

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT")
ArgumentContainer = Union[argparse.ArgumentParser, argparse._ArgumentGroup]


def parse_json_object(value: str) -> dict:
    """Parse a JSON object passed as a flag value, e.g. a style mapping."""
    try:
        result = json.loads(value)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Expected JSON object, got: {value}. Error: {e}") from e
    if not isinstance(result, dict):
        raise argparse.ArgumentTypeError(f"Expected JSON object, got: {value}")
    return result


def _unwrap_optional(field_type: Any) -> Any:
    if get_origin(field_type) in (Union, types.UnionType):
        args = [arg for arg in get_args(field_type) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return field_type


def _is_mapping_type(field_type: Any) -> bool:
    return field_type in (dict, collections.abc.Mapping) or get_origin(field_type) in (dict, collections.abc.Mapping)


class OptionsArgumentBuilder:
    """Add arguments for options dataclasses and rebuild options from parsed args.

    Examples
    --------
        >>> from headless_highlighter.options import MarkersRendererOptions
        >>> parser = argparse.ArgumentParser()
        >>> builder = OptionsArgumentBuilder()
        >>> builder.add_options_arguments(parser, MarkersRendererOptions, format_prefix="markers")
        >>> args = parser.parse_args(["--markers-open-marker", "*"])
        >>> builder.options_from_args(MarkersRendererOptions, args, dest_prefix="markers").open_marker
        '*'

    """

    def __init__(self) -> None:
        """Initialize the builder."""
        self.dest_to_cli_flag: Dict[str, str] = {}

    @staticmethod
    def snake_to_kebab(name: str) -> str:
        """Convert a snake_case field name to kebab-case."""
        return name.replace("_", "-")

    @staticmethod
    def dest_for(field_name: str, dest_prefix: Optional[str] = None) -> str:
        """Return the argparse destination for ``field_name``."""
        return f"{dest_prefix}_{field_name}" if dest_prefix else field_name

    @staticmethod
    def _type_hints(options_class: Type) -> Dict[str, Any]:
        try:
            return get_type_hints(options_class)
        except (NameError, AttributeError, TypeError):
            # Callback annotations name types that are only imported for type checking
            logger.debug("Could not resolve type hints for %s; using field metadata", options_class.__name__)
            return {}

    @staticmethod
    def _resolve_field_type(field: Field, type_hints: Dict[str, Any]) -> Any:
        if "type" in field.metadata:
            return field.metadata["type"]
        if field.name in type_hints:
            return _unwrap_optional(type_hints[field.name])
        if field.default is not MISSING and field.default is not None:
            return type(field.default)
        return str

    def infer_cli_name(self, field: Field, format_prefix: Optional[str] = None, negated: bool = False) -> str:
        """Return the flag for ``field``, honoring ``cli_name`` metadata."""
        if "cli_name" in field.metadata:
            name = str(field.metadata["cli_name"])
        else:
            name = self.snake_to_kebab(field.name)
            if negated and not name.startswith("no-"):
                name = f"no-{name}"
        return f"--{format_prefix}-{name}" if format_prefix else f"--{name}"

    @staticmethod
    def help_text(field: Field) -> str:
        """Return the help string for ``field`` with its importance tag."""
        text = field.metadata.get("help", "")
        importance = field.metadata.get("importance", "core")
        if importance != "core":
            text = f"{text} [{importance}]" if text else f"[{importance}]"
        return text

    def get_argument_kwargs(self, field: Field, field_type: Any) -> Optional[Dict[str, Any]]:
        """Build ``add_argument`` keyword arguments, or None for unsupported types."""
        kwargs: Dict[str, Any] = {"help": self.help_text(field)}
        default = field.default if field.default is not MISSING else None

        if field_type is bool:
            kwargs["action"] = "store_false" if default is True else "store_true"
            kwargs["default"] = bool(default)
            return kwargs

        if field_type in (int, float):
            kwargs["type"] = field_type
        elif _is_mapping_type(field_type):
            kwargs["type"] = parse_json_object
            kwargs["help"] = f"{kwargs['help']} (JSON format)"
        elif field_type is not str:
            return None

        if "choices" in field.metadata:
            kwargs["choices"] = field.metadata["choices"]
        kwargs["default"] = default
        return kwargs

    def add_options_arguments(
        self,
        parser: ArgumentContainer,
        options_class: Type,
        format_prefix: Optional[str] = None,
        dest_prefix: Optional[str] = None,
    ) -> None:
        """Add one argument per CLI-visible field of ``options_class``.

        Parameters
        ----------
        parser : ArgumentParser or argument group
            Where the arguments are added
        options_class : Type
            Options dataclass
        format_prefix : str, optional
            Prefix for flag names, e.g. ``"markers"`` for ``--markers-open-marker``
        dest_prefix : str, optional
            Prefix for destinations; defaults to ``format_prefix``

        """
        if not is_dataclass(options_class):
            raise TypeError(f"{options_class!r} is not an options dataclass")
        if dest_prefix is None:
            dest_prefix = format_prefix

        type_hints = self._type_hints(options_class)
        for field in fields(options_class):
            if field.metadata.get("exclude_from_cli", False):
                continue
            field_type = self._resolve_field_type(field, type_hints)
            kwargs = self.get_argument_kwargs(field, field_type)
            if kwargs is None:
                logger.debug("Skipping %s.%s: no CLI form for %r", options_class.__name__, field.name, field_type)
                continue

            cli_name = self.infer_cli_name(field, format_prefix, negated=kwargs.get("action") == "store_false")
            dest = self.dest_for(field.name, dest_prefix)
            parser.add_argument(cli_name, dest=dest, **kwargs)
            self.dest_to_cli_flag[dest] = cli_name

    def options_from_args(
        self,
        options_class: Type[OptionsT],
        args: argparse.Namespace,
        dest_prefix: Optional[str] = None,
        **overrides: Any,
    ) -> OptionsT:
        """Build ``options_class`` from parsed arguments.

        Destinations left at None fall back to the dataclass default.
        Fields excluded from the CLI only come from ``overrides``.

        Raises
        ------
        ValidationError
            If the options reject the combined values

        """
        kwargs: Dict[str, Any] = {}
        for field in fields(options_class):  # type: ignore[arg-type]
            if field.metadata.get("exclude_from_cli", False):
                continue
            dest = self.dest_for(field.name, dest_prefix)
            value = getattr(args, dest, None)
            if value is not None:
                kwargs[field.name] = value
        kwargs.update(overrides)

        try:
            return options_class(**kwargs)
        except ValueError as e:
            raise ValidationError(
                f"Invalid {options_class.__name__}: {e}",
                parameter_name=options_class.__name__,
                original_error=e,
            ) from e


__all__ = ["OptionsArgumentBuilder", "parse_json_object"]
