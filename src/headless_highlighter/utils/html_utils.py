#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/headless_highlighter/utils/html_utils.py
"""HTML-related utility helpers."""

from __future__ import annotations

import re
from html import escape as _html_escape
from typing import Any, Mapping

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def css_property_name(name: str) -> str:
    """Convert a DOM-style property name (``backgroundColor``) to CSS (``background-color``).

    Names that already contain a hyphen, including custom properties such as
    ``--accent``, are returned unchanged.
    """
    if "-" in name:
        return name
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def style_to_css(style: Mapping[str, Any] | None) -> str:
    """Serialize a style mapping to an inline CSS declaration string.

    Parameters
    ----------
    style : Mapping[str, Any] or None
        Property names mapped to values; ``None`` and empty values are skipped

    Returns
    -------
    str
        Declarations joined by ``"; "``, e.g. ``"background-color: yellow; color: red"``

    """
    if not style:
        return ""
    declarations = []
    for name, value in style.items():
        if value is None or value == "":
            continue
        declarations.append(f"{css_property_name(name)}: {value}")
    return "; ".join(declarations)


def normalize_class_name(class_name: str | None) -> str:
    """Collapse runs of whitespace in a class attribute and trim the ends."""
    if not class_name:
        return ""
    return " ".join(class_name.split())
