"""Unit tests for MarkersRenderer."""

import pytest

from headless_highlighter import PresentationOptions, highlight
from headless_highlighter.options import MarkersRendererOptions
from headless_highlighter.renderers import MarkersRenderer


@pytest.mark.unit
def test_default_markers():
    assert highlight("the quick fox", ["quick"], renderer=MarkersRenderer()) == "the <<quick>> fox"


@pytest.mark.unit
def test_active_highlight_uses_active_markers():
    result = highlight(
        "fox fox fox",
        ["fox"],
        presentation_options=PresentationOptions(active_index=1),
        renderer=MarkersRenderer(),
    )
    assert result == "<<fox>> [[fox]] <<fox>>"


@pytest.mark.unit
def test_custom_markers():
    renderer = MarkersRenderer(MarkersRendererOptions(open_marker="*", close_marker="*"))
    assert highlight("a cat", ["cat"], renderer=renderer) == "a *cat*"


@pytest.mark.unit
def test_empty_text():
    assert highlight("", ["cat"], renderer=MarkersRenderer()) == ""
