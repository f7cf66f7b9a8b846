#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for headless_highlighter.

Constants are organized by category:
1. Type Definitions - Literal types shared by options and the CLI
2. Matching Defaults - Chunk finder behavior
3. Presentation Defaults - Rendering adapter and renderers
4. Optional Dependencies - Packages checked by ``requires_dependencies``
5. Configuration - CLI config file discovery and environment variables
"""

from __future__ import annotations

from typing import Literal, get_args

# =============================================================================
# Type Definitions
# =============================================================================

OutputFormat = Literal["html", "json", "markers", "terminal", "template"]
SanitizerName = Literal["none", "diacritics", "whitespace"]

OUTPUT_FORMATS: tuple[OutputFormat, ...] = get_args(OutputFormat)
SANITIZER_NAMES: tuple[SanitizerName, ...] = get_args(SanitizerName)

# =============================================================================
# Matching Defaults
# =============================================================================

DEFAULT_CASE_SENSITIVE = False
DEFAULT_AUTO_ESCAPE = False

# =============================================================================
# Presentation Defaults
# =============================================================================

DEFAULT_CONTAINER_TAG = "span"
DEFAULT_MARK_TAG = "mark"

DEFAULT_HTML_DATA_ATTRIBUTES = True
DEFAULT_HTML_HIGHLIGHT_INDEX_ATTR = "data-highlight-index"

DEFAULT_MARKER_OPEN = "<<"
DEFAULT_MARKER_CLOSE = ">>"
DEFAULT_ACTIVE_MARKER_OPEN = "[["
DEFAULT_ACTIVE_MARKER_CLOSE = "]]"

DEFAULT_TERMINAL_HIGHLIGHT_STYLE = "bold black on yellow"
DEFAULT_TERMINAL_ACTIVE_STYLE = "bold white on red"

DEFAULT_JINJA_AUTOESCAPE = True
DEFAULT_JINJA_STRICT_UNDEFINED = True

# =============================================================================
# Optional Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_JINJA = [("jinja2", "jinja2", ">=3.1.0")]
DEPS_TERMINAL = [("rich", "rich", ">=13.0.0")]

# =============================================================================
# Configuration
# =============================================================================

CONFIG_TOOL_SECTION = "headless-highlighter"
CONFIG_FILENAMES = [
    ".headless-highlighter.toml",
    ".headless-highlighter.yaml",
    ".headless-highlighter.yml",
    ".headless-highlighter.json",
]
ENV_VAR_PREFIX = "HEADLESS_HIGHLIGHTER_"
