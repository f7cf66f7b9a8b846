"""Pytest configuration and shared fixtures for the headless_highlighter test suite."""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

from headless_highlighter import MatchOptions, PresentationOptions

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests generated with Hypothesis")


@pytest.fixture
def sample_text() -> str:
    """Provide a short text with repeated and overlapping words."""
    return "The quick brown fox jumps over the lazy dog. The dog sleeps."


@pytest.fixture
def literal_options() -> MatchOptions:
    """Provide match options that treat search words as literal text."""
    return MatchOptions(auto_escape=True)


@pytest.fixture
def styled_presentation() -> PresentationOptions:
    """Provide presentation options with classes and styles for highlights."""
    return PresentationOptions(
        highlight_class_name="hl",
        highlight_style={"backgroundColor": "yellow", "color": "black"},
        active_class_name="hl-active",
        active_style={"backgroundColor": "orange"},
    )


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Restore the package logger after tests that configure logging."""
    package_logger = logging.getLogger("headless_highlighter")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in package_logger.handlers:
            package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = propagate
