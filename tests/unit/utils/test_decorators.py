"""Unit tests for dependency checking and timing helpers."""

import logging

import pytest

from headless_highlighter.exceptions import DependencyError
from headless_highlighter.utils.decorators import debug_timer, requires_dependencies
from headless_highlighter.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestRequiresDependencies:
    """The requires_dependencies decorator."""

    def test_available_package_runs_method(self):
        @requires_dependencies("test", [("packaging", "packaging", ">=1.0")])
        def render():
            return "ok"

        assert render() == "ok"

    def test_missing_package_raises(self):
        @requires_dependencies("test", [("no-such-package-xyz", "no_such_package_xyz", ">=1.0")])
        def render():
            return "ok"

        with pytest.raises(DependencyError) as exc_info:
            render()

        error = exc_info.value
        assert error.renderer_name == "test"
        assert error.missing_packages == [("no-such-package-xyz", ">=1.0")]
        assert isinstance(error.original_import_error, ImportError)
        assert "test output requires the following packages" in error.message

    def test_version_mismatch_raises(self):
        @requires_dependencies("test", [("packaging", "packaging", ">=9999")])
        def render():
            return "ok"

        with pytest.raises(DependencyError) as exc_info:
            render()
        assert exc_info.value.version_mismatches[0][:2] == ("packaging", ">=9999")
        assert "version mismatches" in exc_info.value.message

    def test_wraps_preserves_name(self):
        @requires_dependencies("test", [])
        def render_something():
            """Docstring."""

        assert render_something.__name__ == "render_something"
        assert render_something.__doc__ == "Docstring."


@pytest.mark.unit
class TestPackages:
    """Installed version lookups."""

    def test_installed_package_version(self):
        assert get_package_version("packaging") is not None

    def test_missing_package_version(self):
        assert get_package_version("no-such-package-xyz") is None

    def test_check_version_requirement(self):
        assert check_version_requirement("packaging", ">=1.0")[0] is True
        assert check_version_requirement("packaging", "<1.0")[0] is False
        assert check_version_requirement("no-such-package-xyz", ">=1.0") == (False, None)


@pytest.mark.unit
def test_debug_timer_logs_when_debug_enabled(caplog):
    logger = logging.getLogger("headless_highlighter.tests.timer")
    with caplog.at_level(logging.DEBUG, logger="headless_highlighter.tests.timer"):
        with debug_timer(logger, "Doing work"):
            pass
    assert "Doing work completed in" in caplog.text


@pytest.mark.unit
def test_debug_timer_silent_at_warning(caplog):
    logger = logging.getLogger("headless_highlighter.tests.timer")
    with caplog.at_level(logging.WARNING, logger="headless_highlighter.tests.timer"):
        with debug_timer(logger, "Doing work"):
            pass
    assert caplog.text == ""
