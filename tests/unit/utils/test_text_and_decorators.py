#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/utils/test_text_and_decorators.py
"""Unit tests for input loading, dependency checks and timing helpers."""

import io
import logging
from pathlib import Path

import pytest

from runmark.exceptions import DependencyError, ValidationError
from runmark.utils.decorators import debug_timer, requires_dependencies
from runmark.utils.packages import check_version_requirement, get_package_version
from runmark.utils.text import decode_markdown_bytes, load_markdown_text, normalize_line_endings


@pytest.mark.unit
class TestLoadMarkdownText:
    """Tests for loading Markdown from supported input types."""

    def test_string_is_content(self):
        """Test a string is returned as content, not read as a path."""
        assert load_markdown_text("README.md") == "README.md"

    def test_crlf_normalized(self):
        """Test CRLF and lone CR become LF."""
        assert load_markdown_text("a\r\nb\rc") == "a\nb\nc"

    def test_bytes_with_bom(self):
        """Test UTF-8 bytes with a byte order mark."""
        assert load_markdown_text("\ufeff# Title\n".encode("utf-8")) == "# Title\n"

    def test_invalid_bytes(self):
        """Test non-UTF-8 bytes raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            decode_markdown_bytes(b"\xff\xfe\xfa")
        assert exc_info.value.parameter_name == "source"

    def test_path(self, tmp_path: Path):
        """Test reading a file path."""
        path = tmp_path / "doc.md"
        path.write_bytes(b"**bold**\r\n")
        assert load_markdown_text(path) == "**bold**\n"

    def test_text_stream(self):
        """Test reading a text stream."""
        assert load_markdown_text(io.StringIO("*x*\n")) == "*x*\n"

    def test_binary_stream(self):
        """Test reading a binary stream."""
        assert load_markdown_text(io.BytesIO(b"*x*\n")) == "*x*\n"

    def test_unsupported_type(self):
        """Test an unsupported type raises ValidationError."""
        with pytest.raises(ValidationError):
            load_markdown_text(42)  # type: ignore[arg-type]

    def test_normalize_line_endings_keeps_lf(self):
        """Test LF-only text is unchanged."""
        assert normalize_line_endings("a\n\nb\n") == "a\n\nb\n"


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the dependency check decorator."""

    def test_missing_package_raises(self):
        """Test a missing package raises DependencyError before the call."""
        calls = []

        @requires_dependencies("demo", [("no-such-package-xyz", "no_such_package_xyz", "")])
        def run():
            calls.append(1)

        with pytest.raises(DependencyError) as exc_info:
            run()

        assert calls == []
        assert exc_info.value.converter_name == "demo"
        assert exc_info.value.missing_packages == [("no-such-package-xyz", "")]
        assert "pip install" in str(exc_info.value)

    def test_version_mismatch_raises(self):
        """Test an unmet version requirement raises DependencyError."""

        @requires_dependencies("markdown", [("mistune", "mistune", ">=999.0")])
        def run():
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            run()
        assert exc_info.value.version_mismatches[0][0] == "mistune"

    def test_satisfied_requirement_calls_through(self):
        """Test the wrapped function runs when dependencies are met."""

        @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        def run(value):
            return value * 2

        assert run(21) == 42


@pytest.mark.unit
class TestPackages:
    """Tests for package version helpers."""

    def test_installed_version(self):
        """Test the version of an installed package is found."""
        assert get_package_version("mistune") is not None

    def test_missing_version(self):
        """Test a missing package has no version."""
        assert get_package_version("no-such-package-xyz") is None
        assert check_version_requirement("no-such-package-xyz", ">=1") == (False, None)

    def test_invalid_specifier(self):
        """Test an invalid specifier raises ValueError."""
        with pytest.raises(ValueError):
            check_version_requirement("mistune", "not a spec")


@pytest.mark.unit
class TestDebugTimer:
    """Tests for the debug timer context manager."""

    def test_logs_at_debug(self, caplog):
        """Test elapsed time is logged when DEBUG is enabled."""
        logger = logging.getLogger("runmark.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="runmark.tests.timer"):
            with debug_timer(logger, "Collecting"):
                pass
        assert any("Collecting completed in" in message for message in caplog.messages)

    def test_silent_above_debug(self, caplog):
        """Test nothing is logged when DEBUG is disabled."""
        logger = logging.getLogger("runmark.tests.timer_quiet")
        with caplog.at_level(logging.INFO, logger="runmark.tests.timer_quiet"):
            with debug_timer(logger, "Collecting"):
                pass
        assert not caplog.messages
