"""Unit tests for the detection limits config module."""

# pylint: disable=missing-class-docstring,missing-function-docstring,unused-argument

import pytest
from pydantic import ValidationError

from content_detect.config import DEFAULT_MAX_CHARS, DEFAULT_MAX_COLS, DEFAULT_MAX_ROWS, DetectionLimits, load_limits


class TestDetectionLimits:

    def test_defaults(self):
        limits = DetectionLimits()
        assert limits.max_chars == 60_000
        assert limits.max_rows == 300
        assert limits.max_cols == 25

    def test_non_positive_rejected(self):
        with pytest.raises(ValidationError):
            DetectionLimits(max_rows=0)


class TestLoadLimits:

    def test_defaults_without_environment(self, clean_env):
        limits = load_limits()
        assert (limits.max_chars, limits.max_rows, limits.max_cols) == (DEFAULT_MAX_CHARS, DEFAULT_MAX_ROWS, DEFAULT_MAX_COLS)

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("CONTENT_DETECT_MAX_CHARS", "1000")
        clean_env.setenv("CONTENT_DETECT_MAX_COLS", "5")
        limits = load_limits()
        assert limits.max_chars == 1000
        assert limits.max_rows == DEFAULT_MAX_ROWS
        assert limits.max_cols == 5

    def test_blank_value_ignored(self, clean_env):
        clean_env.setenv("CONTENT_DETECT_MAX_ROWS", "  ")
        assert load_limits().max_rows == DEFAULT_MAX_ROWS

    def test_non_integer_rejected(self, clean_env):
        clean_env.setenv("CONTENT_DETECT_MAX_ROWS", "lots")
        with pytest.raises(ValueError, match="CONTENT_DETECT_MAX_ROWS"):
            load_limits()

    def test_negative_rejected(self, clean_env):
        clean_env.setenv("CONTENT_DETECT_MAX_COLS", "-1")
        with pytest.raises(ValidationError):
            load_limits()
