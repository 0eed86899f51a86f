"""Unit tests for question value objects."""

import pytest
from pydantic import ValidationError

from study.domain.value import CourseCode, Level


class TestCourseCode:
    @pytest.mark.parametrize(
        "raw,expected",
        [("csc 201", "CSC 201"), ("  mth101 ", "MTH101"), ("GST111", "GST111")],
    )
    def test_normalizes_case_and_whitespace(self, raw, expected):
        assert CourseCode(raw).root == expected

    @pytest.mark.parametrize("raw", ["C", "CSC-201", "A" * 21, "csc_201"])
    def test_rejects_malformed_codes(self, raw):
        with pytest.raises(ValidationError):
            CourseCode(raw)


class TestLevel:
    def test_levels_are_hundreds(self):
        assert [level.value for level in Level] == ["100", "200", "300", "400", "500"]

    def test_unknown_level_is_rejected(self):
        with pytest.raises(ValueError):
            Level("600")
