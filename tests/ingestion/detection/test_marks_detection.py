"""
Tests for ingestion.detection.marks

Test Coverage:
- detect_marks_marker(): Bracketed, parenthesised and bare forms
- strip_marker(): Removal of the detected marker
- MarksMarker: Frozen dataclass
"""
import pytest

from lesson_toolkit.ingestion.detection.marks import (
    MarksMarker,
    detect_marks_marker,
    strip_marker,
)


def test_detect_bracketed_marks():
    """Detects [N marks] with its span."""
    # Act
    marker = detect_marks_marker("What is 2+2? [2 marks]")

    # Assert
    assert marker == MarksMarker(value=2, span=(13, 22))


def test_detect_parenthesised_single_mark():
    """Detects (1 mark) in singular form."""
    marker = detect_marks_marker("Name a prime. (1 mark)")
    assert marker is not None
    assert marker.value == 1


def test_detect_bare_marks_case_insensitive():
    """Detects a bare 'N Marks' regardless of case."""
    marker = detect_marks_marker("Describe the water cycle 5 Marks")
    assert marker is not None
    assert marker.value == 5


def test_detect_marks_without_space():
    """'10marks' is still a marker."""
    marker = detect_marks_marker("Essay question 10marks")
    assert marker is not None
    assert marker.value == 10


def test_bracketed_form_takes_precedence_over_bare():
    """When both forms appear the bracketed one wins."""
    marker = detect_marks_marker("Worth 5 marks in total [2 marks]")
    assert marker is not None
    assert marker.value == 2


@pytest.mark.parametrize("line", [
    "No marker here",
    "The remarks were positive",
    "[marks]",
    "",
])
def test_detect_returns_none_without_marker(line):
    """Lines with no numeric marks allocation give None."""
    assert detect_marks_marker(line) is None


def test_out_of_range_value_is_reported_unchanged():
    """Range checking is the parser's job; detection reports the raw value."""
    marker = detect_marks_marker("[150 marks]")
    assert marker is not None
    assert marker.value == 150


def test_strip_marker_removes_marker_and_collapses_whitespace():
    """Stripping leaves clean question text."""
    # Arrange
    line = "Explain  [3 marks]  osmosis."
    marker = detect_marks_marker(line)

    # Act
    stripped = strip_marker(line, marker)

    # Assert
    assert stripped == "Explain osmosis."


def test_strip_marker_on_marker_only_line_gives_empty_string():
    line = "(4 marks)"
    assert strip_marker(line, detect_marks_marker(line)) == ""


def test_marks_marker_is_frozen():
    """MarksMarker is immutable."""
    marker = MarksMarker(value=2, span=(0, 9))
    with pytest.raises(Exception):
        marker.value = 3


def test_detect_bare_marks_glued_to_word():
    """The bare form is found anywhere in a line, even after a letter."""
    marker = detect_marks_marker("Part x2marks")
    assert marker is not None
    assert marker.value == 2


@pytest.mark.parametrize("line", [
    "[" + "9" * 5000 + " marks]",
    "Foo " + "9" * 5000 + " marks",
    "12345 marks",
])
def test_detect_ignores_oversized_digit_runs(line):
    """Digit runs longer than four are not marks allocations."""
    assert detect_marks_marker(line) is None


def test_detect_reports_four_digit_value_for_range_check():
    marker = detect_marks_marker("[1500 marks]")
    assert marker is not None
    assert marker.value == 1500
