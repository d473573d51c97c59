import logging

import pytest

from sourceref.reference import SourceReference, extract_reference
from sourceref.text import LineColumn, SourceLocation, SourceText, TextRange
from tests._shared_cases import CONTRACT_SOURCE, digits, locate, source


def test_missing_location_yields_message_only_reference() -> None:
    ref = extract_reference(None, "boom")

    assert ref == SourceReference.message_only("boom")
    assert ref.source_name is None
    assert ref.text == ""
    assert not ref.has_excerpt


def test_location_without_source_yields_message_only_reference() -> None:
    ref = extract_reference(SourceLocation.unknown(), "boom")

    assert ref.message == "boom"
    assert ref.source_name is None
    assert ref.position is None
    assert ref.text == ""


def test_source_without_text_keeps_only_the_name() -> None:
    loc = SourceLocation.of(SourceText("<synthetic>", ""), 0, 0)

    ref = extract_reference(loc, "generated code")

    assert ref.source_name == "<synthetic>"
    assert ref.position is None
    assert ref.text == ""
    assert (ref.start_column, ref.end_column) == (0, 0)


def test_single_line_location_is_not_truncated() -> None:
    src = SourceText("C.sol", CONTRACT_SOURCE)

    ref = extract_reference(locate(src, "uint x"), "Unused variable.")

    assert ref.message == "Unused variable."
    assert ref.source_name == "C.sol"
    assert ref.position == LineColumn(1, 4)
    assert ref.multiline is False
    assert ref.text == "    uint x = 1;"
    assert (ref.start_column, ref.end_column) == (4, 10)
    assert ref.text[ref.start_column : ref.end_column] == "uint x"


def test_range_at_exact_threshold_is_kept() -> None:
    line = digits(150)

    ref = extract_reference(SourceLocation.of(source(line), 0, 150), "")

    assert ref.text == line
    assert (ref.start_column, ref.end_column) == (0, 150)


def test_overlong_range_is_collapsed_to_fixed_width() -> None:
    line = "x" * 151

    ref = extract_reference(SourceLocation.of(source(line), 0, 151), "")

    assert ref.end_column - ref.start_column == 75
    assert ref.text == "x" * 35 + " ... " + "x" * 35
    assert ref.text.count(" ... ") == 1


def test_overlong_line_is_windowed_around_point_of_interest() -> None:
    line = digits(300)

    ref = extract_reference(SourceLocation.of(source(line), 200, 210), "")

    assert ref.position == LineColumn(0, 200)
    assert ref.text.startswith(" ... ")
    assert ref.text.endswith(" ...")
    assert len(ref.text) == 89
    assert (ref.start_column, ref.end_column) == (40, 50)
    assert ref.text[40:50] == line[200:210]


def test_multiline_location_flags_rest_of_first_line() -> None:
    text = "a\nb\nc\n    function f() {\n        return;\n    }\n"
    src = source(text)
    start = text.index("function")
    end = text.rindex("}") + 1

    ref = extract_reference(SourceLocation.of(src, start, end), "")

    assert src.line_column(end) == LineColumn(5, 5)
    assert ref.position == LineColumn(3, 4)
    assert ref.multiline is True
    assert ref.text == "    function f() {"
    assert (ref.start_column, ref.end_column) == (4, len(ref.text))


def test_multiline_length_is_measured_on_the_first_line() -> None:
    # 200 characters flagged on the first line, but only a handful of
    # offsets between start and end if counted across lines.
    first = "    " + digits(200)
    src = source(first + "\n}")

    ref = extract_reference(SourceLocation.of(src, 4, len(first) + 2), "")

    assert ref.multiline is True
    assert ref.text == first[:39] + " ... " + first[169:]
    assert (ref.start_column, ref.end_column) == (4, 79)


def test_multiline_short_line_range_does_not_trigger_truncation() -> None:
    src = source("ab\n" + "y" * 400)

    ref = extract_reference(SourceLocation.of(src, 0, 403), "")

    assert ref.multiline is True
    assert ref.text == "ab"
    assert (ref.start_column, ref.end_column) == (0, 2)


def test_empty_range_at_end_of_buffer() -> None:
    ref = extract_reference(SourceLocation.of(source("abc"), 3, 3), "")

    assert ref.position == LineColumn(0, 3)
    assert ref.text == "abc"
    assert (ref.start_column, ref.end_column) == (3, 3)


def test_empty_line_yields_empty_excerpt_with_position() -> None:
    ref = extract_reference(SourceLocation.of(source("a\n\nb"), 2, 2), "")

    assert ref.source_name == "test.sol"
    assert ref.position == LineColumn(1, 0)
    assert ref.text == ""
    assert (ref.start_column, ref.end_column) == (0, 0)


def test_buffer_errors_propagate() -> None:
    with pytest.raises(ValueError):
        extract_reference(SourceLocation.of(source("abc"), 1, 10), "")


@pytest.mark.parametrize(
    ("start", "end"),
    [(0, 0), (0, 1), (5, 5), (10, 170), (35, 36), (36, 300), (150, 299), (299, 299), (300, 300), (0, 305)],
)
def test_columns_always_lie_within_text(start: int, end: int) -> None:
    src = source(digits(300) + "\n" + digits(4))

    ref = extract_reference(SourceLocation(src, TextRange(start, end)), "")

    assert 0 <= ref.start_column <= ref.end_column <= len(ref.text)


def test_truncation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="sourceref.reference.extractor"):
        extract_reference(SourceLocation.of(source(digits(400)), 50, 300), "")

    assert "Collapsed flagged range" in caplog.text
    assert "Windowed long line" in caplog.text
