import hypothesis.strategies as st
from hypothesis import given

from renscript.renscript_lexer import LineInfo, LineStream, preprocess_lines, split_lines


def test_preprocess_records_indent_and_raw() -> None:
    lines = preprocess_lines('label start:\n    "Hello"')
    assert lines == [
        LineInfo(1, 0, "label start:", "label start:"),
        LineInfo(2, 4, '"Hello"', '    "Hello"'),
    ]


def test_preprocess_skips_blank_and_comment_lines() -> None:
    source = "# header\n\nlabel a:\n    # note\n   \n    return"
    lines = preprocess_lines(source)
    assert [(li.line_number, li.content) for li in lines] == [
        (3, "label a:"),
        (6, "return"),
    ]


def test_preprocess_handles_crlf() -> None:
    lines = preprocess_lines("label a:\r\n    return\r\n")
    assert [li.content for li in lines] == ["label a:", "return"]
    assert lines[1].raw == "    return"


def test_preprocess_empty_source() -> None:
    assert preprocess_lines("") == []


def test_preprocess_keeps_trailing_whitespace_in_raw() -> None:
    (line,) = preprocess_lines("  show x  ")
    assert line.indent == 2
    assert line.content == "show x  "
    assert line.raw == "  show x  "


def test_stream_cursor_moves_forward_only() -> None:
    stream = LineStream(preprocess_lines("a\n  b\nc"))
    assert stream.current() is not None
    assert stream.current().content == "a"  # type: ignore[union-attr]
    assert stream.advance().indent == 2  # type: ignore[union-attr]
    stream.advance()
    assert stream.advance() is None
    assert stream.end_of_stream()
    assert stream.advance() is None
    assert stream.position == 3
    assert stream.current() is None


def test_stream_over_empty_source() -> None:
    stream = LineStream(preprocess_lines(""))
    assert stream.current() is None
    assert stream.end_of_stream()


def test_split_lines_matches_line_numbers() -> None:
    source = "label a:\r\n\n    # note\n    return"
    physical = split_lines(source)
    assert physical == ["label a:", "", "    # note", "    return"]
    for info in preprocess_lines(source):
        assert physical[info.line_number - 1] == info.raw


@given(st.lists(st.from_regex(r"[ ]{0,8}[a-z\"$][a-z \"=]{0,10}", fullmatch=True)))  # type: ignore[misc]
def test_preprocess_indent_plus_content_is_raw(raw_lines: list[str]) -> None:
    for info in preprocess_lines("\n".join(raw_lines)):
        assert info.raw[info.indent :] == info.content
        assert info.raw == raw_lines[info.line_number - 1]
        assert not info.content.startswith(" ")
