import io

import pytest

from solong.linereader import LineReader, count_lines, iter_lines

SAMPLE = "1111\n1P01\n1CE1\n1111"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 1000])
def test_lines_join_back_to_original(size):
    lines = list(iter_lines(io.StringIO(SAMPLE), size))
    assert "".join(lines) == SAMPLE


@pytest.mark.parametrize("size", [1, 5, 42])
def test_lines_match_splitlines(size):
    lines = list(iter_lines(io.StringIO(SAMPLE), size))
    assert lines == SAMPLE.splitlines(keepends=True)


def test_last_line_without_newline():
    reader = LineReader(io.StringIO("ab\ncd"), 1)
    assert reader.next_line() == "ab\n"
    assert reader.next_line() == "cd"
    assert reader.next_line() is None


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""), 4)
    assert reader.next_line() is None
    assert list(reader) == []


def test_empty_lines_are_kept():
    text = "\n\nx\n"
    assert list(iter_lines(io.StringIO(text), 2)) == ["\n", "\n", "x\n"]


def test_binary_stream():
    data = b"first\nsecond\n"
    lines = list(iter_lines(io.BytesIO(data), 3))
    assert lines == data.splitlines(keepends=True)


def test_stays_exhausted():
    reader = LineReader(io.StringIO("only\n"), 42)
    assert reader.next_line() == "only\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_independent_readers_interleave():
    first = LineReader(io.StringIO("a1\na2\n"), 1)
    second = LineReader(io.StringIO("b1\nb2\n"), 1)
    assert first.next_line() == "a1\n"
    assert second.next_line() == "b1\n"
    assert first.next_line() == "a2\n"
    assert second.next_line() == "b2\n"


def test_count_lines(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(SAMPLE, encoding="utf-8")
    assert count_lines(path) == len(SAMPLE.splitlines())


def test_count_lines_trailing_newline(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(SAMPLE + "\n", encoding="utf-8")
    assert count_lines(path) == len(SAMPLE.splitlines())


def test_count_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_lines(tmp_path / "absent.ber")