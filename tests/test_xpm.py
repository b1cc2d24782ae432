import pytest

from solong.xpm import (
    TRANSPARENT_PIXEL,
    XpmError,
    XpmImage,
    extract_strings,
    load_xpm,
    parse_xpm,
    parse_xpm_lines,
    split_words,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *tile_xpm[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000",
"b c blue",
// first row
"ab",
"ba"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb   c ") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_strip_comments_block_keeps_length():
    text = "a /* b */ c"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "b" not in result
    assert result.startswith("a ") and result.endswith(" c")


def test_strip_comments_line_comment_removes_newline():
    text = "x // y\nz"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "y" not in result and "\n" not in result
    assert result.endswith("z")


def test_strip_comments_leaves_quoted_text():
    text = '"/* keep */" "// too"'
    assert strip_comments(text) == text


def test_extract_strings():
    assert extract_strings('a "x" b "y z" c') == ["x", "y z"]


def test_parse_sample():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0xFF
    assert image.pixel(0, 1) == 0xFF
    assert image.pixel(1, 1) == 0xFF0000


def test_none_is_transparent():
    image = parse_xpm_lines(["1 1 1 1", "a c None", "a"])
    assert image.pixel(0, 0) == TRANSPARENT_PIXEL


def test_two_word_color_name():
    image = parse_xpm_lines(["1 1 1 1", "a c light blue", "a"])
    assert image.pixel(0, 0) == 0xADD8E6


def test_unknown_pixel_key_is_zero():
    image = parse_xpm_lines(["1 1 1 1", "a c red", "z"])
    assert image.pixels == (0,)


def test_long_keys_keep_first_definition():
    image = parse_xpm_lines(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.pixel(0, 0) == 0xFF0000


def test_short_keys_keep_last_definition():
    image = parse_xpm_lines(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == 0xFF


def test_multi_char_keys():
    image = parse_xpm_lines(["2 1 2 2", "aa c red", "bb c blue", "bbaa"])
    assert image.pixels == (0xFF, 0xFF0000)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
    ],
)
def test_bad_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_pixel_out_of_bounds():
    image = XpmImage(width=1, height=1, pixels=(5,))
    with pytest.raises(IndexError):
        image.pixel(1, 0)


def test_load_xpm(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm(SAMPLE)


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")