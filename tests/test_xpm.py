import pytest

from mermaidgame.colors import lookup_color
from mermaidgame.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    color_key,
    find,
    find_unquoted,
    parse_xpm,
    quoted_strings,
    read_xpm,
    split_words,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* width height colours chars */
"2 2 2 1",
"a c #FF0000",
"b c blue",
// pixels follow
"ab",
"ba"
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb   c \t") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_find_returns_first_match():
    text = "xyllxyll"
    pos = find(text, "ll")
    assert text[pos:pos + 2] == "ll"
    assert "ll" not in text[:pos + 1]


def test_find_missing_returns_minus_one():
    assert find("abc", "zz") == -1


def test_find_unquoted_skips_quoted_match():
    text = '"/*" /* x */'
    pos = find_unquoted(text, "/*")
    assert text[pos:pos + 2] == "/*"
    assert pos > find(text, "/*")


def test_find_unquoted_none_outside_quotes():
    assert find_unquoted('"// only inside"', "//") == -1


def test_strip_comments_keeps_length_and_strings():
    text = '"/*keep*/" /* drop */ "x"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "drop" not in stripped
    assert list(quoted_strings(stripped)) == ["/*keep*/", "x"]


def test_strip_line_comment():
    stripped = strip_comments('"a" // hi\n"b"')
    assert "hi" not in stripped
    assert list(quoted_strings(stripped)) == ["a", "b"]


def test_quoted_strings_ignores_unterminated():
    assert list(quoted_strings('x "ab" y "cd" "e')) == ["ab", "cd"]


def test_color_key_empty_is_zero():
    assert color_key("") == 0


def test_color_key_single_char_and_order():
    assert color_key("a") == ord("a")
    assert color_key("ab") != color_key("ba")


def test_parse_sample_file_text():
    image = parse_xpm(quoted_strings(strip_comments(SAMPLE)))
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == lookup_color("blue")
    assert image.pixel(0, 1) == lookup_color("blue")
    assert image.pixel(1, 1) == 0xFF0000


def test_none_is_transparent():
    image = parse_xpm(["1 1 1 1", ". c None", "."])
    assert image.pixel(0, 0) == TRANSPARENT
    assert image.pixels == ((0xFF000000,),)


def test_two_word_colour_name():
    image = parse_xpm(["1 1 1 1", "x c dark blue", "x"])
    assert image.pixel(0, 0) == lookup_color("dark blue")


def test_unknown_colour_name_is_black():
    image = parse_xpm(["1 1 1 1", "x c nosuchcolour", "x"])
    assert image.pixel(0, 0) == 0


def test_short_keys_last_entry_wins():
    image = parse_xpm(["1 1 2 1", "x c red", "x c blue", "x"])
    assert image.pixel(0, 0) == lookup_color("blue")


def test_long_keys_first_entry_wins():
    image = parse_xpm(["1 1 2 3", "xyz c red", "xyz c blue", "xyz"])
    assert image.pixel(0, 0) == lookup_color("red")


def test_multi_char_pixels():
    image = parse_xpm(["2 1 2 2", "aa c red", "bb c green", "bbaa"])
    assert image.pixels == ((lookup_color("green"), lookup_color("red")),)


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "x c red", "x"],
        ["1 1 1", "x c red", "x"],
        ["1 1 1 1", "x red", "x"],
        ["1 1 1 1", "x c", "x"],
        ["1 2 1 1", "x c red", "x"],
        ["2 1 1 1", "x c red", "x"],
        [],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_pixel_out_of_range():
    image = XpmImage(1, 1, ((5,),))
    assert image.pixel(0, 0) == 5
    with pytest.raises(IndexError):
        image.pixel(1, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_read_xpm_from_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    image = read_xpm(path)
    assert image == parse_xpm(quoted_strings(strip_comments(SAMPLE)))
    assert image.pixel(1, 1) == 0xFF0000


def test_read_missing_file(tmp_path):
    with pytest.raises(XpmError):
        read_xpm(tmp_path / "absent.xpm")