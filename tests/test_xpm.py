import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000",
"b c None",
// pixels
"ab",
"ba"
};
"""


def test_split_words_uses_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]
    assert split_words("") == []


def test_strip_comments_keeps_length_and_quoted_text():
    text = '"a" /* c */ "b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result
    assert result.startswith('"a"') and result.endswith('"b"')


def test_strip_comments_ignores_markers_inside_quotes():
    text = '"a/*b*/" "c//d"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment():
    result = strip_comments('// header "x"\n"a"')
    assert result.endswith('\n"a"')
    assert '"x"' not in result


def test_text_to_rgb_hex_and_names():
    assert text_to_rgb("#FF0000") == 0xFF0000
    assert text_to_rgb("red") == 0xFF0000
    assert text_to_rgb("dark", "red") == 0x8B0000
    assert text_to_rgb("None") == -1
    assert text_to_rgb("nosuchcolour") == 0


def test_parse_lines_decodes_pixels():
    image = parse_xpm_lines(["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == text_to_rgb("#FF0000")
    assert image.pixel(1, 0) == TRANSPARENT
    assert image.is_transparent(0, 1)
    assert image.pixels[1][1] == image.pixels[0][0]


def test_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == text_to_rgb("blue")


def test_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixel(0, 0) == text_to_rgb("red")


def test_unknown_key_gives_zero():
    image = parse_xpm_lines(["1 1 1 1", "a c red", "z"])
    assert image.pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_lines_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_parse_text_matches_lines():
    from_text = parse_xpm_text(SAMPLE)
    from_lines = parse_xpm_lines(["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"])
    assert from_text == from_lines


def test_pixel_outside_raises():
    image = parse_xpm_text(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")