import pytest

from fromage.xpm import (
    XpmError,
    color_key,
    find,
    find_unquoted,
    load_xpm,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
    xpm_from_data,
)

TRANSPARENT = 0xFF000000


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_find():
    assert find("hello", "ll") == 2
    assert find("hello", "zz") == -1


def test_find_unquoted_skips_quoted_text():
    assert find_unquoted('"/*"/*', "/*") == 4
    assert find_unquoted('"/* x */"', "/*") == -1
    assert find_unquoted("ab/*", "/*") == 2


def test_strip_block_comment_keeps_length():
    text = 'a/*x*/b "q"'
    stripped = strip_comments(text)
    assert stripped == 'a     b "q"'
    assert len(stripped) == len(text)


def test_strip_line_comment_blanks_newline():
    assert strip_comments("x//c\ny") == "x    y"


def test_strip_comments_leaves_quoted_markers():
    text = '"a/*b" "c//d"'
    assert strip_comments(text) == text


def test_quoted_lines():
    assert list(quoted_lines('{"ab", "cd",\n"e"};')) == ["ab", "cd", "e"]
    assert list(quoted_lines('"ab" "unterminated')) == ["ab"]


def test_color_key():
    assert color_key("") == 0
    assert color_key("A") == ord("A")
    assert color_key("AB") != color_key("BA")


def test_parse_simple_picture():
    image = parse_xpm(["2 1 2 1", "a c #FF0000", "b c None", "ab"])
    assert (image.width, image.height) == (2, 1)
    assert image.pixels() == [[0xFF0000, TRANSPARENT]]


def test_parse_named_colours():
    image = parse_xpm(["2 1 2 1", "a c red", "b c light blue", "ab"])
    assert image.pixels() == [[0xFF0000, 0xADD8E6]]


def test_unknown_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c #0000FF", "az"])
    assert image.pixels() == [[0x0000FF, 0]]


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 2


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.get_pixel(0, 0) == 1


def test_multichar_keys():
    image = parse_xpm(["2 2 2 2", "aa c #000010", "bb c #000020", "aabb", "bbaa"])
    assert image.pixels() == [[0x10, 0x20], [0x20, 0x10]]


def test_xpm_from_data_matches_parse():
    rows = ["2 2 2 1", ". c #00FF00", "# c #0000FF", ".#", "#."]
    assert xpm_from_data(rows).pixels() == parse_xpm(rows).pixels()


@pytest.mark.parametrize(
    "rows",
    [
        [],
        ["1 1 1"],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
    ],
)
def test_bad_pictures_raise(rows):
    with pytest.raises(XpmError):
        parse_xpm(rows)


def test_load_xpm_file(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tile[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 2 2 1 ",\n'
        '"x c #112233",\n'
        '"o c None",  // transparent\n'
        '"xo",\n'
        '"ox"\n'
        "};\n"
    )
    image = load_xpm(path)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels() == [[0x112233, TRANSPARENT], [TRANSPARENT, 0x112233]]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "missing.xpm")