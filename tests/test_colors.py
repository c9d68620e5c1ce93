import pytest

from fromage.colors import channel_shifts, good_color, lookup_color, parse_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("gray50", 0x7F7F7F),
        ("navy", 0x80),
        ("lightgoldenrodyellow", 0xFAFAD2),
        ("red", 0xFF0000),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Light Green") == lookup_color("light green")


def test_lookup_first_entry_wins_for_duplicates():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899


def test_lookup_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_unknown_name():
    assert lookup_color("no such colour") is None


def test_parse_hex():
    assert parse_color("#ff0000", None) == 0xFF0000
    assert parse_color("#00FF00", None) == 0x00FF00


def test_parse_hex_stops_at_non_digit():
    assert parse_color("#12zz", None) == 0x12


def test_parse_empty_hex_is_black():
    assert parse_color("#", None) == 0


def test_parse_hex_ignores_qualifier():
    assert parse_color("#abcdef", "slate") == 0xABCDEF


def test_parse_name_with_qualifier():
    assert parse_color("dark", "slate") == 0x2F4F4F
    assert parse_color("misty", "rose") == lookup_color("mistyrose")


def test_parse_plain_name():
    assert parse_color("thistle", None) == lookup_color("thistle")


def test_parse_unknown_name_is_black():
    assert parse_color("nonexistent", None) == 0
    assert parse_color("nonexistent", "thing") == 0


def test_parse_none_keyword():
    assert parse_color("None", None) == -1


def test_channel_shifts_true_color():
    assert channel_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_channel_shifts_rgb565():
    assert channel_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_channel_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        channel_shifts(0, 0xFF00, 0xFF)


def test_good_color_deep_visual_is_identity():
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    for color in (0, 0x123456, 0xFFFFFF, 0xFF99FF):
        assert good_color(color, 24, shifts) == color
        assert good_color(color, 32, shifts) == color


def test_good_color_full_channels_round_trip():
    shifts = channel_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    for color in (0, 0x123456, 0xFFFFFF, 0x00FFFF):
        assert good_color(color, 16, shifts) == color


def test_good_color_rgb565_white_fills_masks():
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFFFFFF, 16, shifts) == 0xF800 | 0x07E0 | 0x001F
    assert good_color(0, 16, shifts) == 0


def test_good_color_rgb565_channels_stay_in_masks():
    shifts = channel_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFF0000, 16, shifts) == 0xF800
    assert good_color(0x00FF00, 16, shifts) == 0x07E0
    assert good_color(0x0000FF, 16, shifts) == 0x001F