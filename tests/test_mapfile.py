import pytest

from fromage.mapfile import (
    MapError,
    find_tile,
    flood_fill,
    is_enclosed,
    is_playable,
    is_rectangle,
    load_map,
    read_rows,
    split_lines,
    valid_count,
    validate_rows,
)

GOOD = [
    "1111111",
    "1P0C001",
    "1000CE1",
    "1111111",
]

BLOCKED_COLLECTIBLE = [
    "1111111",
    "1P01C01",
    "1001101",
    "10000E1",
    "1111111",
]

FOX_BLOCKS_EXIT = [
    "111111",
    "1PC0R1",
    "11111E",
]


def write_map(tmp_path, rows, name="level.ber"):
    path = tmp_path / name
    path.write_text("\n".join(rows) + "\n")
    return path


def test_split_lines_drops_empty_pieces():
    assert split_lines("\n\nab\n\ncd\n") == ["ab", "cd"]


def test_split_lines_of_empty_text():
    assert split_lines("") == []


def test_read_rows_round_trip(tmp_path):
    path = write_map(tmp_path, GOOD)
    assert read_rows(path) == GOOD


def test_read_rows_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_rows(tmp_path / "absent.ber")


def test_is_rectangle_counts_rows():
    assert is_rectangle(GOOD) == len(GOOD)


def test_is_rectangle_rejects_ragged():
    assert is_rectangle(["111", "11", "111"]) == 0


def test_is_rectangle_rejects_empty():
    assert is_rectangle([]) == 0


def test_valid_count_accepts_good_map():
    assert valid_count(GOOD) is True


@pytest.mark.parametrize(
    "rows",
    [
        ["11111", "1P0E1", "11111"],  # no collectible
        ["111111", "1PPCE1", "111111"],  # two players
        ["111111", "1PCEE1", "111111"],  # two exits
        ["11111", "10CE1", "11111"],  # no player
        ["111111", "1PCEX1", "111111"],  # unknown tile
    ],
)
def test_valid_count_rejects(rows):
    assert valid_count(rows) is False


def test_valid_count_allows_fox():
    assert valid_count(["1111111", "1PCER01", "1111111"]) is True


def test_is_enclosed_accepts_walled_map():
    assert is_enclosed(GOOD) is True


def test_is_enclosed_rejects_gap_in_top():
    rows = ["1101111"] + GOOD[1:]
    assert is_enclosed(rows) is False


def test_is_enclosed_rejects_gap_on_side():
    rows = [GOOD[0], "0P0C001", GOOD[2], GOOD[3]]
    assert is_enclosed(rows) is False


def test_find_tile_returns_first_match():
    row, col = find_tile(GOOD, "C")
    assert GOOD[row][col] == "C"
    assert "C" not in "".join(GOOD[:row])
    assert "C" not in GOOD[row][:col]


def test_find_tile_absent():
    assert find_tile(GOOD, "R") is None


def test_flood_fill_marks_reachable_and_keeps_shape():
    start = find_tile(GOOD, "P")
    filled = flood_fill(GOOD, start)
    assert [len(r) for r in filled] == [len(r) for r in GOOD]
    assert filled[start[0]][start[1]] == "O"
    assert "C" not in "".join(filled)
    assert "P" not in "".join(filled)
    # walls and the exit are left untouched
    assert filled[0] == GOOD[0]
    assert find_tile(filled, "E") == find_tile(GOOD, "E")


def test_flood_fill_does_not_modify_input():
    copy = list(GOOD)
    flood_fill(GOOD, find_tile(GOOD, "P"))
    assert GOOD == copy


def test_flood_fill_stops_at_fox():
    filled = flood_fill(FOX_BLOCKS_EXIT, find_tile(FOX_BLOCKS_EXIT, "P"))
    assert "R" in "".join(filled)


def test_is_playable_good():
    assert is_playable(GOOD, find_tile(GOOD, "P"), find_tile(GOOD, "E")) is True


def test_is_playable_unreachable_collectible():
    rows = BLOCKED_COLLECTIBLE
    assert is_playable(rows, find_tile(rows, "P"), find_tile(rows, "E")) is False


def test_is_playable_exit_unreachable():
    rows = [
        "1111111",
        "1PC1001",
        "11110E1",
        "1111111",
    ]
    assert is_playable(rows, find_tile(rows, "P"), find_tile(rows, "E")) is False


def test_validate_rows_returns_rows():
    assert validate_rows(iter(GOOD)) == GOOD


@pytest.mark.parametrize(
    "rows",
    [
        [],
        ["111", "1P", "111"],
        ["11111", "1P0E1", "11111"],
        ["1101111", "1P0C001", "1000CE1", "1111111"],
        BLOCKED_COLLECTIBLE,
    ],
)
def test_validate_rows_rejects(rows):
    with pytest.raises(MapError):
        validate_rows(rows)


def test_load_map_round_trip(tmp_path):
    path = write_map(tmp_path, GOOD)
    assert load_map(path) == GOOD
    assert load_map(str(path)) == GOOD


def test_load_map_ignores_blank_lines(tmp_path):
    path = tmp_path / "spaced.ber"
    path.write_text("\n".join(GOOD[:2]) + "\n\n" + "\n".join(GOOD[2:]))
    assert load_map(path) == GOOD


def test_load_map_requires_ber_extension(tmp_path):
    path = write_map(tmp_path, GOOD, name="level.txt")
    with pytest.raises(MapError):
        load_map(path)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "nowhere.ber")


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError):
        load_map(path)


def test_map_error_is_value_error():
    with pytest.raises(ValueError):
        validate_rows([])