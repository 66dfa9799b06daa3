import pytest

from solong.mapfile import (
    GameMap,
    MapError,
    check_extension,
    format_error,
    load_map,
    parse_map,
    validate_row,
)

VALID = "11111\n10CE1\n1P001\n11111"


def write(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_valid_map(tmp_path):
    game_map = load_map(write(tmp_path, VALID))
    assert game_map.width == 5
    assert game_map.height == 4
    assert game_map.tile(1, 2) == "P"
    assert game_map.tile(2, 1) == "C"
    assert game_map.tile(3, 1) == "E"
    assert str(game_map) == VALID


def test_parse_map_round_trip():
    lines = [line + "\n" for line in VALID.split("\n")[:-1]] + ["11111"]
    assert str(parse_map(lines)) == VALID


def test_trailing_newline_is_rejected(tmp_path):
    with pytest.raises(MapError, match="Wrong construction of the map!"):
        load_map(write(tmp_path, VALID + "\n"))


def test_interior_wall_row_with_newline_rejected():
    lines = ["11111\n", "11111\n", "1PCE1\n", "11111"]
    with pytest.raises(MapError, match="Wrong construction of the map!"):
        parse_map(lines)


def test_missing_collectible():
    lines = ["11111\n", "100E1\n", "1P001\n", "11111"]
    with pytest.raises(MapError, match="Something is missing from the map!"):
        parse_map(lines)


def test_two_players_in_different_rows():
    lines = ["11111\n", "1PCE1\n", "1P001\n", "11111"]
    with pytest.raises(MapError, match="Something is missing from the map!"):
        parse_map(lines)


def test_objects_counted_per_row():
    lines = ["111111\n", "1PPCE1\n", "100001\n", "111111"]
    game_map = parse_map(lines)
    assert game_map.tile(1, 1) == "P"
    assert game_map.tile(2, 1) == "P"


def test_height_too_small():
    lines = ["11111\n", "1PCE1\n", "11111"]
    with pytest.raises(MapError, match="The height is too small!"):
        parse_map(lines)


def test_width_too_small():
    lines = ["111\n", "1P1\n", "1C1\n", "1E1\n", "111"]
    with pytest.raises(MapError, match="The width is too small!"):
        parse_map(lines)


def test_letter_not_allowed():
    lines = ["11111\n", "1PXE1\n", "1C001\n", "11111"]
    with pytest.raises(MapError, match="letter not allowed"):
        parse_map(lines)


def test_open_border_rejected():
    lines = ["11111\n", "0PCE1\n", "10001\n", "11111"]
    with pytest.raises(MapError, match="Wrong construction of the map!"):
        parse_map(lines)


def test_row_of_wrong_length_rejected():
    lines = ["11111\n", "1PCE01\n", "10001\n", "11111"]
    with pytest.raises(MapError):
        parse_map(lines)


def test_validate_row_strips_newline():
    assert validate_row("10CE1\n", 5, 1) == "10CE1"
    assert validate_row("11111\n", 5, 0) == "11111"
    assert validate_row("11111", 5, 3) == "11111"


def test_validate_row_last_row_needs_newline_unless_walls():
    with pytest.raises(MapError):
        validate_row("10CE1", 5, 2)


def test_check_extension_rejects_other_files():
    with pytest.raises(MapError, match=r"\.ber") as info:
        check_extension("maps/level.txt")
    assert info.value.errnum == 2


def test_load_map_rejects_extension_before_reading(tmp_path):
    with pytest.raises(MapError, match="File type is not supported"):
        load_map(write(tmp_path, VALID, name="map.txt"))


def test_missing_file(tmp_path):
    with pytest.raises(MapError, match="File doesn't exists") as info:
        load_map(tmp_path / "absent.ber")
    assert info.value.errnum == 9


def test_empty_file(tmp_path):
    with pytest.raises(MapError, match="Something is missing"):
        load_map(write(tmp_path, ""))


def test_set_tile_and_tile():
    game_map = parse_map(["11111\n", "10CE1\n", "1P001\n", "11111"])
    game_map.set_tile(2, 2, "P")
    game_map.set_tile(1, 2, "0")
    assert game_map.tile(2, 2) == "P"
    assert game_map.tile(1, 2) == "0"


def test_tile_out_of_bounds():
    game_map = GameMap([list("11111"), list("1PCE1"), list("10001"), list("11111")])
    with pytest.raises(IndexError):
        game_map.tile(5, 0)
    with pytest.raises(IndexError):
        game_map.set_tile(-1, 0, "0")


def test_format_error_contains_message():
    text = format_error("The height is too small!")
    assert text.startswith("\033[31mError\n")
    assert "The height is too small!" in text
    assert text.endswith("\033[0m")


def test_map_error_message_attribute():
    err = MapError("The width is too small!")
    assert err.message == "The width is too small!"
    assert str(err) == "The width is too small!"
    assert err.errnum == 5