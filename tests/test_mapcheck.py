import pytest

from cubscene.mapcheck import (
    check_inner_empty_lines,
    check_invalid_chars,
    check_map,
    check_player_count,
    map_is_closed,
)
from cubscene.scene import ParseError, SceneData

GOOD_MAP = [
    "111111\n",
    "100001\n",
    "10N001\n",
    "111111\n",
]


def test_check_map_accepts_closed_map():
    data = SceneData(map=list(GOOD_MAP))
    check_map(data)
    assert data.player_dir == "N"


def test_check_map_rejects_missing_map():
    with pytest.raises(ParseError):
        check_map(SceneData())


def test_invalid_char_reported():
    data = SceneData(map=["111\n", "1X1\n", "111\n"])
    with pytest.raises(ParseError, match="X"):
        check_invalid_chars(data)


def test_valid_chars_pass():
    data = SceneData(map=list(GOOD_MAP) + [" \t\n"])
    check_invalid_chars(data)
    assert data.map_height == len(GOOD_MAP) + 1


@pytest.mark.parametrize(
    "grid, count",
    [
        (["111\n", "101\n", "111\n"], 0),
        (["1111\n", "1NS1\n", "1111\n"], 2),
    ],
)
def test_player_count_must_be_one(grid, count):
    with pytest.raises(ParseError, match=f"Found {count} players"):
        check_player_count(SceneData(map=grid))


def test_player_count_records_direction():
    data = SceneData(map=["111\n", "1W1\n", "111\n"])
    check_player_count(data)
    assert data.player_dir == "W"


def test_leading_and_trailing_empty_lines_allowed():
    data = SceneData(map=["\n", "\n"] + list(GOOD_MAP) + ["\n"])
    check_inner_empty_lines(data)
    assert data.map[0] == "\n"


def test_inner_empty_line_rejected():
    data = SceneData(map=["111\n", "\n", "111\n"])
    with pytest.raises(ParseError, match="line 3"):
        check_inner_empty_lines(data)


def test_closed_map_is_closed():
    assert map_is_closed(SceneData(map=list(GOOD_MAP))) is True


def test_floor_on_edge_is_open():
    grid = ["111111\n", "000001\n", "10N001\n", "111111\n"]
    assert map_is_closed(SceneData(map=grid)) is False


def test_floor_next_to_space_is_open():
    grid = ["111111\n", "10 001\n", "10N001\n", "111111\n"]
    assert map_is_closed(SceneData(map=grid)) is False


def test_floor_below_short_row_is_open():
    grid = ["111\n", "100001\n", "10N001\n", "111111\n"]
    assert map_is_closed(SceneData(map=grid)) is False


def test_floor_on_last_row_is_open():
    grid = ["111111\n", "10N001\n", "100001\n"]
    assert map_is_closed(SceneData(map=grid)) is False


def test_player_on_edge_is_open():
    grid = ["1111\n", "N001\n", "1111\n"]
    assert map_is_closed(SceneData(map=grid)) is False


def test_check_map_rejects_open_map():
    grid = ["111111\n", "10N000\n", "111111\n"]
    with pytest.raises(ParseError, match="closed"):
        check_map(SceneData(map=grid))