import pytest

from ghost_pursuit.components import Facing, Position, TargetingType, UnitKind
from ghost_pursuit.directions import Direction
from ghost_pursuit.levels.ascii import nearest_floor, parse_level, render_state
from ghost_pursuit.levels.convert import to_state
from ghost_pursuit.utils.ecs import units_of_kind

MAP = """
#######
#P....#
#.###.#
#.....#
#.#-#.#
#.#B#I#
#######
"""


def test_parse_level_dimensions_and_terrain() -> None:
    level = parse_level(MAP)
    assert (level.width, level.height) == (7, 7)
    assert level.objects_at((0, 0))[0].blocking is not None
    door = level.objects_at((3, 4))[0]
    assert door.barrier is not None and door.barrier.blocks(UnitKind.PLAYER)
    assert not door.barrier.blocks(UnitKind.BLINKY)
    assert level.objects_at((2, 1)) == []


def test_parse_level_units() -> None:
    state = to_state(parse_level(MAP, player_direction=Direction.SOUTH))
    (player,) = units_of_kind(state, UnitKind.PLAYER)
    (blinky,) = units_of_kind(state, UnitKind.BLINKY)
    (inky,) = units_of_kind(state, UnitKind.INKY)
    assert state.position[player] == Position(1, 1)
    assert state.facing[player] == Facing(Direction.SOUTH)
    assert state.position[blinky] == Position(3, 5)
    assert state.targeting[blinky].type == TargetingType.CHASE
    assert state.targeting[inky].type == TargetingType.REFLECTED_PROJECTION
    assert state.targeting[inky].ally == UnitKind.BLINKY
    assert state.targeting[inky].home is None


@pytest.mark.parametrize(
    "rows, corner, expected",
    [
        # walled-in board: first square inside the corner
        (MAP.strip("\n").splitlines(), (0, 6), (1, 5)),
        # open board: the corner itself
        (["...", "..."], (0, 1), (0, 1)),
        # equal distance: row-major order wins
        (["#.", ".."], (0, 0), (1, 0)),
        # doors are not floor
        (["-.", ".."], (0, 0), (1, 0)),
    ],
)
def test_nearest_floor(
    rows: list[str], corner: tuple[int, int], expected: tuple[int, int]
) -> None:
    assert nearest_floor(rows, corner) == expected


def test_nearest_floor_without_floor() -> None:
    with pytest.raises(ValueError):
        nearest_floor(["#-", "##"], (0, 1))


def test_clyde_home_is_inside_the_walls() -> None:
    state = to_state(parse_level("#####\n#...#\n#.C.#\n#####"))
    (clyde,) = units_of_kind(state, UnitKind.CLYDE)
    assert state.targeting[clyde].type == TargetingType.PATROL_CORNER
    assert state.targeting[clyde].home == Position(1, 2)


def test_parse_level_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError):
        parse_level("###\n##\n###")


def test_parse_level_rejects_unknown_glyph() -> None:
    with pytest.raises(ValueError):
        parse_level("#X#")


def test_parse_level_rejects_empty_map() -> None:
    with pytest.raises(ValueError):
        parse_level("\n\n")


def test_parse_level_options() -> None:
    level = parse_level("P..", wrap=True, seed=9)
    state = to_state(level)
    assert state.wrap and state.seed == 9


def test_spaces_are_floor() -> None:
    level = parse_level("P C")
    assert level.objects_at((1, 0)) == []


def test_render_round_trip() -> None:
    rows = [row.replace(" ", ".") for row in MAP.strip("\n").splitlines()]
    assert render_state(to_state(parse_level(MAP))) == "\n".join(rows)
