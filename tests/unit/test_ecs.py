from ghost_pursuit.components import Position, Unit, UnitKind
from ghost_pursuit.utils.ecs import entities_at, find_nearest, units_of_kind
from tests.test_utils import (
    BLINKY_ID,
    INKY_ID,
    PLAYER_ID,
    TERRAIN_ID_BASE,
    make_pursuit_state,
)


def test_entities_at() -> None:
    state = make_pursuit_state(
        player_pos=(1, 1), blinky_pos=(1, 1), wall_positions=[(3, 3)]
    )
    assert entities_at(state, Position(1, 1)) == {PLAYER_ID, BLINKY_ID}
    assert entities_at(state, Position(3, 3)) == {TERRAIN_ID_BASE}
    assert entities_at(state, Position(0, 0)) == set()


def test_units_of_kind_is_sorted() -> None:
    extra = {
        "position": {9: Position(0, 0), 7: Position(4, 4)},
        "unit": {9: Unit(UnitKind.BLINKY), 7: Unit(UnitKind.BLINKY)},
    }
    state = make_pursuit_state(blinky_pos=(2, 2), extra_components=extra)
    assert units_of_kind(state, UnitKind.BLINKY) == [BLINKY_ID, 7, 9]
    assert units_of_kind(state, UnitKind.CLYDE) == []


def test_units_without_position_are_ignored() -> None:
    extra = {"unit": {9: Unit(UnitKind.PLAYER)}}
    state = make_pursuit_state(extra_components=extra)
    assert units_of_kind(state, UnitKind.PLAYER) == []
    assert find_nearest(state, UnitKind.PLAYER, Position(0, 0)) is None


def test_find_nearest_picks_closest() -> None:
    extra = {
        "position": {9: Position(4, 4)},
        "unit": {9: Unit(UnitKind.BLINKY)},
    }
    state = make_pursuit_state(blinky_pos=(0, 0), extra_components=extra)
    assert find_nearest(state, UnitKind.BLINKY, Position(1, 1)) == BLINKY_ID
    assert find_nearest(state, UnitKind.BLINKY, Position(3, 4)) == 9


def test_find_nearest_tie_goes_to_lowest_id() -> None:
    extra = {
        "position": {7: Position(0, 2)},
        "unit": {7: Unit(UnitKind.PLAYER)},
    }
    state = make_pursuit_state(player_pos=(2, 2), extra_components=extra)
    assert find_nearest(state, UnitKind.PLAYER, Position(1, 2)) == PLAYER_ID

    extra = {
        "position": {0: Position(0, 2)},
        "unit": {0: Unit(UnitKind.PLAYER)},
    }
    state = make_pursuit_state(player_pos=(2, 2), extra_components=extra)
    assert find_nearest(state, UnitKind.PLAYER, Position(1, 2)) == 0


def test_find_nearest_excludes_self() -> None:
    extra = {
        "position": {8: Position(4, 4)},
        "unit": {8: Unit(UnitKind.INKY)},
    }
    state = make_pursuit_state(inky_pos=(0, 0), extra_components=extra)
    reference = state.position[INKY_ID]
    assert find_nearest(state, UnitKind.INKY, reference) == INKY_ID
    assert find_nearest(state, UnitKind.INKY, reference, exclude=INKY_ID) == 8


def test_find_nearest_missing_kind() -> None:
    state = make_pursuit_state(player_pos=(1, 1))
    assert find_nearest(state, UnitKind.BLINKY, Position(0, 0)) is None


def test_find_nearest_uses_grid_distance_not_path_distance() -> None:
    # Wall column between the reference and the closer unit.
    extra = {
        "position": {9: Position(0, 4)},
        "unit": {9: Unit(UnitKind.PLAYER)},
    }
    walls = [(1, y) for y in range(4)]
    state = make_pursuit_state(
        player_pos=(2, 0), wall_positions=walls, extra_components=extra
    )
    assert find_nearest(state, UnitKind.PLAYER, Position(0, 0)) == PLAYER_ID
