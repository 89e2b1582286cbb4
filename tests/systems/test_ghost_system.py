import random

from ghost_pursuit.components import Facing
from ghost_pursuit.directions import Direction
from ghost_pursuit.step import step
from ghost_pursuit.systems.ghost import ghost_system, move_ghost
from tests.test_utils import (
    BLINKY_ID,
    INKY_ID,
    PLAYER_ID,
    assert_entity_positions,
    make_pursuit_state,
)


def test_ghosts_move_in_id_order_and_see_earlier_moves() -> None:
    state = make_pursuit_state(
        player_pos=(2, 2),
        player_direction=Direction.EAST,
        blinky_pos=(0, 0),
        inky_pos=(4, 4),
    )
    new_state = ghost_system(state, random.Random(0))

    # Blinky chases (0,0) -> (2,2) and steps east first; Inky then anchors on
    # Blinky's new square (1,0), still ends up with C = (4,2) and steps north.
    assert_entity_positions(new_state, {BLINKY_ID: (1, 0), INKY_ID: (4, 3), PLAYER_ID: (2, 2)})
    assert new_state.facing[BLINKY_ID] == Facing(Direction.EAST)
    assert new_state.facing[INKY_ID] == Facing(Direction.NORTH)
    assert new_state.facing[PLAYER_ID] == Facing(Direction.EAST)


def test_ghost_system_matches_sequential_moves() -> None:
    state = make_pursuit_state(
        player_pos=(2, 2), blinky_pos=(0, 0), inky_pos=(4, 4)
    )
    expected = move_ghost(state, BLINKY_ID, random.Random(0))
    expected = move_ghost(expected, INKY_ID, random.Random(0))
    assert ghost_system(state, random.Random(0)).position == expected.position


def test_dead_end_ghost_stays_in_place() -> None:
    state = make_pursuit_state(
        player_pos=(2, 2),
        blinky_pos=(0, 0),
        inky_pos=(4, 4),
        wall_positions=[(3, 4), (4, 3)],
    )
    new_state = ghost_system(state, random.Random(0))
    assert_entity_positions(new_state, {INKY_ID: (4, 4)})
    assert INKY_ID not in new_state.facing


def test_player_is_never_moved() -> None:
    state = make_pursuit_state(player_pos=(2, 2), blinky_pos=(0, 0))
    for _ in range(5):
        state = ghost_system(state, random.Random(0))
    assert_entity_positions(state, {PLAYER_ID: (2, 2)})


def test_ghost_system_without_rng_is_deterministic() -> None:
    state = make_pursuit_state(inky_pos=(2, 2), seed=3)
    assert ghost_system(state) == ghost_system(state)


def test_step_increments_turn() -> None:
    state = make_pursuit_state(player_pos=(2, 2), blinky_pos=(0, 0))
    state = step(state, random.Random(0))
    assert state.turn == 1
    state = step(state, random.Random(0))
    assert state.turn == 2
    assert_entity_positions(state, {BLINKY_ID: (2, 0)})


def test_blinky_catches_a_still_player() -> None:
    state = make_pursuit_state(player_pos=(3, 4), blinky_pos=(0, 0))
    for _ in range(7):
        state = step(state, random.Random(0))
    assert state.position[BLINKY_ID] == state.position[PLAYER_ID]
