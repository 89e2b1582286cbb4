import pytest

from ghost_pursuit.config import DEFAULT_CONFIG, PursuitConfig


def test_defaults() -> None:
    assert DEFAULT_CONFIG.squares_ahead == 2
    assert DEFAULT_CONFIG.ambush_ahead == 4
    assert DEFAULT_CONFIG.shyness == 8
    assert DEFAULT_CONFIG.move_interval_ms == 250
    assert DEFAULT_CONFIG.interval_variation_ms == 50


@pytest.mark.parametrize(
    "kwargs",
    [
        {"squares_ahead": -1},
        {"ambush_ahead": -2},
        {"shyness": -1},
        {"move_interval_ms": 0},
        {"interval_variation_ms": 0},
    ],
)
def test_invalid_values_raise(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        PursuitConfig(**kwargs)


def test_config_is_frozen() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.shyness = 3  # type: ignore[misc]
