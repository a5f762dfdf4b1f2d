import pytest

from breathing.components import Body, Health, Submersion
from breathing.factories import add_entity, create_breath_capacity, create_state
from breathing.hooks import default_damage_fn, default_state_changed_fn
from breathing.types import Medium


def test_create_breath_capacity_defaults() -> None:
    capacity = create_breath_capacity()
    assert capacity.breath_capacity_ms == 10000
    assert capacity.breath_recharge_rate == 1.0
    assert capacity.damage_interval_ms == 2000
    assert capacity.damage_per_tick == 5
    assert set(capacity.breathable_media) == {Medium.AIR}


def test_create_breath_capacity_normalizes_media() -> None:
    capacity = create_breath_capacity(breathable_media=["Oxygen", "WATER"])
    assert set(capacity.breathable_media) == {"air", "water"}


def test_create_breath_capacity_allows_zero_values() -> None:
    capacity = create_breath_capacity(breath_capacity_ms=0, breath_recharge_rate=0.0)
    assert capacity.breath_capacity_ms == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"breath_capacity_ms": -1},
        {"breath_recharge_rate": -0.5},
        {"breath_recharge_rate": float("inf")},
        {"breath_recharge_rate": float("nan")},
        {"damage_interval_ms": -1},
        {"damage_per_tick": -2},
    ],
)
def test_create_breath_capacity_rejects_invalid(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        create_breath_capacity(**kwargs)


def test_create_state_uses_registered_hooks() -> None:
    state = create_state()
    assert state.damage_fn is default_damage_fn
    assert state.state_changed_fn is default_state_changed_fn
    assert state.time == 0


def test_create_state_rejects_unknown_hook() -> None:
    with pytest.raises(ValueError):
        create_state(damage_fn_name="nope")
    with pytest.raises(ValueError):
        create_state(state_changed_fn_name="nope")


def test_add_entity_registers_components() -> None:
    state, eid = add_entity(create_state(), health=12, height=2.0)
    assert eid in state.entity
    assert state.health[eid] == Health(health=12, max_health=12)
    assert state.body[eid] == Body(height=2.0)
    assert state.submersion[eid] == Submersion(medium=Medium.AIR)
    assert eid in state.breath_capacity
    assert eid not in state.breath_state


def test_description_skips_empty_stores() -> None:
    state, eid = add_entity(create_state())
    description = state.description
    assert "breath_state" not in description
    assert "dead" not in description
    assert eid in description["health"]


def test_add_entity_allocates_fresh_ids() -> None:
    state = create_state()
    state, first = add_entity(state)
    state, second = add_entity(state)
    assert first != second
    assert second > first
    assert set(state.entity) == {first, second}
