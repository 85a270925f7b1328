import pytest

from daily_plan.errors import ExerciseNotFoundError
from daily_plan.services import WeightOverrideStore


def test_get_falls_back_to_catalog_default(seed_catalog):
    store = WeightOverrideStore()
    assert store.get_weight("q2", seed_catalog) == 20


def test_set_overwrites_unconditionally(seed_catalog):
    store = WeightOverrideStore()
    store.set_weight("q2", 25)
    store.set_weight("q2", 27.5)
    assert store.get_weight("q2", seed_catalog) == 27.5


def test_negative_values_are_accepted(seed_catalog):
    store = WeightOverrideStore()
    store.set_weight("a1", -5)
    assert store.get_weight("a1", seed_catalog) == -5


def test_unknown_id_without_override_is_not_found(seed_catalog):
    with pytest.raises(ExerciseNotFoundError):
        WeightOverrideStore().get_weight("zzz", seed_catalog)


def test_override_for_unknown_id_is_returned(seed_catalog):
    store = WeightOverrideStore()
    store.set_weight("zzz", 3)
    assert store.get_weight("zzz", seed_catalog) == 3


def test_seed_keeps_existing_entries(seed_catalog):
    store = WeightOverrideStore()
    store.set_weight("q1", 40)

    seeded = store.seed(["q1", "h2"], seed_catalog)

    assert seeded == ["h2"]
    assert store.as_dict() == {"q1": 40, "h2": 25}


def test_seed_unknown_id_raises(seed_catalog):
    with pytest.raises(ExerciseNotFoundError):
        WeightOverrideStore().seed(["nope"], seed_catalog)


def test_clear(seed_catalog):
    store = WeightOverrideStore()
    store.set_weight("q1", 40)
    store.clear()
    assert "q1" not in store
    assert store.get_weight("q1", seed_catalog) == 15
