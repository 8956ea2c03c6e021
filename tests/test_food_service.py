from datetime import date, time

import pytest

from food_rotation.extensions import db
from food_rotation.models.entry import Entry
from food_rotation.services.entry_service import create_entry, delete_entry, log_food_by_name, update_entry_date
from food_rotation.services.errors import ConflictError, NotFoundError, UnknownFoodError, ValidationError
from food_rotation.services.food_service import create_food, delete_food, find_food_by_name, get_food, rename_food


def test_create_food_conflicts(ctx):
    create_food("Oats")
    with pytest.raises(ConflictError):
        create_food(" Oats ")
    with pytest.raises(ValidationError):
        create_food("  ")

def test_rename_updates_entry_snapshots(ctx):
    oats = create_food("Oats")
    entry = create_entry(oats.id)
    assert entry.food_name == "Oats"

    rename_food(oats.id, "Rolled Oats")
    db.session.expire_all()
    assert db.session.get(Entry, entry.id).food_name == "Rolled Oats"

    with pytest.raises(NotFoundError):
        rename_food(9999, "Anything")

def test_find_food_by_name_prefers_exact_match(ctx):
    lower = create_food("tofu")
    upper = create_food("Tofu")
    assert find_food_by_name("Tofu").id == upper.id
    assert find_food_by_name("tofu").id == lower.id
    assert find_food_by_name("TOFU").id == lower.id
    assert find_food_by_name("") is None

def test_unknown_food_writes_nothing(ctx):
    with pytest.raises(UnknownFoodError):
        create_entry(42)
    with pytest.raises(UnknownFoodError):
        log_food_by_name("Mystery")
    assert Entry.query.count() == 0

def test_update_entry_requires_date_and_time(ctx):
    oats = create_food("Oats")
    entry = create_entry(oats.id)
    with pytest.raises(ValidationError):
        update_entry_date(entry.id, None, None)

def test_out_of_range_ids_resolve_to_nothing(ctx):
    huge = 2**70
    assert get_food(huge) is None
    with pytest.raises(UnknownFoodError):
        create_entry(huge)
    with pytest.raises(NotFoundError):
        rename_food(huge, "Barley")
    with pytest.raises(NotFoundError):
        update_entry_date(huge, date(2024, 1, 1), time(8, 0))
    assert delete_food(huge) == huge
    assert delete_entry(huge) == huge
