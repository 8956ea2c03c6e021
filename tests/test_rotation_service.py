from datetime import date, datetime

from food_rotation.extensions import db
from food_rotation.models.entry import Entry
from food_rotation.models.food import Food
from food_rotation.services.food_service import delete_food
from food_rotation.services.rotation_service import (
    available_foods,
    days_until_available,
    foods_with_next_available,
    is_available,
    next_available_date,
    recent_summary,
)


def make_food(name):
    food = Food(name=name)
    db.session.add(food)
    db.session.commit()
    return food

def eat(food, when):
    db.session.add(Entry(food_id=food.id, food_name=food.name, date=when))
    db.session.commit()


def test_rotation_rule_helpers():
    today = date(2024, 1, 5)
    assert is_available(None, today)
    assert next_available_date(None, today) == today

    last = datetime(2024, 1, 1, 20, 15)
    assert next_available_date(last, today) == date(2024, 1, 5)
    assert is_available(last, date(2024, 1, 5))
    assert not is_available(last, date(2024, 1, 4))

    assert days_until_available(date(2024, 1, 5), date(2024, 1, 2)) == 3
    assert days_until_available(date(2024, 1, 5), date(2024, 1, 5)) == 0
    assert days_until_available(date(2024, 1, 5), date(2024, 1, 9)) == 0

def test_rice_becomes_available_after_four_days(ctx):
    rice = make_food("Rice")
    eat(rice, datetime(2024, 1, 1, 12, 0))

    assert available_foods(today=date(2024, 1, 4)) == []
    assert [f.name for f in available_foods(today=date(2024, 1, 5))] == ["Rice"]

    status = foods_with_next_available(today=date(2024, 1, 4))[0]
    assert status["next_available"] == "2024-01-05"
    assert status["last_eaten"] == "2024-01-01T12:00:00.000Z"
    assert status["days_until"] == 1
    assert status["available"] is False

    status = foods_with_next_available(today=date(2024, 1, 5))[0]
    assert status["days_until"] == 0
    assert status["available"] is True

def test_never_eaten_food_is_available_today(ctx):
    make_food("Lentils")
    today = date(2024, 3, 10)

    assert [f.name for f in available_foods(today=today)] == ["Lentils"]
    status = foods_with_next_available(today=today)
    assert status == [{
        "id": status[0]["id"],
        "name": "Lentils",
        "last_eaten": None,
        "next_available": "2024-03-10",
        "days_until": 0,
        "available": True,
    }]

def test_detached_entries_do_not_block_new_food(ctx):
    old = make_food("Rice")
    eat(old, datetime(2024, 1, 3, 9, 0))
    delete_food(old.id, remove_entries=False)

    # Same name again, but the detached entry belongs to no food
    new = make_food("Rice")
    assert [f.id for f in available_foods(today=date(2024, 1, 4))] == [new.id]

def test_summary_repeated_flags(ctx):
    eggs = make_food("Eggs")
    toast = make_food("Toast")
    eat(eggs, datetime(2024, 1, 10, 8, 0))
    eat(eggs, datetime(2024, 1, 11, 8, 0))
    eat(toast, datetime(2024, 1, 12, 7, 30))
    # Before the window; must not make Toast a repeat
    eat(toast, datetime(2024, 1, 8, 23, 59))

    summary = recent_summary(today=date(2024, 1, 12))
    assert [(e["food_name"], e["repeated"]) for e in summary] == [
        ("Toast", False),
        ("Eggs", True),
        ("Eggs", True),
    ]

def test_summary_includes_window_start_day(ctx):
    rice = make_food("Rice")
    eat(rice, datetime(2024, 1, 9, 0, 0))

    summary = recent_summary(today=date(2024, 1, 12))
    assert len(summary) == 1
    assert summary[0]["date"] == "2024-01-09T00:00:00.000Z"
