from datetime import datetime, time, timedelta

from food_rotation import create_app
from food_rotation.extensions import db
from food_rotation.models.entry import Entry
from food_rotation.models.food import Food
from food_rotation.utils.dates import utc_today

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    def add_food(name):
        food = Food.query.filter_by(name=name).first()
        if not food:
            food = Food(name=name)
            db.session.add(food)
            db.session.flush()
        return food

    def add_entry(food, days_ago, hour):
        when = datetime.combine(utc_today() - timedelta(days=days_ago), time(hour, 0))
        if not Entry.query.filter_by(food_id=food.id, date=when).first():
            db.session.add(Entry(food_id=food.id, food_name=food.name, date=when))

    rice = add_food("Rice")
    eggs = add_food("Eggs")
    toast = add_food("Toast")
    add_food("Salmon")
    add_food("Broccoli")

    add_entry(rice, 5, 12)
    add_entry(eggs, 2, 8)
    add_entry(eggs, 1, 8)
    add_entry(toast, 0, 8)

    db.session.commit()
    print("Seed completed")
