from food_rotation.extensions import db
from food_rotation.utils.dates import to_iso

class Entry(db.Model):
    __tablename__ = "entries"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    # Nulled when the food is deleted without its entries
    food_id = db.Column(db.Integer, db.ForeignKey("foods.id"), nullable=True, index=True)
    # Snapshot of the food name, rewritten only by a rename of food_id
    food_name = db.Column(db.String(150), nullable=False)
    date = db.Column(db.DateTime, nullable=False, index=True)  # naive UTC

    def to_dict(self):
        return {
            "id": self.id,
            "food_id": self.food_id,
            "food_name": self.food_name,
            "date": to_iso(self.date),
        }

    def __repr__(self):
        return f"<Entry {self.id}: {self.food_name} at {self.date}>"
