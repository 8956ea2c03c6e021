"""
Food Catalog Service

Handles the food catalog: listing, creation, renaming (with propagation of
the new name onto existing entries) and deletion (cascading or detaching
entries).
"""

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from food_rotation.extensions import db
from food_rotation.models.entry import Entry
from food_rotation.models.food import Food
from food_rotation.services.errors import ConflictError, NotFoundError, ValidationError
from food_rotation.services.rotation_constants import MAX_ROW_ID

logger = logging.getLogger(__name__)


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Name required")
    return cleaned


def list_foods() -> List[Food]:
    """Return every food ordered alphabetically by name."""
    return Food.query.order_by(Food.name).all()


def is_storable_id(row_id) -> bool:
    """Ids outside the INTEGER range can never match a row."""
    return isinstance(row_id, int) and 0 < row_id <= MAX_ROW_ID


def get_food(food_id: int) -> Optional[Food]:
    if not is_storable_id(food_id):
        return None
    return db.session.get(Food, food_id)


def find_food_by_name(name: str) -> Optional[Food]:
    """Case-insensitive lookup of a food by its trimmed name."""
    cleaned = (name or "").strip()
    if not cleaned:
        return None
    exact = Food.query.filter_by(name=cleaned).first()
    if exact:
        return exact
    return (
        Food.query
        .filter(func.lower(Food.name) == cleaned.lower())
        .order_by(Food.id)
        .first()
    )


def create_food(name: str) -> Food:
    """
    Add a food to the catalog.

    Raises:
        ValidationError: If the name is empty after trimming
        ConflictError: If a food with that exact name already exists
    """
    name = _clean_name(name)
    if Food.query.filter_by(name=name).first():
        logger.warning(f"Rejected duplicate food name '{name}'")
        raise ConflictError("Food already exists")

    food = Food(name=name)
    db.session.add(food)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("Food already exists")

    logger.info(f"Created food {food.id} '{food.name}'")
    return food


def rename_food(food_id: int, name: str) -> Food:
    """
    Rename a food and rewrite ``food_name`` on every entry still attached to it.

    Entries detached from the food (``food_id`` null) keep their old label.

    Raises:
        ValidationError: If the name is empty after trimming
        NotFoundError: If the food does not exist
        ConflictError: If another food already uses the name
    """
    name = _clean_name(name)
    food = get_food(food_id)
    if not food:
        raise NotFoundError("Food not found")

    taken = Food.query.filter(Food.name == name, Food.id != food_id).first()
    if taken:
        logger.warning(f"Rejected rename of food {food_id} to existing name '{name}'")
        raise ConflictError("Food already exists")

    food.name = name
    updated = (
        Entry.query
        .filter(Entry.food_id == food_id)
        .update({Entry.food_name: name}, synchronize_session="fetch")
    )
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("Food already exists")

    logger.info(f"Renamed food {food_id} to '{name}' ({updated} entries updated)")
    return food


def delete_food(food_id: int, remove_entries: bool = False) -> int:
    """
    Delete a food.

    With ``remove_entries`` its entries are deleted too; otherwise they are
    detached (``food_id`` set to null) and keep their recorded name.
    Unknown ids are ignored.
    """
    if not is_storable_id(food_id):
        return food_id

    query = Entry.query.filter(Entry.food_id == food_id)
    if remove_entries:
        affected = query.delete(synchronize_session="fetch")
    else:
        affected = query.update({Entry.food_id: None}, synchronize_session="fetch")

    food = get_food(food_id)
    if food:
        db.session.delete(food)
    db.session.commit()

    action = "deleted" if remove_entries else "detached"
    logger.info(f"Deleted food {food_id} ({affected} entries {action})")
    return food_id
