"""
Entry Log Service

Handles the consumption log: logging a food at a point in time, listing the
log newest-first, rescheduling and deleting entries.
"""

import logging
from datetime import date, datetime, time
from typing import List, Optional

from sqlalchemy import desc

from food_rotation.extensions import db
from food_rotation.models.entry import Entry
from food_rotation.services.errors import NotFoundError, UnknownFoodError, ValidationError
from food_rotation.services.food_service import create_food, find_food_by_name, get_food, is_storable_id
from food_rotation.utils.dates import parse_iso_datetime, utc_now

logger = logging.getLogger(__name__)


def _combine_utc(day: date, at: time) -> datetime:
    # A time carrying an offset is shifted to UTC
    return parse_iso_datetime(datetime.combine(day, at))


def _resolve_when(day: Optional[date], at: Optional[time]) -> datetime:
    # Both parts are needed for an explicit timestamp, otherwise "now"
    if day is not None and at is not None:
        return _combine_utc(day, at)
    return utc_now()


def create_entry(food_id: int, day: Optional[date] = None, at: Optional[time] = None) -> Entry:
    """
    Log that a food was eaten.

    Args:
        food_id: Food being logged
        day: Calendar date of the meal (used only together with ``at``)
        at: Time of day of the meal

    Returns:
        The new entry, carrying a snapshot of the food's current name

    Raises:
        UnknownFoodError: If the food does not exist (no row is written)
    """
    food = get_food(food_id)
    if not food:
        logger.warning(f"Rejected entry for unknown food {food_id}")
        raise UnknownFoodError("Food not found")

    entry = Entry(food_id=food.id, food_name=food.name, date=_resolve_when(day, at))
    db.session.add(entry)
    db.session.commit()

    logger.info(f"Logged entry {entry.id} for food {food.id} '{food.name}' at {entry.date}")
    return entry


def log_food_by_name(
    name: str,
    create_missing: bool = False,
    day: Optional[date] = None,
    at: Optional[time] = None,
) -> Entry:
    """
    Log a food typed by name.

    The name is matched case-insensitively. An unknown name is added to the
    catalog first when ``create_missing`` is set, otherwise it is rejected.
    """
    if not (name or "").strip():
        raise ValidationError("Food name required")

    food = find_food_by_name(name)
    if not food:
        if not create_missing:
            raise UnknownFoodError(f"Food '{name.strip()}' not found")
        food = create_food(name)
    return create_entry(food.id, day, at)


def list_entries(since: Optional[datetime] = None) -> List[Entry]:
    """List entries newest-first, optionally only those at or after ``since``."""
    query = Entry.query
    if since is not None:
        query = query.filter(Entry.date >= since)
    return query.order_by(desc(Entry.date), desc(Entry.id)).all()


def update_entry_date(entry_id: int, day: Optional[date], at: Optional[time]) -> Entry:
    """
    Move an entry to a new date and time.

    Raises:
        ValidationError: If either the date or the time is missing
        NotFoundError: If the entry does not exist
    """
    if day is None or at is None:
        raise ValidationError("Date and time required")

    entry = db.session.get(Entry, entry_id) if is_storable_id(entry_id) else None
    if not entry:
        raise NotFoundError("Entry not found")

    entry.date = _combine_utc(day, at)
    db.session.commit()

    logger.info(f"Moved entry {entry_id} to {entry.date}")
    return entry


def delete_entry(entry_id: int) -> int:
    """Remove an entry; unknown ids are ignored."""
    if not is_storable_id(entry_id):
        return entry_id

    deleted = Entry.query.filter(Entry.id == entry_id).delete(synchronize_session="fetch")
    db.session.commit()
    if deleted:
        logger.info(f"Deleted entry {entry_id}")
    return entry_id
