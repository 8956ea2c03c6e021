"""
Rotation Service

Derives the rotation views from the entry log:
- When each food was last eaten and when it is next available
- Which foods are available today
- The recent-entries summary with repeat flags

Every view is recomputed from the stored rows. Comparisons use calendar
dates (UTC) while entries keep their full timestamps for ordering.
"""

import math
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import desc, func, or_

from food_rotation.extensions import db
from food_rotation.models.entry import Entry
from food_rotation.models.food import Food
from food_rotation.services.rotation_constants import ROTATION_DAYS, SUMMARY_LOOKBACK_DAYS
from food_rotation.utils.dates import start_of_day, to_iso, utc_today

ONE_DAY = timedelta(days=1)


# ============================================================================
# Rotation rule
# ============================================================================

def next_available_date(last_eaten: Optional[datetime], today: date) -> date:
    """Calendar date the food may be eaten again; today if it was never eaten."""
    if last_eaten is None:
        return today
    return last_eaten.date() + timedelta(days=ROTATION_DAYS)


def is_available(last_eaten: Optional[datetime], today: date) -> bool:
    """True when never eaten or last eaten at least ROTATION_DAYS calendar days ago."""
    if last_eaten is None:
        return True
    return last_eaten.date() <= today - timedelta(days=ROTATION_DAYS)


def days_until_available(next_available: date, today: date) -> int:
    """Whole days to wait; 0 means available today."""
    days = math.ceil((start_of_day(next_available) - start_of_day(today)) / ONE_DAY)
    return max(0, days)


def _last_eaten_subquery():
    return (
        db.session.query(
            Entry.food_id.label("food_id"),
            func.max(Entry.date).label("last_eaten"),
        )
        .filter(Entry.food_id.isnot(None))
        .group_by(Entry.food_id)
        .subquery()
    )


# ============================================================================
# Views
# ============================================================================

def foods_with_next_available(today: Optional[date] = None) -> List[Dict[str, Any]]:
    """
    List every food with its rotation status, ordered by name.

    Args:
        today: Reference date (defaults to the current UTC date)

    Returns:
        List of dicts with id, name, last_eaten, next_available (YYYY-MM-DD),
        days_until and available
    """
    today = today or utc_today()
    last = _last_eaten_subquery()
    rows = (
        db.session.query(Food, last.c.last_eaten)
        .outerjoin(last, Food.id == last.c.food_id)
        .order_by(Food.name)
        .all()
    )

    payload = []
    for food, last_eaten in rows:
        next_date = next_available_date(last_eaten, today)
        payload.append({
            "id": food.id,
            "name": food.name,
            "last_eaten": to_iso(last_eaten),
            "next_available": next_date.isoformat(),
            "days_until": days_until_available(next_date, today),
            "available": is_available(last_eaten, today),
        })
    return payload


def available_foods(today: Optional[date] = None) -> List[Food]:
    """Foods never eaten or not eaten within the rotation window, by name."""
    today = today or utc_today()
    # date(last_eaten) <= today - ROTATION_DAYS, written as a timestamp bound
    cutoff = start_of_day(today - timedelta(days=ROTATION_DAYS) + ONE_DAY)
    last = _last_eaten_subquery()
    return (
        db.session.query(Food)
        .outerjoin(last, Food.id == last.c.food_id)
        .filter(or_(last.c.last_eaten.is_(None), last.c.last_eaten < cutoff))
        .order_by(Food.name)
        .all()
    )


def summary_window_start(today: date) -> date:
    return today - timedelta(days=SUMMARY_LOOKBACK_DAYS)


def recent_summary(today: Optional[date] = None) -> List[Dict[str, Any]]:
    """
    Entries dated within the summary window, newest-first.

    Each entry carries ``repeated``: whether its food name occurs more than
    once among the entries in this window (the rest of the log is ignored).
    """
    today = today or utc_today()
    since = start_of_day(summary_window_start(today))
    entries = (
        Entry.query
        .filter(Entry.date >= since)
        .order_by(desc(Entry.date), desc(Entry.id))
        .all()
    )

    counts = Counter(entry.food_name for entry in entries)
    return [
        {**entry.to_dict(), "repeated": counts[entry.food_name] > 1}
        for entry in entries
    ]
