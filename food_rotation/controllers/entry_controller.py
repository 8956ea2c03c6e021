from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from food_rotation.extensions import db
from food_rotation.schemas.entry_schema import CreateEntrySchema, UpdateEntrySchema
from food_rotation.services.entry_service import (
    create_entry,
    delete_entry,
    list_entries,
    log_food_by_name,
    update_entry_date,
)
from food_rotation.services.errors import RotationError
from food_rotation.utils.dates import parse_iso_datetime, to_iso
from food_rotation.utils.http import arg_str, error, json_body, ok, service_error, validate_schema


def list_entries_handler():
    """
    List logged entries, newest first.

    Query Parameters:
        - since: ISO date or datetime; only entries at or after it are returned
    """
    since_raw = arg_str("since")
    since = None
    if since_raw:
        since = parse_iso_datetime(since_raw)
        if since is None:
            return error("VALIDATION_ERROR", "since must be an ISO-8601 date", 400)

    return ok([entry.to_dict() for entry in list_entries(since)])


def create_entry_handler():
    """
    Log a food.

    Body Parameters:
        - foodId: Food to log
        - foodName: Alternative to foodId, matched case-insensitively
        - createFood: Add foodName to the catalog when it is unknown
        - date, time: Optional; both are needed to override "now"
    """
    data, errors = validate_schema(CreateEntrySchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid entry data", 400, details=errors)

    try:
        if data["food_id"] is not None:
            entry = create_entry(data["food_id"], data["date"], data["time"])
        else:
            entry = log_food_by_name(
                data["food_name"],
                create_missing=data["create_food"],
                day=data["date"],
                at=data["time"],
            )
    except RotationError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Create entry failed: {e}")
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok(entry.to_dict(), 201)


def update_entry_handler(entry_id: int):
    data, errors = validate_schema(UpdateEntrySchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Date and time required", 400, details=errors)

    try:
        entry = update_entry_date(entry_id, data["date"], data["time"])
    except RotationError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Update entry {entry_id} failed: {e}")
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok({"id": entry.id, "date": to_iso(entry.date)})


def delete_entry_handler(entry_id: int):
    try:
        deleted_id = delete_entry(entry_id)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Delete entry {entry_id} failed: {e}")
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok({"id": deleted_id})
