"""
Food Controller Module

Handles food catalog endpoints:
- Listing, creating and renaming foods
- Deleting foods (cascading or detaching their entries)
- Rotation status per food
"""

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from food_rotation.extensions import db
from food_rotation.schemas.food_schema import FoodSchema
from food_rotation.services.errors import RotationError
from food_rotation.services.food_service import create_food, delete_food, list_foods, rename_food
from food_rotation.services.rotation_service import foods_with_next_available
from food_rotation.utils.http import arg_bool, error, json_body, ok, service_error, validate_schema


def list_foods_handler():
    return ok([food.to_dict() for food in list_foods()])


def create_food_handler():
    data, errors = validate_schema(FoodSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Name required", 400, details=errors)

    try:
        food = create_food(data["name"])
    except RotationError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Create food failed: {e}")
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok(food.to_dict(), 201)


def rename_food_handler(food_id: int):
    """
    Rename a food.

    Body Parameters:
        - name: New name (trimmed, must not collide with another food)

    The new name is copied onto every entry still linked to the food.
    """
    data, errors = validate_schema(FoodSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Name required", 400, details=errors)

    try:
        food = rename_food(food_id, data["name"])
    except RotationError as e:
        return service_error(e)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Rename food {food_id} failed: {e}")
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok(food.to_dict())


def delete_food_handler(food_id: int):
    """
    Delete a food.

    Query Parameters:
        - removeEntries: "true" deletes the food's entries, anything else
          keeps them with their recorded name and no food link
    """
    remove_entries = arg_bool("removeEntries", False)
    try:
        deleted_id = delete_food(food_id, remove_entries=remove_entries)
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Delete food {food_id} failed: {e}")
        return error("UNKNOWN_ERROR", str(e), 500)
    return ok({"id": deleted_id})


def next_available_handler():
    return ok(foods_with_next_available())
