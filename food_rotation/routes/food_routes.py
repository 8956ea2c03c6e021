from flask import Blueprint
from food_rotation.controllers.food_controller import (
    list_foods_handler,
    create_food_handler,
    rename_food_handler,
    delete_food_handler,
    next_available_handler,
)

food_bp = Blueprint("foods", __name__, url_prefix="/api/foods")

@food_bp.route("", methods=["GET"])
def list_foods():
    return list_foods_handler()

@food_bp.route("", methods=["POST"])
def create():
    return create_food_handler()

# Foods with the date they come back into rotation
@food_bp.route("/next", methods=["GET"])
def next_available():
    return next_available_handler()

@food_bp.route("/<int:id>", methods=["PUT"])
def rename(id):
    return rename_food_handler(id)

@food_bp.route("/<int:id>", methods=["DELETE"])
def delete(id):
    return delete_food_handler(id)
