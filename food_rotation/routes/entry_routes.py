from flask import Blueprint
from food_rotation.controllers.entry_controller import (
    list_entries_handler,
    create_entry_handler,
    update_entry_handler,
    delete_entry_handler,
)

entry_bp = Blueprint("entries", __name__, url_prefix="/api/entries")

@entry_bp.route("", methods=["GET"])
def list_entries():
    return list_entries_handler()

@entry_bp.route("", methods=["POST"])
def create():
    return create_entry_handler()

@entry_bp.route("/<int:id>", methods=["PUT"])
def update(id):
    return update_entry_handler(id)

@entry_bp.route("/<int:id>", methods=["DELETE"])
def delete(id):
    return delete_entry_handler(id)
