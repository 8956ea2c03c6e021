from flask import Blueprint
from food_rotation.controllers.rotation_controller import available_handler, summary_handler

rotation_bp = Blueprint("rotation", __name__, url_prefix="/api")

# Foods not eaten within the rotation window
@rotation_bp.get("/available")
def available():
    return available_handler()

# Recent entries flagged when a food repeats inside the window
@rotation_bp.get("/summary")
def summary():
    return summary_handler()
