from food_rotation.services.rotation_service import available_foods, recent_summary
from food_rotation.utils.http import ok


def available_handler():
    return ok([food.to_dict() for food in available_foods()])


def summary_handler():
    return ok(recent_summary())
