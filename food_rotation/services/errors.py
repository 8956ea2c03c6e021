"""
Service Errors

Raised by the catalog, entry and rotation services and translated into
JSON error responses by the controllers.
"""


class RotationError(Exception):
    code = "UNKNOWN_ERROR"
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RotationError):
    """A required field is missing, empty or malformed."""
    code = "VALIDATION_ERROR"
    status = 400


class ConflictError(RotationError):
    """A food with the requested name already exists."""
    code = "DUPLICATE_ENTRY"
    status = 400


class NotFoundError(RotationError):
    code = "NOT_FOUND"
    status = 404


class UnknownFoodError(RotationError):
    """An entry refers to a food that does not exist."""
    code = "FOOD_NOT_FOUND"
    status = 400
