from typing import Any, Dict, Optional, Tuple, Type
from flask import request, jsonify
from marshmallow import Schema, ValidationError as SchemaValidationError

from food_rotation.services.errors import RotationError

def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def service_error(exc: RotationError):
    return error(exc.code, exc.message, exc.status)


def json_body() -> Dict[str, Any]:
    # Try parsing as JSON first (force=True allows missing Content-Type header)
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    # Fallback to form data (converted to dict) if JSON parsing fails
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls: Type[Schema], data: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """Load ``data`` through a marshmallow schema, returning ``(result, errors)``."""
    try:
        return schema_cls().load(data), None
    except SchemaValidationError as exc:
        return None, exc.messages


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None:
        return default
    return val


def arg_bool(name: str, default: bool = False) -> bool:
    val = request.args.get(name)
    if val is None:
        return default
    return val.strip().lower() in ("true", "1", "yes")
