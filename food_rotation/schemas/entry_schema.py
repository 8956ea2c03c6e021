import datetime as dt

from marshmallow import Schema, fields, validate, validates_schema, ValidationError, EXCLUDE

from food_rotation.services.rotation_constants import MAX_ROW_ID

class ClockTime(fields.Field):
    """``HH:MM[:SS[.ffffff]]`` with an optional UTC offset, which is kept."""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, str):
            raise ValidationError("Not a valid time.")
        try:
            return dt.time.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValidationError("Not a valid time.") from exc

class CreateEntrySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    food_id = fields.Int(data_key="foodId", allow_none=True, load_default=None,
                         validate=validate.Range(min=1, max=MAX_ROW_ID))
    food_name = fields.Str(data_key="foodName", allow_none=True, load_default=None)
    create_food = fields.Bool(data_key="createFood", load_default=False)
    date = fields.Date(allow_none=True, load_default=None)
    time = ClockTime(allow_none=True, load_default=None)

    @validates_schema
    def validate_food_reference(self, data, **kwargs):
        if data.get("food_id") is None and not (data.get("food_name") or "").strip():
            raise ValidationError("foodId or foodName is required", "foodId")

class UpdateEntrySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    date = fields.Date(required=True)
    time = ClockTime(required=True)
