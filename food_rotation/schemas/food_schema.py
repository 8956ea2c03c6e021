from marshmallow import Schema, fields, EXCLUDE

class FoodSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    # Trimmed and checked for emptiness by the catalog service
    name = fields.Str(required=True)
