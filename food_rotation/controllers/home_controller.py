from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError

from food_rotation.extensions import db
from food_rotation.utils.dates import to_iso, utc_now

def home_index():
    return jsonify({
        "message": "Food rotation tracker is running",
    })

def health_check():
    db_status = "healthy"
    try:
        # Ping the database
        db.session.execute(db.text("SELECT 1"))
    except SQLAlchemyError as e:
        db_status = f"unhealthy: {str(e)}"

    return jsonify({
        "status": "online",
        "database": db_status,
        "server_time": to_iso(utc_now()),
    })
