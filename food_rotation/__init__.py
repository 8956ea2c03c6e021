import logging

from flask import Flask
from food_rotation.extensions import db, migrate, cors
from food_rotation.routes import register_routes

def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", "*"),
                  allow_headers=["Content-Type"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])

    register_routes(app)

    # Tables are created on startup when missing
    from food_rotation.models.food import Food  # noqa: F401
    from food_rotation.models.entry import Entry  # noqa: F401
    with app.app_context():
        db.create_all()

    return app
