import os
import sys
import pytest
from datetime import date

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from food_rotation import create_app
from food_rotation.extensions import db


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "SECRET_KEY": "test-secret",
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def ctx(app):
    with app.app_context():
        yield app


FIXED_TODAY = date(2024, 1, 12)


@pytest.fixture()
def fixed_today(monkeypatch):
    """Pin the rotation views' notion of today."""
    monkeypatch.setattr("food_rotation.services.rotation_service.utc_today", lambda: FIXED_TODAY)
    return FIXED_TODAY
