from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from habitfund.app import create_app
from habitfund.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(env="test", log_level="WARNING", max_projection_years=60)


@pytest.fixture()
def app(settings: Settings) -> Flask:
    flask_app = create_app(settings)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
