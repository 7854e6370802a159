from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from compound_interest.app import create_app
from compound_interest.config import Settings


@pytest.fixture()
def app() -> Flask:
    return create_app(Settings(APP_ENV="testing", LOG_LEVEL="DEBUG"))


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
