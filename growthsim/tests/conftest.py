from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from growthsim.app import create_app
from growthsim.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        env="test",
        log_level="DEBUG",
        cors_origins=("http://localhost:5173",),
        port=5000,
    )


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    with app.test_client() as test_client:
        yield test_client
