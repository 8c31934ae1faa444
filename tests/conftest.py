"""Shared fixtures: an app client with the simulated delays switched off."""

import pytest
from fastapi.testclient import TestClient

from floorplan_portal.config import Config
from floorplan_portal.main import app


@pytest.fixture(autouse=True)
def no_delay(monkeypatch):
    monkeypatch.setattr(Config, "GENERATION_DELAY_SECONDS", 0.0)
    monkeypatch.setattr(Config, "FORM_DELAY_SECONDS", 0.0)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def minimal_plan() -> dict:
    return {
        "length": 30,
        "width": 40,
        "bedrooms": 2,
        "drawingRoom": 1,
        "kitchen": 1,
        "toilet": 1,
        "hasParking": False,
    }


@pytest.fixture
def registration() -> dict:
    return {
        "fullName": "Asha Rao",
        "email": "asha@example.com",
        "password": "secret1",
        "confirmPassword": "secret1",
    }
