"""Pytest fixtures for webapp tests."""

import pytest

from dilemma_arena.webapp.config import TestConfig


@pytest.fixture
def app():
    """Create test application."""
    from dilemma_arena.webapp import create_app

    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def started_game(client):
    """Start a 5-round game against Always Defect and return its JSON."""
    response = client.post(
        "/api/game/start",
        json={"algorithmId": "always_defect", "totalRounds": 5, "randomMode": False},
    )
    assert response.status_code == 200
    return response.get_json()
