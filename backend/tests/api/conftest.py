import pytest
from fastapi.testclient import TestClient

from navigator.api.services import RoutingService
from navigator.main import app


@pytest.fixture
def routing_service():
    """Fixture providing a fresh routing service"""
    return RoutingService()


@pytest.fixture
def client():
    """Fixture providing a test client with the app lifespan running"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def campus_waypoints_payload():
    """Fixture providing the campus waypoints as request JSON"""
    return [
        {"latitude": 34.7270, "longitude": -79.0187},
        {"latitude": 34.7265, "longitude": -79.0175},
        {"latitude": 34.7275, "longitude": -79.0180},
    ]
