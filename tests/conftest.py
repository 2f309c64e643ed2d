"""
Shared fixtures: an HTTP test client, a leg factory and a CSV writer.
"""
import pytest
from fastapi.testclient import TestClient

from flight_analyzer.main import app
from flight_analyzer.models.flight import FlightLeg

HEADER = (
    "id,aircraft_registration_number,aircraft_type,flight_number,"
    "departure_airport,departure_datetime,arrival_airport,arrival_datetime"
)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_leg():
    """Build a FlightLeg where only the fields a test cares about need passing."""
    def _make(**overrides) -> FlightLeg:
        values = {
            "id": 1,
            "aircraft_registration_number": "OH-LVA",
            "aircraft_type": "A320",
            "flight_number": "AA100",
            "departure_airport": "HEL",
            "departure_datetime": "2024-01-01 08:00",
            "arrival_airport": "LHR",
            "arrival_datetime": "2024-01-01 10:00",
        }
        values.update(overrides)
        return FlightLeg(**values)
    return _make


@pytest.fixture
def write_csv(tmp_path):
    """Write data rows (header added) to a temp CSV and return its path."""
    def _write(*rows: str) -> str:
        path = tmp_path / "flightdata.csv"
        path.write_text("\n".join([HEADER, *rows]) + "\n", encoding="utf-8")
        return str(path)
    return _write
