"""Tests for the HTTP interface."""

import pytest
from fastapi.testclient import TestClient

from metro_router import network as network_module
from metro_router.api import app
from metro_router.exceptions import InvalidTopology
from metro_router.lines import METRO_LINES
from metro_router.network import Network


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def split_network(monkeypatch):
    """Swap the default network for one with two unconnected lines."""
    network = Network({"north": ["A", "B"], "south": ["C", "D"]})
    monkeypatch.setattr(network_module, "_network", network)
    return network


def test_health_check(client):
    """Test the root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_stations(client):
    """Test listing every station once."""
    response = client.get("/stations")
    assert response.status_code == 200
    stations = response.json()
    assert len(stations) == 38
    assert len(stations) == len(set(stations))
    assert stations[0] == "East End"


def test_list_stations_on_line(client):
    """Test narrowing the station list to one line."""
    response = client.get("/stations", params={"line": "red"})
    assert response.status_code == 200
    assert response.json() == METRO_LINES["red"]

    response = client.get("/stations", params={"line": "purple"})
    assert response.json() == []


def test_calculate_route(client):
    """Test a successful route calculation."""
    response = client.post("/calculate-route", json={"start": "East End", "end": "Boxing Avenue"})
    assert response.status_code == 200
    data = response.json()
    assert data["time"] == 40
    assert data["cost"] == 8
    assert len(data["path"]) == 9
    assert data["path"][0] == {
        "station": "East End", "line": "blue", "direction": "towards West End"
    }
    assert data["path"][-1]["station"] == "Boxing Avenue"


def test_calculate_route_with_transfer(client):
    """Test a route that changes lines."""
    response = client.post("/calculate-route", json={"start": "East End", "end": "North Park"})
    assert response.status_code == 200
    data = response.json()
    assert data["cost"] == 7
    assert data["time"] == 30
    assert [seg["line"] for seg in data["path"]].count("green") == 3


def test_same_station(client):
    """Test start and end being the same station."""
    response = client.post("/calculate-route", json={"start": "Maximus", "end": "Maximus"})
    assert response.status_code == 200
    assert response.json() == {
        "path": ["Maximus"],
        "time": 0,
        "cost": 0,
        "message": "You are already at your destination!",
    }


@pytest.mark.parametrize("body", [
    {"start": "East End"},
    {"end": "East End"},
    {"start": "", "end": "East End"},
    {},
])
def test_missing_station(client, body):
    """Test requests missing start or end."""
    response = client.post("/calculate-route", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Start and end stations are required"}


def test_missing_body(client):
    """Test a request without a body."""
    response = client.post("/calculate-route")
    assert response.status_code == 400
    assert response.json() == {"error": "Start and end stations are required"}


def test_malformed_body(client):
    """Test a body with the wrong field types."""
    response = client.post("/calculate-route", json={"start": 1, "end": ["East End"]})
    assert response.status_code == 400
    assert "error" in response.json()


def test_unknown_station(client):
    """Test a station that is not on the network."""
    response = client.post("/calculate-route", json={"start": "Nowhere", "end": "East End"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid start or end station"}


def test_station_names_are_exact(client):
    """Test the HTTP interface does not guess at station names."""
    response = client.post("/calculate-route", json={"start": "east end", "end": "Maximus"})
    assert response.status_code == 400


def test_route_not_found(client, split_network):
    """Test stations with no connection between them."""
    response = client.post("/calculate-route", json={"start": "A", "end": "D"})
    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}

    response = client.post("/calculate-route", json={"start": "A", "end": "B"})
    assert response.status_code == 200


def test_broken_topology_stops_startup(monkeypatch):
    """Test the app refuses to start on a malformed line definition."""
    monkeypatch.setattr(network_module, "METRO_LINES", {"loop": ["A", "B", "A"]})
    monkeypatch.setattr(network_module, "_network", None)
    with pytest.raises(InvalidTopology):
        with TestClient(app):
            pass


def test_startup_builds_network(monkeypatch):
    """Test the default network is ready once the app has started."""
    monkeypatch.setattr(network_module, "_network", None)
    with TestClient(app) as client:
        assert network_module._network is not None
        assert client.get("/").status_code == 200
