"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from reservas_api.config import Settings
from reservas_api.database import Database
from reservas_api.main import create_app

FLIGHT = {
    "codigo_aerolinea": "UA",
    "id_avion": 1,
    "codigo_origen": "LAX",
    "codigo_destino": "JFK",
    "distancia": 3000.5,
    "fecha": "2023-06-20",
    "hora_salida": "10:30:00",
    "hora_llegada": "11:30:00",
}

PASSENGER = {
    "n_pasaporte": "ABC123",
    "nombres": "John",
    "apellidos": "Doe",
    "fecha_nacimiento": "1990-01-01",
    "genero": "M",
    "pais": "US",
}


def make_settings(**overrides) -> Settings:
    values = {
        "database_url": "sqlite://",
        "log_level": "WARNING",
        "environment": "test",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def database():
    """In-memory SQLite database with all tables created."""
    db = Database("sqlite://")
    db.create_tables()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def client(database):
    app = create_app(make_settings(), database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client):
    """Client over a database holding the reference rows a flight needs."""
    for path, body in [
        ("/api/paises", {"codigo_iso": "US", "nombre": "United States"}),
        ("/api/paises", {"codigo_iso": "JP", "nombre": "Japan"}),
        (
            "/api/aeropuertos",
            {"codigo_iata": "LAX", "nombre": "Los Angeles", "pais": "US", "ciudad": "Los Angeles"},
        ),
        (
            "/api/aeropuertos",
            {"codigo_iata": "JFK", "nombre": "John F. Kennedy", "pais": "US", "ciudad": "New York"},
        ),
        (
            "/api/aeropuertos",
            {"codigo_iata": "HND", "nombre": "Haneda", "pais": "JP", "ciudad": "Tokyo"},
        ),
        ("/api/aerolineas", {"codigo_iata": "UA", "nombre": "United Airlines"}),
        (
            "/api/aviones",
            {"nombre": "Boeing 737", "asientos_economica": 150, "asientos_negocios": 20},
        ),
        ("/api/pasajeros", PASSENGER),
    ]:
        response = client.post(path, json=body)
        assert response.status_code == 200, response.text
    return client


def create_flight(client, n_vuelo: str = "FL-1", **overrides) -> str:
    body = {**FLIGHT, "n_vuelo": n_vuelo, **overrides}
    response = client.post("/api/vuelos", json=body)
    assert response.status_code == 201, response.text
    return n_vuelo


def create_ticket(client, n_vuelo: str) -> dict:
    response = client.post(
        "/api/boletos",
        json={
            "pasaporte_pasajero": PASSENGER["n_pasaporte"],
            "n_vuelo": n_vuelo,
            "fecha_compra": "2023-06-01",
            "clase": "Económica",
            "precio": 100.5,
        },
    )
    assert response.status_code == 200, response.text
    return response.json()
