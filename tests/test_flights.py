"""Tests for the flight and layover endpoints."""

from datetime import datetime

from fastapi.testclient import TestClient

from conftest import FLIGHT, create_flight, make_settings
from reservas_api.main import create_app
from reservas_api.services.flights import FlightService


class TestFlightCreate:

    def test_create_returns_count_and_201(self, seeded_client):
        response = seeded_client.post("/api/vuelos", json={**FLIGHT, "n_vuelo": "FL-7"})

        assert response.status_code == 201
        assert response.json() == {"count": 1}

    def test_times_are_stored_shifted_on_epoch_day(self, seeded_client):
        create_flight(seeded_client, "FL-1")

        flight = seeded_client.get("/api/vuelos/FL-1").json()

        assert flight["fecha"] == "2023-06-20"
        assert flight["hora_salida"] == "1970-01-01T04:30:00"
        assert flight["hora_llegada"] == "1970-01-01T05:30:00"
        assert flight["distancia"] == 3000.5

    def test_early_time_rolls_to_previous_day(self, seeded_client):
        create_flight(seeded_client, "FL-1", hora_salida="02:00:00", hora_llegada="05:59:00")

        flight = seeded_client.get("/api/vuelos/FL-1").json()

        assert flight["hora_salida"] == "1969-12-31T20:00:00"
        assert flight["hora_llegada"] == "1969-12-31T23:59:00"
        assert flight["fecha"] == "2023-06-20"

    def test_batch_create_generates_flight_numbers(self, seeded_client):
        response = seeded_client.post(
            "/api/vuelos", json=[FLIGHT, {**FLIGHT, "fecha": "2023-06-21"}]
        )

        assert response.status_code == 201
        assert response.json() == {"count": 2}
        numbers = {f["n_vuelo"] for f in seeded_client.get("/api/vuelos").json()}
        assert numbers == {"FL-0", "FL-1"}

    def test_single_flight_without_number_gets_first_number(self, seeded_client):
        response = seeded_client.post("/api/vuelos", json=FLIGHT)

        assert response.json() == {"count": 1}
        assert seeded_client.get("/api/vuelos/FL-0").json()["codigo_origen"] == "LAX"

    def test_generated_number_follows_highest_existing(self, seeded_client):
        create_flight(seeded_client, "FL-41")

        seeded_client.post("/api/vuelos", json=FLIGHT)

        assert seeded_client.get("/api/vuelos/FL-42").json() is not None

    def test_malformed_time_maps_to_500(self, seeded_client):
        response = seeded_client.post("/api/vuelos", json={**FLIGHT, "hora_salida": "25:99"})

        assert response.status_code == 500
        assert response.json() == {"error": "Error al crear el vuelo"}
        assert seeded_client.get("/api/vuelos").json() == []

    def test_unknown_airline_maps_to_500(self, seeded_client):
        response = seeded_client.post("/api/vuelos", json={**FLIGHT, "codigo_aerolinea": "ZZ"})

        assert response.status_code == 500
        assert response.json() == {"error": "Error al crear el vuelo"}

    def test_duplicate_flight_number_maps_to_500(self, seeded_client):
        create_flight(seeded_client, "FL-1")

        response = seeded_client.post("/api/vuelos", json={**FLIGHT, "n_vuelo": "FL-1"})

        assert response.status_code == 500

    def test_configured_offset_is_applied(self, database):
        app = create_app(make_settings(schedule_utc_offset_hours=0), database=database)
        with TestClient(app) as client:
            client.post("/api/paises", json={"codigo_iso": "US", "nombre": "United States"})
            for code in ("LAX", "JFK"):
                client.post(
                    "/api/aeropuertos",
                    json={"codigo_iata": code, "nombre": code, "pais": "US", "ciudad": code},
                )
            client.post("/api/aerolineas", json={"codigo_iata": "UA", "nombre": "United"})
            client.post(
                "/api/aviones",
                json={"nombre": "A320", "asientos_economica": 150, "asientos_negocios": 12},
            )
            create_flight(client, "FL-1")

            flight = client.get("/api/vuelos/FL-1").json()

        assert flight["hora_salida"] == "1970-01-01T10:30:00"


class TestFlightRead:

    def test_list_is_ordered_by_date(self, seeded_client):
        create_flight(seeded_client, "FL-1", fecha="2023-06-22")
        create_flight(seeded_client, "FL-2", fecha="2023-06-20")
        create_flight(seeded_client, "FL-3", fecha="2023-06-21")

        flights = seeded_client.get("/api/vuelos").json()

        assert [f["fecha"] for f in flights] == ["2023-06-20", "2023-06-21", "2023-06-22"]
        assert [f["n_vuelo"] for f in flights] == ["FL-2", "FL-3", "FL-1"]

    def test_missing_flight_returns_null(self, seeded_client):
        response = seeded_client.get("/api/vuelos/FL-404")

        assert response.status_code == 200
        assert response.json() is None


class TestFlightUpdateDelete:

    def test_update_normalizes_times(self, seeded_client):
        create_flight(seeded_client, "FL-1")

        response = seeded_client.put(
            "/api/vuelos/FL-1",
            json={**FLIGHT, "fecha": "2023-07-01", "hora_salida": "12:00:00"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["n_vuelo"] == "FL-1"
        assert body["fecha"] == "2023-07-01"
        assert body["hora_salida"] == "1970-01-01T06:00:00"

    def test_update_missing_flight_maps_to_500(self, seeded_client):
        response = seeded_client.put("/api/vuelos/FL-404", json=FLIGHT)

        assert response.status_code == 500
        assert response.json() == {"error": "Error al actualizar el vuelo"}

    def test_delete_returns_record_then_get_is_null(self, seeded_client):
        create_flight(seeded_client, "FL-1")

        response = seeded_client.delete("/api/vuelos/FL-1")

        assert response.status_code == 200
        assert response.json()["n_vuelo"] == "FL-1"
        assert seeded_client.get("/api/vuelos/FL-1").json() is None

    def test_delete_missing_flight_maps_to_500(self, seeded_client):
        response = seeded_client.delete("/api/vuelos/FL-404")

        assert response.status_code == 500
        assert response.json() == {"error": "Error al eliminar el vuelo"}


class TestLayovers:

    LAYOVER = {
        "n_vuelo": "FL-1",
        "codigo_aeropuerto": "HND",
        "fecha": "2023-06-20",
        "hora_llegada": "10:30:00",
        "hora_salida": "11:30:00",
        "orden": 1,
    }

    def test_create_normalizes_times(self, seeded_client):
        create_flight(seeded_client, "FL-1")

        response = seeded_client.post("/api/escalas", json=self.LAYOVER)

        assert response.status_code == 200
        body = response.json()
        assert body["id_escala"] == 1
        assert body["hora_llegada"] == "1970-01-01T04:30:00"
        assert body["hora_salida"] == "1970-01-01T05:30:00"

    def test_lookup_by_flight_returns_array(self, seeded_client):
        create_flight(seeded_client, "FL-1")
        create_flight(seeded_client, "FL-2")
        seeded_client.post("/api/escalas", json=self.LAYOVER)
        seeded_client.post("/api/escalas", json={**self.LAYOVER, "n_vuelo": "FL-2"})

        layovers = seeded_client.get("/api/escalas/vuelo/FL-1").json()

        assert isinstance(layovers, list)
        assert [layover["n_vuelo"] for layover in layovers] == ["FL-1"]
        assert seeded_client.get("/api/escalas/vuelo/FL-9").json() == []

    def test_update_and_delete(self, seeded_client):
        create_flight(seeded_client, "FL-1")
        seeded_client.post("/api/escalas", json=self.LAYOVER)

        updated = seeded_client.put(
            "/api/escalas/1", json={**self.LAYOVER, "hora_llegada": "03:00:00", "orden": 2}
        ).json()

        assert updated["hora_llegada"] == "1969-12-31T21:00:00"
        assert updated["orden"] == 2
        assert seeded_client.delete("/api/escalas/1").status_code == 200
        assert seeded_client.get("/api/escalas/1").json() is None

    def test_malformed_date_maps_to_500(self, seeded_client):
        create_flight(seeded_client, "FL-1")

        response = seeded_client.post("/api/escalas", json={**self.LAYOVER, "fecha": "junio"})

        assert response.status_code == 500
        assert response.json() == {"error": "Error al crear la escala"}


def test_service_create_generates_flight_number(seeded_client, database):
    with database.session_scope() as db:
        flight = FlightService(db).create(dict(FLIGHT))

    assert flight.n_vuelo == "FL-0"
    assert flight.hora_salida == datetime(1970, 1, 1, 4, 30)
    assert seeded_client.get("/api/vuelos/FL-0").json()["codigo_destino"] == "JFK"
