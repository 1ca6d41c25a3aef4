"""Tests for the CSV reference data loader."""

from unittest.mock import MagicMock

from reservas_api.models import Airline, Airport, Country, Plane
from reservas_api.services.data_loader import DataLoader


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_load_countries_creates_then_updates(database, tmp_path):
    path = _write(tmp_path, "paises.csv", "codigo_iso,nombre\nus,United States\nNA,Namibia\n")

    with database.session_scope() as db:
        created, updated, errors = DataLoader(db).load_countries_from_csv(path)
    assert (created, updated, errors) == (2, 0, [])

    path = _write(tmp_path, "paises.csv", "codigo_iso,nombre\nUS,Estados Unidos\n")
    with database.session_scope() as db:
        created, updated, errors = DataLoader(db).load_countries_from_csv(path)
        assert (created, updated, errors) == (0, 1, [])
        assert db.get(Country, "US").nombre == "Estados Unidos"
        assert db.get(Country, "NA").nombre == "Namibia"


def test_load_airports_with_missing_coordinates(database, tmp_path):
    countries = _write(tmp_path, "paises.csv", "codigo_iso,nombre\nMX,México\n")
    airports = _write(
        tmp_path,
        "aeropuertos.csv",
        "codigo_iata,nombre,pais,ciudad,latitud,longitud\n"
        "MEX,Benito Juárez,MX,Ciudad de México,19.4361,-99.0719\n"
        "MTY,Mariano Escobedo,MX,Monterrey,\\N,\\N\n",
    )

    with database.session_scope() as db:
        loader = DataLoader(db)
        loader.load_countries_from_csv(countries)
        created, updated, errors = loader.load_airports_from_csv(airports)

        assert (created, updated, errors) == (2, 0, [])
        assert db.get(Airport, "MEX").latitud == 19.4361
        assert db.get(Airport, "MTY").latitud is None


def test_bad_rows_are_reported_and_skipped(database, tmp_path):
    path = _write(
        tmp_path,
        "aviones.csv",
        "id_avion,nombre,asientos_economica,asientos_negocios\n"
        "1,A320,150,12\n"
        "2,B737,muchos,20\n"
        "1,A320neo,160,12\n",
    )

    with database.session_scope() as db:
        created, updated, errors = DataLoader(db).load_planes_from_csv(path)

        assert created == 1
        assert updated == 0
        assert len(errors) == 2
        assert errors[0].startswith("Row 3:")
        assert errors[1] == "Row 4: duplicate key 1"
        assert db.get(Plane, 1).nombre == "A320"


def test_missing_file_is_reported(database, tmp_path):
    with database.session_scope() as db:
        created, updated, errors = DataLoader(db).load_airlines_from_csv(
            str(tmp_path / "aerolineas.csv")
        )

    assert (created, updated) == (0, 0)
    assert errors[0].startswith("File error:")


def test_foreign_key_violation_rolls_back_file(database, tmp_path):
    path = _write(
        tmp_path,
        "aeropuertos.csv",
        "codigo_iata,nombre,pais,ciudad,latitud,longitud\nLAX,Los Angeles,US,Los Angeles,,\n",
    )

    with database.session_scope() as db:
        created, updated, errors = DataLoader(db).load_airports_from_csv(path)

        assert (created, updated) == (0, 0)
        assert errors[-1].startswith("Database error:")
        assert db.get(Airport, "LAX") is None


def test_empty_required_cell_is_reported_and_skipped(database, tmp_path):
    path = _write(tmp_path, "aerolineas.csv", "codigo_iata,nombre\nXX,\nUA,United Airlines\n")

    with database.session_scope() as db:
        created, updated, errors = DataLoader(db).load_airlines_from_csv(path)

        assert (created, updated) == (1, 0)
        assert errors == ["Row 2: missing required value"]
        assert db.get(Airline, "XX") is None
        assert db.get(Airline, "UA").nombre == "United Airlines"


def test_planes_created_after_load_get_the_next_id(database, client, tmp_path):
    path = _write(
        tmp_path,
        "aviones.csv",
        "id_avion,nombre,asientos_economica,asientos_negocios\n"
        "1,A320,150,12\n"
        "2,B737,160,16\n",
    )
    with database.session_scope() as db:
        DataLoader(db).load_planes_from_csv(path)

    response = client.post(
        "/api/aviones",
        json={"nombre": "E190", "asientos_economica": 90, "asientos_negocios": 8},
    )

    assert response.status_code == 200
    assert response.json()["id_avion"] == 3


def test_postgres_plane_sequence_is_moved_past_loaded_ids():
    db = MagicMock()
    db.get_bind.return_value.dialect.name = "postgresql"

    DataLoader(db).sync_id_sequence(Plane, "id_avion")

    statement = str(db.execute.call_args.args[0])
    assert "setval(pg_get_serial_sequence('aviones', 'id_avion')" in statement
    assert "SELECT MAX(id_avion) FROM aviones" in statement
    db.commit.assert_called_once()


def test_sqlite_needs_no_sequence_update():
    db = MagicMock()
    db.get_bind.return_value.dialect.name = "sqlite"

    DataLoader(db).sync_id_sequence(Plane, "id_avion")

    db.execute.assert_not_called()
