import logging
from typing import Any, Callable, Dict, List, Tuple, Type

import pandas as pd
from sqlalchemy import text
from sqlalchemy.orm import Session

from reservas_api.database import Base
from reservas_api.models.airline import Airline
from reservas_api.models.airport import Airport
from reservas_api.models.country import Country
from reservas_api.models.plane import Plane

logger = logging.getLogger(__name__)


def _text(value) -> str:
    if pd.isna(value):
        raise ValueError("missing required value")
    return str(value).strip()


def _optional_float(value):
    return float(value) if pd.notna(value) else None


class DataLoader:
    """Loads reference data (countries, airports, airlines, planes) from CSV files"""

    def __init__(self, db: Session):
        self.db = db

    def load_countries_from_csv(self, file_path: str) -> Tuple[int, int, List[str]]:
        """CSV columns: codigo_iso, nombre"""
        return self._upsert_from_csv(
            file_path,
            Country,
            "codigo_iso",
            lambda row: {
                "codigo_iso": _text(row["codigo_iso"]).upper(),
                "nombre": _text(row["nombre"]),
            },
        )

    def load_airports_from_csv(self, file_path: str) -> Tuple[int, int, List[str]]:
        """CSV columns: codigo_iata, nombre, pais, ciudad, latitud, longitud"""
        return self._upsert_from_csv(
            file_path,
            Airport,
            "codigo_iata",
            lambda row: {
                "codigo_iata": _text(row["codigo_iata"]).upper(),
                "nombre": _text(row["nombre"]),
                "pais": _text(row["pais"]).upper(),
                "ciudad": _text(row["ciudad"]),
                "latitud": _optional_float(row.get("latitud")),
                "longitud": _optional_float(row.get("longitud")),
            },
        )

    def load_airlines_from_csv(self, file_path: str) -> Tuple[int, int, List[str]]:
        """CSV columns: codigo_iata, nombre"""
        return self._upsert_from_csv(
            file_path,
            Airline,
            "codigo_iata",
            lambda row: {
                "codigo_iata": _text(row["codigo_iata"]).upper(),
                "nombre": _text(row["nombre"]),
            },
        )

    def load_planes_from_csv(self, file_path: str) -> Tuple[int, int, List[str]]:
        """CSV columns: id_avion, nombre, asientos_economica, asientos_negocios"""
        result = self._upsert_from_csv(
            file_path,
            Plane,
            "id_avion",
            lambda row: {
                "id_avion": int(row["id_avion"]),
                "nombre": _text(row["nombre"]),
                "asientos_economica": int(row["asientos_economica"]),
                "asientos_negocios": int(row["asientos_negocios"]),
            },
        )
        if result[0]:
            self.sync_id_sequence(Plane, "id_avion")
        return result

    def sync_id_sequence(self, model: Type[Base], column: str) -> None:
        """
        Move a PostgreSQL serial sequence past the highest stored id, so rows
        inserted later without an explicit id do not collide with loaded ones.
        SQLite picks the next rowid from the table and needs nothing.
        """
        if self.db.get_bind().dialect.name != "postgresql":
            return
        table = model.__tablename__
        self.db.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', '{column}'), "
                f"(SELECT MAX({column}) FROM {table}))"
            )
        )
        self.db.commit()
        logger.info(f"{table}.{column} sequence moved past loaded ids")

    def _upsert_from_csv(
        self,
        file_path: str,
        model: Type[Base],
        key_field: str,
        parse_row: Callable[[pd.Series], Dict[str, Any]],
    ) -> Tuple[int, int, List[str]]:
        """
        Insert rows whose key is new and update the ones already stored.

        Returns: (created_count, updated_count, errors)
        """
        created_count = 0
        updated_count = 0
        errors = []
        seen_keys = set()

        try:
            # "NA" is a valid country code, so only explicit nulls count
            df = pd.read_csv(
                file_path, dtype=str, keep_default_na=False, na_values=["\\N", "NULL", ""]
            )
        except Exception as e:
            logger.error(f"Could not read {file_path}: {e}")
            return 0, 0, [f"File error: {str(e)}"]

        for index, row in df.iterrows():
            try:
                data = parse_row(row)
            except (KeyError, ValueError, TypeError) as e:
                # Header is line 1
                errors.append(f"Row {index + 2}: {str(e)}")
                continue

            key = data[key_field]
            if key in seen_keys:
                errors.append(f"Row {index + 2}: duplicate key {key}")
                continue
            seen_keys.add(key)

            existing = self.db.get(model, key)
            if existing:
                for field, value in data.items():
                    if field != key_field:
                        setattr(existing, field, value)
                updated_count += 1
            else:
                self.db.add(model(**data))
                created_count += 1

        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Could not store rows from {file_path}: {e}")
            return 0, 0, errors + [f"Database error: {str(e)}"]

        logger.info(
            f"{model.__tablename__}: {created_count} created, {updated_count} updated, "
            f"{len(errors)} errors"
        )
        return created_count, updated_count, errors
