import logging
import re
from typing import Any, Dict, Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from reservas_api.models.checkin import Checkin
from reservas_api.models.flight import Flight
from reservas_api.models.layover import Layover
from reservas_api.services.base import EntityService
from reservas_api.services.temporal import DEFAULT_UTC_OFFSET_HOURS, normalize_schedule

logger = logging.getLogger(__name__)

FLIGHT_NUMBER_PREFIX = "FL-"

_FLIGHT_NUMBER_PATTERN = re.compile(r"^FL-(\d+)$")


class ScheduledEntityService(EntityService):
    """
    Entity whose payload carries a date plus time-of-day strings that are
    normalized before every create and update.
    """

    date_field: str = "fecha"
    time_fields: tuple = ()

    def __init__(self, db: Session, offset_hours: int = DEFAULT_UTC_OFFSET_HOURS):
        super().__init__(db)
        self.offset_hours = offset_hours

    def prepare(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return normalize_schedule(
            data, self.date_field, self.time_fields, self.offset_hours
        )


class FlightService(ScheduledEntityService):
    """Service for flight operations"""

    model = Flight
    key_field = "n_vuelo"
    order_by = "fecha"
    time_fields = ("hora_salida", "hora_llegada")

    def prepare(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = super().prepare(data)
        if data.get("n_vuelo") is None:
            data.pop("n_vuelo", None)
        return data

    def create_many(self, rows: Iterable[Dict[str, Any]]) -> Dict[str, int]:
        """
        Insert a batch of flights in one commit.

        Returns:
            {"count": <rows inserted>}
        """
        prepared = self._with_flight_numbers([self.prepare(row) for row in rows])
        self.db.add_all([Flight(**data) for data in prepared])
        self._commit()
        logger.info(f"Inserted {len(prepared)} flights")
        return {"count": len(prepared)}

    def create(self, data: Dict[str, Any]) -> Flight:
        (data,) = self._with_flight_numbers([self.prepare(data)])
        record = Flight(**data)
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        return record

    def _with_flight_numbers(self, prepared: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Number the rows that came without `n_vuelo`, in order"""
        next_number = self._next_flight_number()
        for data in prepared:
            if "n_vuelo" not in data:
                data["n_vuelo"] = f"{FLIGHT_NUMBER_PREFIX}{next_number}"
                next_number += 1
        return prepared

    def _next_flight_number(self) -> int:
        numbers = self.db.scalars(
            select(Flight.n_vuelo).where(Flight.n_vuelo.like(f"{FLIGHT_NUMBER_PREFIX}%"))
        ).all()
        suffixes = [
            int(match.group(1))
            for match in (_FLIGHT_NUMBER_PATTERN.match(n) for n in numbers)
            if match
        ]
        return max(suffixes) + 1 if suffixes else 0


class LayoverService(ScheduledEntityService):
    """Service for layover operations"""

    model = Layover
    key_field = "id_escala"
    time_fields = ("hora_llegada", "hora_salida")

    def find_by_flight(self, n_vuelo: str) -> List[Layover]:
        return self.find_by(n_vuelo=n_vuelo)


class CheckinService(ScheduledEntityService):
    """Service for check-in operations, keyed by ticket id"""

    model = Checkin
    key_field = "id_boleto"
    time_fields = ("hora",)

    def find_by_flight(self, n_vuelo: str) -> List[Checkin]:
        return self.find_by(n_vuelo=n_vuelo)
