from reservas_api.models.airline import Airline
from reservas_api.services.base import EntityService


class AirlineService(EntityService):
    """Service for airline operations"""

    model = Airline
    key_field = "codigo_iata"
