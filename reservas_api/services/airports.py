from reservas_api.models.airport import Airport
from reservas_api.models.country import Country
from reservas_api.services.base import EntityService


class CountryService(EntityService):
    """Service for country operations"""

    model = Country
    key_field = "codigo_iso"


class AirportService(EntityService):
    """Service for airport operations"""

    model = Airport
    key_field = "codigo_iata"
