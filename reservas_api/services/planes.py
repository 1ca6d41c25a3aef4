from reservas_api.models.plane import Plane
from reservas_api.services.base import EntityService


class PlaneService(EntityService):
    """Service for plane operations"""

    model = Plane
    key_field = "id_avion"
