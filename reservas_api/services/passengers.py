from reservas_api.models.email import Email
from reservas_api.models.passenger import Passenger
from reservas_api.models.phone import Phone
from reservas_api.services.base import EntityService


class PassengerService(EntityService):
    """Service for passenger operations"""

    model = Passenger
    key_field = "n_pasaporte"


class EmailService(EntityService):
    """Service for passenger email addresses"""

    model = Email
    key_field = "id_correo"


class PhoneService(EntityService):
    """Service for passenger phone numbers"""

    model = Phone
    key_field = "id_telefono"
