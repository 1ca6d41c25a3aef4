from .country import Country
from .airport import Airport
from .airline import Airline
from .plane import Plane
from .passenger import Passenger
from .flight import Flight
from .ticket import Ticket
from .checkin import Checkin
from .email import Email
from .phone import Phone
from .layover import Layover
from .delayed_passenger import DelayedPassenger
from .audit import AuditLog

# Ensure all models are available
__all__ = [
    "Country",
    "Airport",
    "Airline",
    "Plane",
    "Passenger",
    "Flight",
    "Ticket",
    "Checkin",
    "Email",
    "Phone",
    "Layover",
    "DelayedPassenger",
    "AuditLog",
]
