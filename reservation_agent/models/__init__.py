"""SQLAlchemy ORM models package."""

from reservation_agent.database import Base
from reservation_agent.models.customer import Customer
from reservation_agent.models.restaurant import Restaurant
from reservation_agent.models.table import DiningTable
from reservation_agent.models.reservation import Reservation
from reservation_agent.models.special_request import SpecialRequest

__all__ = ["Base", "Customer", "Restaurant", "DiningTable", "Reservation", "SpecialRequest"]
