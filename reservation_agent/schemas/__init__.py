"""Pydantic schemas package."""

from reservation_agent.schemas.customer import CustomerCreate, CustomerRead, CustomerUpdate
from reservation_agent.schemas.restaurant import RestaurantCreate, RestaurantRead
from reservation_agent.schemas.table import TableCreate, TableRead
from reservation_agent.schemas.special_request import SpecialRequestCreate, SpecialRequestRead
from reservation_agent.schemas.reservation import (
    ReservationCreate,
    ReservationDetail,
    ReservationRead,
    ReservationUpdate,
)
from reservation_agent.schemas.agent import (
    AgentInstruction,
    AgentRequest,
    AvailabilityResult,
    MessageResult,
)

__all__ = [
    "CustomerCreate", "CustomerRead", "CustomerUpdate",
    "RestaurantCreate", "RestaurantRead",
    "TableCreate", "TableRead",
    "SpecialRequestCreate", "SpecialRequestRead",
    "ReservationCreate", "ReservationDetail", "ReservationRead", "ReservationUpdate",
    "AgentInstruction", "AgentRequest", "AvailabilityResult", "MessageResult",
]
