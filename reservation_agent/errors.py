"""
Error taxonomy shared by services and routers.

Every class carries the HTTP status and short ``error`` label used by the
exception handlers in ``main.py`` to build the ``{"error", "message"}`` body.
"""

from __future__ import annotations


class ReservationAgentError(Exception):
    """Base class for all errors surfaced at the request boundary."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FieldValidationError(ReservationAgentError):
    """A required field is missing or invalid."""

    status_code = 400
    error = "Validation error"

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"Missing required field: {field}")
        self.field = field


class NotFoundError(ReservationAgentError):
    """Lookup by identifier returned nothing."""

    status_code = 404
    error = "Not found"

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.error = f"{entity} not found"
        self.entity = entity
        self.entity_id = entity_id


class SlotConflictError(ReservationAgentError):
    """A confirmed reservation already holds the (restaurant, table, time) slot."""

    status_code = 409
    error = "Table is not available at this time"

    def __init__(self, restaurant_id: str, table_id: str, reservation_time: str) -> None:
        super().__init__(
            f"Table {table_id} at restaurant {restaurant_id} is already "
            f"reserved for {reservation_time}"
        )
        self.restaurant_id = restaurant_id
        self.table_id = table_id
        self.reservation_time = reservation_time


class UpstreamError(ReservationAgentError):
    """The record store or the hosted model failed."""

    status_code = 500
    error = "Internal server error"
