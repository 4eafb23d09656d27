"""Reservation ORM model."""

from sqlalchemy import Column, Integer, String

from reservation_agent.database import Base, UTCDateTime


class Reservation(Base):
    """
    A booking of one table at one instant.

    reservation_time is stored exactly as supplied and compared by equality;
    there is no index on (restaurant_id, table_id, reservation_time), so slot
    lookups go through the restaurant_id index and filter.
    customer_id / table_id are not foreign keys.
    """

    __tablename__ = "reservations"

    reservation_id = Column(String(64), primary_key=True)
    customer_id = Column(String(64), nullable=False)
    restaurant_id = Column(String(64), nullable=False, index=True)
    table_id = Column(String(64), nullable=False)
    reservation_time = Column(String(64), nullable=False)
    party_size = Column(Integer, nullable=False)
    status = Column(String(16), nullable=False, default="confirmed")

    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)
