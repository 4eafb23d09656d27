"""Dining table ORM model."""

from sqlalchemy import Column, Integer, String

from reservation_agent.database import Base, UTCDateTime


class DiningTable(Base):
    """A bookable table, looked up by its owning restaurant."""

    __tablename__ = "tables"

    table_id = Column(String(64), primary_key=True)
    restaurant_id = Column(String(64), nullable=False, index=True)
    table_number = Column(String(32), nullable=False)   # display label, e.g. 'A1', 'VIP2'
    seating_capacity = Column(Integer, nullable=False)
    location_type = Column(String(32), nullable=False)  # 'indoor' | 'outdoor'

    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)
