"""Restaurant ORM model."""

from sqlalchemy import Column, String, Text, JSON, Double

from reservation_agent.database import Base, UTCDateTime


class Restaurant(Base):
    """
    A restaurant whose tables can be booked.
    opening_hours is keyed by lowercase weekday: {"monday": {"open": "11:00", "close": "22:00"}}.
    """

    __tablename__ = "restaurants"

    restaurant_id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    cuisine_type = Column(Text, nullable=False)
    rating = Column(Double, nullable=False, default=0)

    opening_hours = Column(JSON, nullable=False, default=dict)
    contact_info = Column(JSON, nullable=False, default=dict)

    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)
