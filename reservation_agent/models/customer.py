"""Customer ORM model."""

from sqlalchemy import Column, String, Text, JSON

from reservation_agent.database import Base, UTCDateTime


class Customer(Base):
    """
    A diner who holds reservations.
    No uniqueness is enforced on email or phone number.
    """

    __tablename__ = "customers"

    customer_id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone_number = Column(String(32), nullable=False)
    preferences = Column(JSON, nullable=False, default=dict)
    loyalty_status = Column(String(16), nullable=False, default="bronze")

    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)
