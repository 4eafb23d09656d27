"""Special request ORM model — free-text notes attached to a reservation."""

from sqlalchemy import Column, String, Text

from reservation_agent.database import Base, UTCDateTime


class SpecialRequest(Base):
    __tablename__ = "special_requests"

    request_id = Column(String(64), primary_key=True)
    reservation_id = Column(String(64), nullable=False, index=True)
    note = Column(Text, nullable=False)
    priority = Column(String(16), nullable=False, default="normal")

    created_at = Column(UTCDateTime, nullable=False)
