from sqlalchemy import BigInteger, Boolean, Column, DateTime, Integer, String, Text

from app.db.base import Base


class Recommendation(Base):
    """A request to a professor for a letter of recommendation."""

    __tablename__ = "recommendation"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    requester_email = Column(String, nullable=True)
    professor_email = Column(String, nullable=True)
    explanation = Column(Text, nullable=True)
    date_requested = Column(DateTime, nullable=True)
    date_needed = Column(DateTime, nullable=True)
    done = Column(Boolean, nullable=True)
