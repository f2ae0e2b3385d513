"""SQLAlchemy ORM models for DeepFocus."""

from sqlalchemy import Column, Float, String
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class StoredDuration(Base):
    """One configured duration per timer mode."""

    __tablename__ = "durations"

    mode = Column(String(20), primary_key=True)  # Mode.value
    seconds = Column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<StoredDuration mode={self.mode} seconds={self.seconds}>"
