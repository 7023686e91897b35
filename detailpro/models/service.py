"""
Service catalog model for database.
"""
from sqlalchemy import Column, Integer, String, Float, Boolean
from detailpro.database import Base


class Service(Base):
    """Detailing service offered to customers."""

    __tablename__ = "services"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    price = Column(Float, nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    active = Column(Boolean, default=True, nullable=False)
    color = Column(String, nullable=True)  # calendar colour
