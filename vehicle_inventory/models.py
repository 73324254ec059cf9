# vehicle_inventory/models.py
"""SQLAlchemy ORM models for persisted entities.

Defines the `Vehicle` inventory record and its lookup indexes.
"""
from sqlalchemy import Column, Integer, Text, Float, TIMESTAMP, func, Index
from .db import Base

class Vehicle(Base):
    __tablename__ = "vehicles"
    id = Column(Integer, primary_key=True, index=True)
    make = Column(Text, nullable=False)
    model = Column(Text, nullable=False)
    year = Column(Integer, nullable=False)
    fuel_type = Column(Text, nullable=False)
    transmission = Column(Text, nullable=False)
    mileage = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

Index("idx_vehicles_make", Vehicle.make)
Index("idx_vehicles_year", Vehicle.year)
