# vehicle_inventory/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

class VehicleBase(BaseModel):
    make: str
    model: str
    year: int
    fuel_type: str
    transmission: str
    mileage: int = Field(..., ge=0)
    price: float = Field(..., ge=0)

class VehicleCreate(VehicleBase):
    # left unset the store assigns the next id
    id: Optional[int] = None

class Vehicle(VehicleBase):
    id: int
    model_config = ConfigDict(from_attributes=True, frozen=True)

class SearchCriteria(BaseModel):
    """Optional per-attribute constraints for the filter engine.

    A field left as ``None`` places no constraint on that attribute. Empty
    strings, as submitted by blank form inputs, are read as ``None``; numeric
    zero is kept and constrains.
    """
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    fuel_type: Optional[str] = None
    transmission: Optional[str] = None
    mileage: Optional[float] = None
    price: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_unset(cls, value):
        if isinstance(value, str) and value == "":
            return None
        return value
