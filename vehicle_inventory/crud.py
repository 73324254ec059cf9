# vehicle_inventory/crud.py
"""CRUD operations for `Vehicle` entities.

Read helpers back the record source endpoints; the upsert is used when
seeding the inventory.
"""
from sqlalchemy import select
from .models import Vehicle
from sqlalchemy.orm import Session
from typing import Dict, Any, List, Optional

def upsert_vehicle(db: Session, data: Dict[str, Any]) -> Vehicle:
    vehicle_id = data.get("id")
    obj = db.get(Vehicle, vehicle_id) if vehicle_id is not None else None
    if obj is None:
        obj = Vehicle(**data)
        db.add(obj)
    else:
        for k, v in data.items():
            setattr(obj, k, v)
    db.commit()
    db.refresh(obj)
    return obj

def get_vehicle(db: Session, vehicle_id: int) -> Optional[Vehicle]:
    return db.get(Vehicle, vehicle_id)

def list_vehicles(db: Session) -> List[Vehicle]:
    return list(db.scalars(select(Vehicle).order_by(Vehicle.id)))
