# vehicle_inventory/services.py
from . import crud, schemas
from sqlalchemy.orm import Session
from .utils import logger
from typing import Dict

def ingest_vehicle(db: Session, payload: Dict) -> int:
    # raises pydantic.ValidationError on malformed payloads
    vehicle = schemas.VehicleCreate.model_validate(payload)
    obj = crud.upsert_vehicle(db, vehicle.model_dump(exclude_none=True))
    logger.info("Ingested vehicle %s (%s %s %s)", obj.id, obj.year, obj.make, obj.model)
    return obj.id
