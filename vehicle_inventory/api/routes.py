# vehicle_inventory/api/routes.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from .. import crud, schemas
from ..db import get_db

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/vehicles", response_model=List[schemas.Vehicle])
def vehicles(db: Session = Depends(get_db)):
    return crud.list_vehicles(db)


@router.get("/vehicles/{vehicle_id}", response_model=schemas.Vehicle)
def get_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    obj = crud.get_vehicle(db, vehicle_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return obj
