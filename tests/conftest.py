# tests/conftest.py
import os

# must be set before vehicle_inventory.db creates its engine
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from vehicle_inventory import models  # noqa: F401
from vehicle_inventory.db import Base, engine, SessionLocal
from vehicle_inventory.main import app
from vehicle_inventory.schemas import Vehicle

SAMPLE = [
    {"id": 1, "make": "Toyota", "model": "Corolla", "year": 2020, "fuel_type": "Petrol",
     "transmission": "Automatic", "mileage": 15000, "price": 18000},
    {"id": 2, "make": "Ford", "model": "Mustang", "year": 2022, "fuel_type": "Petrol",
     "transmission": "Manual", "mileage": 5000, "price": 35000},
]


@pytest.fixture
def sample_vehicles():
    return [Vehicle(**row) for row in SAMPLE]


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def api_client(db):
    with TestClient(app) as client:
        yield client
