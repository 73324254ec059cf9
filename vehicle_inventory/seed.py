# vehicle_inventory/seed.py
"""Load a JSON array of vehicles into the inventory database.

Usage: python -m vehicle_inventory.seed [path]   (defaults to $SEED_FILE)
"""
import os
import sys
import json
from dotenv import load_dotenv
from pydantic import ValidationError
from .db import Base, engine, SessionLocal
from . import models  # noqa: F401 ensure models are imported so tables are known
from .services import ingest_vehicle
from .utils import logger

load_dotenv()

SEED_FILE = os.getenv("SEED_FILE", "vehicles.json")


def seed_vehicles(items, db=None):
    """Ingest each vehicle payload; returns (ingested, skipped) counts."""
    own_session = db is None
    if own_session:
        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
    ingested = skipped = 0
    try:
        for item in items:
            try:
                ingest_vehicle(db, item)
                ingested += 1
            except ValidationError as e:
                logger.warning("Skipping invalid vehicle %r: %s", item, e)
                skipped += 1
    finally:
        if own_session:
            db.close()
    return ingested, skipped


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else SEED_FILE
    with open(path, "r", encoding="utf-8") as fh:
        items = json.load(fh)
    if not isinstance(items, list):
        raise SystemExit(f"{path}: expected a JSON array of vehicles")
    ingested, skipped = seed_vehicles(items)
    logger.info("Seeded %d vehicles from %s (%d skipped)", ingested, path, skipped)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
