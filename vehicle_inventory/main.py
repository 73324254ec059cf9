# vehicle_inventory/main.py
from fastapi import FastAPI
from .db import Base, engine
from . import models  # noqa: F401 ensure models are imported so tables are known
from .api.routes import router as api_router

# create FastAPI instance
app = FastAPI(title="Vehicle Inventory")
app.include_router(api_router, prefix="/api")


@app.on_event("startup")
def on_startup_create_tables():
    Base.metadata.create_all(bind=engine)
