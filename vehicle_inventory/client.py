# vehicle_inventory/client.py
"""HTTP client for the vehicle record source.

Wraps the two read endpoints of the inventory API and validates what comes
back, so callers only ever see `schemas.Vehicle` instances or one of the
errors from `vehicle_inventory.errors`.
"""
import os
from typing import List, Optional

import httpx
from dotenv import load_dotenv
from pydantic import TypeAdapter, ValidationError

from .errors import FetchError, InvalidRecordError
from .schemas import Vehicle
from .utils import logger

load_dotenv()

VEHICLE_API_URL = os.getenv("VEHICLE_API_URL", "http://localhost:8000")
VEHICLE_API_TIMEOUT = float(os.getenv("VEHICLE_API_TIMEOUT", "10"))

_vehicle_list = TypeAdapter(List[Vehicle])


class VehicleSource:
    """Fetch-all and fetch-by-id access to ``/api/vehicles``."""

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.Client] = None,
                 timeout: Optional[float] = None):
        self.base_url = (base_url or VEHICLE_API_URL).rstrip("/")
        self.timeout = httpx.Timeout(timeout if timeout is not None else VEHICLE_API_TIMEOUT)
        self._client = client

    def _get(self, path: str) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            if self._client is not None:
                # injected clients keep their own timeout configuration
                return self._client.get(url)
            with httpx.Client(timeout=self.timeout) as client:
                return client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(f"GET {path} failed: {e}") from e

    @staticmethod
    def _json(response: httpx.Response):
        try:
            return response.json()
        except ValueError as e:
            raise FetchError(f"Malformed JSON from {response.request.url}: {e}",
                             status_code=response.status_code) from e

    @staticmethod
    def _raise_for_status(response: httpx.Response):
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(f"{response.status_code} {response.reason_phrase}",
                             status_code=response.status_code) from e

    def fetch_all(self) -> List[Vehicle]:
        response = self._get("/api/vehicles")
        self._raise_for_status(response)
        data = self._json(response)
        try:
            vehicles = _vehicle_list.validate_python(data)
        except ValidationError as e:
            raise InvalidRecordError(f"Invalid vehicle collection: {e}") from e
        logger.debug("Fetched %d vehicles", len(vehicles))
        return vehicles

    def fetch_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        """Return the vehicle with ``vehicle_id``, or None when the source answers 404."""
        response = self._get(f"/api/vehicles/{vehicle_id}")
        if response.status_code == 404:
            logger.info("Vehicle %s not found", vehicle_id)
            return None
        self._raise_for_status(response)
        data = self._json(response)
        try:
            return Vehicle.model_validate(data)
        except ValidationError as e:
            raise InvalidRecordError(f"Invalid vehicle record {vehicle_id}: {e}") from e
