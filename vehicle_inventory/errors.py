# vehicle_inventory/errors.py
"""Errors raised when talking to the vehicle record source."""
from typing import Optional


class RecordSourceError(Exception):
    """Base class for record source failures."""


class FetchError(RecordSourceError):
    """Request failed: transport error, timeout, non-2xx status or undecodable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidRecordError(RecordSourceError):
    """Response decoded but does not describe valid vehicle records."""
