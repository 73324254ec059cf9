# vehicle_inventory/filters.py
"""In-memory filtering of vehicle collections.

Every supplied criterion must hold for a vehicle to be kept (AND semantics);
text criteria are case-insensitive substrings, ``year`` is exact and
``mileage``/``price`` are inclusive ceilings. Output keeps input order.
"""
from typing import Iterable, List, Optional
from .schemas import SearchCriteria, Vehicle

TEXT_FIELDS = ("make", "model", "fuel_type", "transmission")


def _contains(value: str, term: str) -> bool:
    return term.casefold() in value.casefold()


def matches(vehicle: Vehicle, criteria: SearchCriteria) -> bool:
    for field in TEXT_FIELDS:
        term = getattr(criteria, field)
        if term is not None and not _contains(getattr(vehicle, field), term):
            return False
    if criteria.year is not None and vehicle.year != criteria.year:
        return False
    if criteria.mileage is not None and vehicle.mileage > criteria.mileage:
        return False
    if criteria.price is not None and vehicle.price > criteria.price:
        return False
    return True


def filter_vehicles(vehicles: Iterable[Vehicle], criteria: SearchCriteria) -> List[Vehicle]:
    return [v for v in vehicles if matches(v, criteria)]


def find_vehicle(vehicles: Iterable[Vehicle], vehicle_id: int) -> Optional[Vehicle]:
    return next((v for v in vehicles if v.id == vehicle_id), None)
