# vehicle_inventory/browser.py
"""Presentation-side state for the inventory page.

`InventoryBrowser` is the only stateful piece: it holds the form criteria,
the search-by-id input and the result set currently on display, and turns
the page actions (load, search by id, search by attributes, clear) into
record source fetches plus filter engine calls.
"""
import re
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from .client import VehicleSource
from .errors import RecordSourceError
from .filters import filter_vehicles
from .schemas import SearchCriteria, Vehicle
from .utils import logger

# optional sign and ASCII digits only
_ID_PATTERN = re.compile(r"\s*-?[0-9]+\s*")


@dataclass(frozen=True)
class BrowserView:
    vehicles: Tuple[Vehicle, ...]
    loading: bool
    criteria: SearchCriteria
    search_id: str

    @property
    def empty(self) -> bool:
        return not self.vehicles


class InventoryBrowser:
    def __init__(self, source: VehicleSource):
        self.source = source
        self.criteria = SearchCriteria()
        self.search_id = ""
        self.vehicles: Tuple[Vehicle, ...] = ()
        self.loading = False
        self._seq = 0
        self._lock = threading.Lock()

    def view(self) -> BrowserView:
        return BrowserView(self.vehicles, self.loading, self.criteria, self.search_id)

    def _begin(self, clear_results: bool) -> int:
        with self._lock:
            self._seq += 1
            self.loading = True
            if clear_results:
                self.vehicles = ()
            return self._seq

    def _finish(self, token: int, vehicles) -> bool:
        with self._lock:
            if token != self._seq:
                logger.debug("Discarding superseded result for search %d", token)
                return False
            self.vehicles = tuple(vehicles)
            self.loading = False
            return True

    def _run(self, token: int, fetch: Callable[[], list], what: str) -> BrowserView:
        try:
            vehicles = fetch()
        except RecordSourceError as e:
            logger.error("An error occurred while fetching %s: %s", what, e)
            vehicles = []
        self._finish(token, vehicles)
        return self.view()

    def load_all(self) -> BrowserView:
        token = self._begin(clear_results=False)
        return self._run(token, self.source.fetch_all, "vehicles")

    def search_by_id(self, raw_id: Union[str, int, None] = None) -> BrowserView:
        if raw_id is not None:
            self.search_id = str(raw_id)
        if not _ID_PATTERN.fullmatch(self.search_id):
            logger.error("Please enter a valid vehicle ID, got %r", self.search_id)
            return self.view()
        vehicle_id = int(self.search_id)

        def fetch():
            vehicle = self.source.fetch_by_id(vehicle_id)
            return [vehicle] if vehicle is not None else []

        token = self._begin(clear_results=True)
        return self._run(token, fetch, f"vehicle {vehicle_id}")

    def search_by_attributes(self, criteria: Optional[SearchCriteria] = None) -> BrowserView:
        if criteria is not None:
            self.criteria = criteria
        criteria = self.criteria

        def fetch():
            return filter_vehicles(self.source.fetch_all(), criteria)

        token = self._begin(clear_results=True)
        return self._run(token, fetch, "vehicles")

    def clear(self) -> BrowserView:
        self.criteria = SearchCriteria()
        self.search_id = ""
        return self.load_all()
