#Purpose: HTTP client for the ride-sharing backend.
#Sole responsibility: fetch the graph snapshot and route queries the map renders.
#Registration, offers, requests, matching and storage endpoints are not used here.

from typing import Any, Dict, Optional
import logging

import requests
from pydantic import ValidationError

from ..config import get_settings
from ..schemas.graph import GraphSnapshot, RouteResult

logger = logging.getLogger(__name__)


class RideApiError(Exception):
    """Transport or HTTP failure talking to the ride API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RideApiClient:
    """
    Ride API client

    - GET /api/health
    - GET /api/graph
    - GET /api/route?from=&to=
    """

    def __init__(self,
                 base_url: Optional[str] = None,
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self.session = session or requests.Session()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            return self.session.get(
                url,
                params=params,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RideApiError(f"Request to {url} failed: {e}") from e

    def _json(self, response: requests.Response) -> Any:
        if not response.ok:
            raise RideApiError(f"HTTP {response.status_code}: {response.text}", response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise RideApiError(f"Invalid JSON from {response.url}: {e}", response.status_code) from e

    def _parse(self, model, data: Any, kind: str, response: requests.Response):
        if not isinstance(data, dict):
            raise RideApiError(f"Invalid {kind} payload: expected an object", response.status_code)
        try:
            return model(**data)
        except ValidationError as e:
            logger.warning(f"Rejected {kind} payload from {response.url}: {e.error_count()} errors")
            raise RideApiError(f"Invalid {kind} payload: {e}", response.status_code) from e

    # ----------------
    # Public methods
    # ----------------

    def health(self) -> bool:
        data = self._json(self._get("/api/health"))
        return bool(data.get("ok", False))

    def fetch_graph(self) -> GraphSnapshot:
        response = self._get("/api/graph")
        graph = self._parse(GraphSnapshot, self._json(response), "graph", response)
        logger.info(f"Fetched graph: {len(graph.places)} places, {len(graph.roads)} roads")
        return graph

    def fetch_route(self, from_place: str, to_place: str) -> RouteResult:
        """Shortest route between two places. No route gives an empty path."""
        if not from_place or not to_place:
            raise ValueError("Both from and to place names are required")

        response = self._get("/api/route", params={"from": from_place, "to": to_place})
        if response.status_code == 404:
            logger.info(f"No route from {from_place} to {to_place}")
            return RouteResult(path=[], total_cost=0.0)

        route = self._parse(RouteResult, self._json(response), "route", response)
        if route.found:
            logger.info(f"Route {' -> '.join(route.path)} (cost: {route.total_cost:g})")
        else:
            logger.info(f"No route from {from_place} to {to_place}")
        return route
