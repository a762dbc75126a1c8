"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from detour_planner.domain.entities import GeoPoint
from detour_planner.domain.enums import DetourOutcome


# ── Requests ──────────────────────────────────────────────────────────


class PointIn(BaseModel):
    """A coordinate in decimal degrees."""

    longitude: float = Field(..., ge=-180, le=180)
    latitude: float = Field(..., ge=-90, le=90)

    def to_geo_point(self) -> GeoPoint:
        return GeoPoint(longitude=self.longitude, latitude=self.latitude)


class TripIn(BaseModel):
    origin: PointIn
    destination: PointIn


class DistanceRequest(BaseModel):
    origin: PointIn
    destination: PointIn


class DetourCompareRequest(BaseModel):
    driver_1: TripIn = Field(..., description="Driver 1 travels A -> B.")
    driver_2: TripIn = Field(..., description="Driver 2 travels C -> D.")


# ── Responses ─────────────────────────────────────────────────────────


class DistanceResponse(BaseModel):
    distance_km: float


class DetourCompareResponse(BaseModel):
    outcome: DetourOutcome
    route_1_km: float = Field(..., description="A -> C -> D -> B")
    route_2_km: float = Field(..., description="C -> A -> B -> D")
    shorter_km: float
    summary: str


class HealthResponse(BaseModel):
    status: str = "ok"

