"""
Distance endpoint
=================

POST /api/v1/distance -- great-circle distance between two points

The body is in decimal degrees; conversion to radians happens here because
``haversine_distance`` only accepts radians.
"""

from fastapi import APIRouter, Request

from detour_planner.api.middleware import limiter
from detour_planner.api.schemas import DistanceRequest, DistanceResponse
from detour_planner.config import settings
from detour_planner.domain.distance import haversine_distance

router = APIRouter(prefix="/distance", tags=["distance"])


@router.post(
    "",
    response_model=DistanceResponse,
    summary="Great-circle distance between two points (km)",
)
@limiter.limit(settings.rate_limit)
async def get_distance(request: Request, body: DistanceRequest):
    origin = body.origin.to_geo_point().to_radians()
    destination = body.destination.to_geo_point().to_radians()
    km = haversine_distance(
        origin.longitude, origin.latitude,
        destination.longitude, destination.latitude,
    )
    return DistanceResponse(distance_km=km)
