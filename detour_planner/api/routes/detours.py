"""
Detour endpoints
================

POST /api/v1/detours/compare -- which driver should pick up the other
"""

import logging

from fastapi import APIRouter, Request

from detour_planner.api.middleware import limiter
from detour_planner.api.schemas import DetourCompareRequest, DetourCompareResponse
from detour_planner.config import settings
from detour_planner.domain.detour import compare_detours
from detour_planner.domain.presentation import describe_result

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/detours", tags=["detours"])


@router.post(
    "/compare",
    response_model=DetourCompareResponse,
    summary="Compare the two candidate detour routes",
    description=(
        "Driver 1 travels A -> B and driver 2 travels C -> D (decimal "
        "degrees). Route 1 is A -> C -> D -> B, route 2 is C -> A -> B -> D."
    ),
)
@limiter.limit(settings.rate_limit)
async def compare(request: Request, body: DetourCompareRequest):
    result = compare_detours(
        body.driver_1.origin.to_geo_point(),
        body.driver_1.destination.to_geo_point(),
        body.driver_2.origin.to_geo_point(),
        body.driver_2.destination.to_geo_point(),
    )
    logger.info(
        "Detour compare: %s (route_1=%.4f km, route_2=%.4f km)",
        result.outcome.value,
        result.route_1_km,
        result.route_2_km,
    )
    return DetourCompareResponse(
        outcome=result.outcome,
        route_1_km=result.route_1_km,
        route_2_km=result.route_2_km,
        shorter_km=result.shorter_km,
        summary=describe_result(result),
    )
