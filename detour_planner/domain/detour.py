"""
Two-Driver Detour Comparison
============================

Driver 1 starts at A and ends at B; driver 2 starts at C and ends at D.
One of them picks up and drops off the other:

* **Route 1** (driver 1 detours):  A -> C -> D -> B
* **Route 2** (driver 2 detours):  C -> A -> B -> D

Whichever total is smaller wins.  The symmetric legs A-C and D-B appear in
both routes, so only four distances are computed.

Units: points come in as **decimal degrees** and are converted here, unlike
``haversine_distance`` which expects radians.

Complexity: O(1) -- four haversine evaluations.
"""

from __future__ import annotations

import logging

from .distance import haversine_distance
from .entities import DetourResult, GeoPoint
from .enums import DetourOutcome

logger = logging.getLogger(__name__)


def _leg_km(start: GeoPoint, end: GeoPoint) -> float:
    return haversine_distance(
        start.longitude, start.latitude, end.longitude, end.latitude
    )


def compare_detours(
    a: GeoPoint, b: GeoPoint, c: GeoPoint, d: GeoPoint
) -> DetourResult:
    """
    Decide which driver should carry the other.

    Equal totals (including the all-points-coincide case) yield
    ``DetourOutcome.EQUAL``.
    """
    a, b, c, d = (p.to_radians() for p in (a, b, c, d))

    dist_ac = _leg_km(a, c)
    dist_cd = _leg_km(c, d)
    dist_db = _leg_km(d, b)
    dist_ab = _leg_km(a, b)

    route_1 = dist_ac + dist_cd + dist_db
    route_2 = dist_ac + dist_ab + dist_db

    if route_1 > route_2:
        outcome = DetourOutcome.SECOND_DRIVER_SHORTER
    elif route_1 < route_2:
        outcome = DetourOutcome.FIRST_DRIVER_SHORTER
    else:
        outcome = DetourOutcome.EQUAL

    logger.debug(
        "Detour comparison: route_1=%.4f km route_2=%.4f km -> %s",
        route_1,
        route_2,
        outcome.value,
    )
    return DetourResult(
        outcome=outcome,
        route_1_km=route_1,
        route_2_km=route_2,
        leg_ac_km=dist_ac,
        leg_cd_km=dist_cd,
        leg_db_km=dist_db,
        leg_ab_km=dist_ab,
    )
