"""
Distance calculation using the Haversine formula.

Assumption
----------
Distances are great-circle (straight-line over a spherical Earth), not road
distances.  There is no routing engine behind this module.

Units
-----
``haversine_distance`` takes **radians**.  Callers holding decimal degrees
must convert first (see ``RADIAN_CONVERSION``), otherwise the result is
silently wrong.

Complexity: O(1) per call.
"""

import math

EARTH_RADIUS_KM = 6_371.0

# pi / 180, written the way the reference scenarios were produced
RADIAN_CONVERSION = math.atan2(0, -1) / 180


def haversine(theta: float) -> float:
    """Return hav(*theta*) = (1 - cos(theta)) / 2.  *theta* is in radians."""
    return (1.0 - math.cos(theta)) / 2.0


def haversine_distance(
    long1: float, lat1: float, long2: float, lat2: float
) -> float:
    """
    Return the great-circle distance in **km** between two points.

    All four arguments are in radians.  ``h`` is clamped to [0, 1] before
    ``asin(sqrt(h))``: rounding can push it just outside that interval near
    zero or antipodal separations.
    """
    h = haversine(lat2 - lat1) + math.cos(lat1) * math.cos(lat2) * haversine(
        long2 - long1
    )
    h = min(1.0, max(0.0, h))
    return 2.0 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))
