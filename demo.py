"""
Demo script -- replays the Bay Area reference scenarios.

    python demo.py

1. Computes four known great-circle distances (Oakland, San Francisco,
   Sacramento, Alameda -> a random point) and checks each against its
   expected value within 1 %.
2. Compares detours for driver 1 (Oakland -> B) and driver 2
   (San Francisco -> D) and logs the verdict.

Exits non-zero if any distance is out of tolerance.
"""

import logging
import sys

from detour_planner.config import settings
from detour_planner.domain.detour import compare_detours
from detour_planner.domain.distance import haversine_distance
from detour_planner.domain.entities import GeoPoint
from detour_planner.domain.presentation import describe_result

logger = logging.getLogger("demo")

ERROR_MARGIN = 0.01

# (name, start, end, expected km) -- points as (longitude, latitude) degrees
SCENARIOS = [
    (
        "Oakland",
        GeoPoint(-122.270833, 37.804444),
        GeoPoint(-124.56144015, 38.42953815),
        212.1536,
    ),
    (
        "San Francisco",
        GeoPoint(-122.416667, 37.783333),
        GeoPoint(-126.48310112, 37.32750937),
        362.0991,
    ),
    (
        "Sacramento",
        GeoPoint(-121.468889, 38.555556),
        GeoPoint(-116.64660595, 37.69306415),
        432.6543,
    ),
    (
        "Alameda",
        GeoPoint(-122.274444, 37.756111),
        GeoPoint(-123.7362221, 36.71769119),
        173.4764,
    ),
]


def check_distances() -> int:
    """Return the number of scenarios outside the error margin."""
    failures = 0
    for name, start, end, expected in SCENARIOS:
        s, e = start.to_radians(), end.to_radians()
        actual = haversine_distance(s.longitude, s.latitude, e.longitude, e.latitude)
        ok = expected * (1 - ERROR_MARGIN) <= actual <= expected * (1 + ERROR_MARGIN)
        logger.info(
            "%s: expected %.4f km, actual %.4f km%s",
            name, expected, actual, "" if ok else "  <-- OUT OF TOLERANCE",
        )
        if not ok:
            failures += 1
    return failures


def run_comparison() -> str:
    _, a, b, _ = SCENARIOS[0]
    _, c, d, _ = SCENARIOS[1]
    summary = describe_result(compare_detours(a, b, c, d))
    logger.info(summary)
    return summary


def main() -> int:
    failures = check_distances()
    run_comparison()
    return 1 if failures else 0


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level, format="%(message)s")
    sys.exit(main())
