"""
Domain value objects.

Nothing here outlives a single call: points and results are immutable and
carry no identity.
"""

from __future__ import annotations

from dataclasses import dataclass

from .distance import RADIAN_CONVERSION
from .enums import DetourOutcome


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeoPoint:
    """A (longitude, latitude) pair.  Units are up to the caller."""

    longitude: float
    latitude: float

    def to_radians(self) -> GeoPoint:
        """Treat this point as decimal degrees and return it in radians."""
        return GeoPoint(
            self.longitude * RADIAN_CONVERSION,
            self.latitude * RADIAN_CONVERSION,
        )


@dataclass(frozen=True)
class DetourResult:
    """
    Outcome of a two-driver detour comparison.

    Driver 1 travels A -> B, driver 2 travels C -> D.

    * ``route_1_km`` = A->C + C->D + D->B  (driver 1 carries driver 2)
    * ``route_2_km`` = C->A + A->B + B->D  (driver 2 carries driver 1)
    """

    outcome: DetourOutcome
    route_1_km: float
    route_2_km: float
    leg_ac_km: float = 0.0
    leg_cd_km: float = 0.0
    leg_db_km: float = 0.0
    leg_ab_km: float = 0.0

    @property
    def shorter_km(self) -> float:
        return min(self.route_1_km, self.route_2_km)
