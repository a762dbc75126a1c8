"""Unit tests for the two-driver detour comparison."""

import logging

import pytest

from detour_planner.domain.detour import compare_detours
from detour_planner.domain.distance import haversine_distance
from detour_planner.domain.entities import DetourResult, GeoPoint
from detour_planner.domain.enums import DetourOutcome
from detour_planner.domain.presentation import describe_result

# Driver 1: Oakland -> B, driver 2: San Francisco -> D  (lng, lat degrees)
OAKLAND = GeoPoint(-122.270833, 37.804444)
POINT_B = GeoPoint(-124.56144015, 38.42953815)
SAN_FRANCISCO = GeoPoint(-122.416667, 37.783333)
POINT_D = GeoPoint(-126.48310112, 37.32750937)


def _leg(p: GeoPoint, q: GeoPoint) -> float:
    p, q = p.to_radians(), q.to_radians()
    return haversine_distance(p.longitude, p.latitude, q.longitude, q.latitude)


class TestGeoPoint:
    def test_to_radians(self):
        r = GeoPoint(180.0, -90.0).to_radians()
        assert r.longitude == pytest.approx(3.141592653589793)
        assert r.latitude == pytest.approx(-1.5707963267948966)

    def test_is_immutable(self):
        p = GeoPoint(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.latitude = 3.0  # type: ignore[misc]


class TestCompareDetours:
    def test_reference_scenario(self):
        """C->D (~362 km) is longer than A->B (~212 km), so driver 2 detours."""
        result = compare_detours(OAKLAND, POINT_B, SAN_FRANCISCO, POINT_D)
        assert result.outcome is DetourOutcome.SECOND_DRIVER_SHORTER
        assert result.route_2_km < result.route_1_km
        assert result.shorter_km == result.route_2_km

    def test_swapping_drivers_swaps_outcome(self):
        forward = compare_detours(OAKLAND, POINT_B, SAN_FRANCISCO, POINT_D)
        swapped = compare_detours(SAN_FRANCISCO, POINT_D, OAKLAND, POINT_B)
        assert forward.outcome is DetourOutcome.SECOND_DRIVER_SHORTER
        assert swapped.outcome is DetourOutcome.FIRST_DRIVER_SHORTER
        assert swapped.route_1_km == pytest.approx(forward.route_2_km)
        assert swapped.route_2_km == pytest.approx(forward.route_1_km)

    def test_all_points_equal(self):
        p = GeoPoint(-122.27, 37.80)
        result = compare_detours(p, p, p, p)
        assert result.outcome is DetourOutcome.EQUAL
        assert result.route_1_km == 0.0
        assert result.route_2_km == 0.0

    def test_round_trips_in_place_are_equal(self):
        """A == B and C == D: both routes are A -> C -> A."""
        a = GeoPoint(-122.27, 37.80)
        c = GeoPoint(-122.41, 37.78)
        result = compare_detours(a, a, c, c)
        assert result.outcome is DetourOutcome.EQUAL
        assert result.route_1_km > 0.0

    def test_route_totals_are_sum_of_legs(self):
        result = compare_detours(OAKLAND, POINT_B, SAN_FRANCISCO, POINT_D)
        ac = _leg(OAKLAND, SAN_FRANCISCO)
        cd = _leg(SAN_FRANCISCO, POINT_D)
        db = _leg(POINT_D, POINT_B)
        ab = _leg(OAKLAND, POINT_B)
        assert result.leg_ac_km == pytest.approx(ac)
        assert result.leg_cd_km == pytest.approx(cd)
        assert result.leg_db_km == pytest.approx(db)
        assert result.leg_ab_km == pytest.approx(ab)
        assert result.route_1_km == pytest.approx(ac + cd + db)
        assert result.route_2_km == pytest.approx(ac + ab + db)

    def test_legs_use_degree_inputs(self):
        """A->B leg must match the Oakland known value, not a double conversion."""
        result = compare_detours(OAKLAND, POINT_B, SAN_FRANCISCO, POINT_D)
        assert result.leg_ab_km == pytest.approx(212.1536, rel=0.01)
        assert result.leg_cd_km == pytest.approx(362.0991, rel=0.01)

    def test_logs_decision_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="detour_planner.domain.detour"):
            compare_detours(OAKLAND, POINT_B, SAN_FRANCISCO, POINT_D)
        assert "SECOND_DRIVER_SHORTER" in caplog.text


class TestDescribeResult:
    def test_second_driver_shorter(self):
        text = describe_result(
            DetourResult(DetourOutcome.SECOND_DRIVER_SHORTER, 20.0, 10.0)
        )
        assert text.startswith("The detour distance of driver 2 picking up")
        assert "distance of 10.0000 km compared to 20.0000 km" in text

    def test_first_driver_shorter(self):
        text = describe_result(
            DetourResult(DetourOutcome.FIRST_DRIVER_SHORTER, 10.0, 20.0)
        )
        assert text.startswith("The detour distance of driver 1 picking up")
        assert "distance of 10.0000 km compared to 20.0000 km" in text

    def test_equal(self):
        text = describe_result(DetourResult(DetourOutcome.EQUAL, 5.5, 5.5))
        assert text == "The two detour distances are the same with a value of 5.5000 km"
