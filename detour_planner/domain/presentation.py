"""Human-readable rendering of detour results."""

from .entities import DetourResult
from .enums import DetourOutcome


def describe_result(result: DetourResult) -> str:
    if result.outcome is DetourOutcome.SECOND_DRIVER_SHORTER:
        return (
            "The detour distance of driver 2 picking up and dropping off "
            f"driver 1 is shorter with a distance of {result.route_2_km:.4f} km "
            f"compared to {result.route_1_km:.4f} km"
        )
    if result.outcome is DetourOutcome.FIRST_DRIVER_SHORTER:
        return (
            "The detour distance of driver 1 picking up and dropping off "
            f"driver 2 is shorter with a distance of {result.route_1_km:.4f} km "
            f"compared to {result.route_2_km:.4f} km"
        )
    return (
        "The two detour distances are the same with a value of "
        f"{result.route_1_km:.4f} km"
    )
