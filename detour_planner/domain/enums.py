"""Domain enumerations."""

import enum


class DetourOutcome(str, enum.Enum):
    # Driver 2 detouring to carry driver 1 is shorter
    SECOND_DRIVER_SHORTER = "SECOND_DRIVER_SHORTER"
    # Driver 1 detouring to carry driver 2 is shorter
    FIRST_DRIVER_SHORTER = "FIRST_DRIVER_SHORTER"
    EQUAL = "EQUAL"
