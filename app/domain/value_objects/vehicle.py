"""Vehicle attribute enumerations."""

from enum import Enum


class Condition(str, Enum):
    """Listing condition."""

    NEW = "new"
    USED = "used"
    CERTIFIED = "certified"


class Transmission(str, Enum):
    """Transmission type."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"
