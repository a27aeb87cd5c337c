"""Employee record and classification types.

The record is the only input to the compensation strategies and the
hours reporter. It is mutable: the auth boundary creates it at login and
the caller fills in classification and hours afterwards.
"""

import math
from dataclasses import dataclass
from enum import Enum


DEFAULT_DISPLAY_NAME = "Unknown"


class Classification(Enum):
    """Closed set of employment classifications."""

    FULL_TIME = "FullTime"
    PART_TIME = "PartTime"
    CONTRACTOR = "Contractor"
    EXECUTIVE = "Executive"

    def __str__(self):
        return self.value


@dataclass
class EmployeeRecord:
    """One employee for one calculation session.

    `classification` is kept as raw text; the selector normalizes it.
    `hours_worked` is kept raw too, so the hours reporter can flag bad
    values that the strategies silently absorb.
    """

    classification: str = ""
    hours_worked: float = 0.0
    display_name: str = DEFAULT_DISPLAY_NAME


def sanitize_hours(hours: float) -> float:
    """Replace negative, NaN and infinite hours with zero.

    Idempotent: sanitize_hours(sanitize_hours(h)) == sanitize_hours(h).
    """
    if not math.isfinite(hours) or hours < 0:
        return 0.0
    return hours
