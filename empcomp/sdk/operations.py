"""Hours status reporting.

Unlike the compensation strategies, the reporter does not sanitize: a
negative, NaN or infinite hours value is reported as invalid so bad data
gets noticed instead of being absorbed into a zero.
"""

import math
from enum import Enum
from typing import Optional

from .employee import EmployeeRecord


UNDER_TARGET_BELOW = 20.0
OVERTIME_ABOVE = 40.0


class HoursStatus(Enum):
    """Status bands for hours worked in a period."""

    UNDER_TARGET = "Under target"
    ON_TRACK = "On track"
    OVERTIME = "Overtime"

    def __str__(self):
        return self.value


def is_valid_hours(hours: float) -> bool:
    return math.isfinite(hours) and hours >= 0


def hours_status(hours: float) -> Optional[HoursStatus]:
    """Classify hours into a status band.

    Returns:
        HoursStatus, or None when hours are NaN, infinite or negative
    """
    if not is_valid_hours(hours):
        return None
    if hours < UNDER_TARGET_BELOW:
        return HoursStatus.UNDER_TARGET
    if hours <= OVERTIME_ABOVE:
        return HoursStatus.ON_TRACK
    return HoursStatus.OVERTIME


def format_hours(hours: float) -> str:
    """Format hours with at most two decimals, trailing zeros dropped."""
    if not math.isfinite(hours):
        return str(hours)
    text = f"{hours:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _format_invalid_hours(hours: float) -> str:
    # Small negatives would round to "0"; show them exactly.
    text = format_hours(hours)
    if math.isfinite(hours) and text == "0":
        return repr(hours)
    return text


def report_hours(employee: Optional[EmployeeRecord]) -> str:
    """Render a one-line hours status for an employee.

    Examples:
        "[FTE] 38h this period - On track"
        "Invalid hours value: -1."
    """
    if employee is None:
        return "No employee provided."

    hours = employee.hours_worked
    status = hours_status(hours)
    if status is None:
        return f"Invalid hours value: {_format_invalid_hours(hours)}."

    employee_type = employee.classification.strip() or "Unknown"
    return f"[{employee_type}] {format_hours(hours)}h this period - {status}"
