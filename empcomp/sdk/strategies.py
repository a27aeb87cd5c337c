"""Compensation strategies.

Each classification has its own strategy object. Capabilities are
composed from three small protocols instead of an inheritance chain:

    rewards                 -> RewardsCapable
    pay + rewards           -> RewardsCapable + PayCapable
    pay + rewards + stock   -> RewardsCapable + PayCapable + StockOptionsCapable

A strategy only defines the methods for what it supports, so callers ask
`supports_pay()` / `supports_stock_options()` before invoking. Contractors
have no pay concept at all; `pay_or_none()` returns None for them rather
than a zero that could be confused with a real zero paycheck.

Every operation treats a None employee as zero (lenient by intent: the
auth boundary is where a missing user gets reported).
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import FrozenSet, Optional, Protocol, runtime_checkable

from .employee import Classification, EmployeeRecord, sanitize_hours


# Full-time
FTE_HOURLY_RATE = 10.0
FTE_OVERTIME_MULTIPLIER = 1.5
FTE_REGULAR_HOURS = 40.0
FTE_REWARDS_RATE = 0.05
FTE_REWARDS_BONUS = 100.0

# Part-time
PTE_HOURLY_RATE = 5.0
PTE_REWARDS_RATE = 0.03
PTE_REWARDS_FLOOR = 50.0

# Contractor
CONTRACTOR_BASE_BONUS = 100.0
CONTRACTOR_PER_HOUR = 1.0
CONTRACTOR_PERFORMANCE_CAP = 200.0

# Executive
EXEC_PERIOD_SALARY = 4000.0
EXEC_REWARDS_RATE = 0.10
EXEC_BASE_GRANT = 1000.0
EXEC_GRANT_STEP_HOURS = 10.0
EXEC_GRANT_PER_STEP = 100.0


def round2(value: float) -> float:
    """Round to 2 decimals, halves away from zero."""
    if not math.isfinite(value):
        return value
    # Doubles reach ~1e308; quantizing to cents needs room for every digit.
    with localcontext() as ctx:
        ctx.prec = 400
        quantized = Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return float(quantized)


# =============================================================================
# Capabilities
# =============================================================================

class Capability(Enum):
    """Operations a strategy may support."""

    PAY = "pay"
    REWARDS = "rewards"
    STOCK_OPTIONS = "stock_options"

    def __str__(self):
        return self.value


@runtime_checkable
class RewardsCapable(Protocol):
    def calculate_rewards(self, employee: Optional[EmployeeRecord]) -> float: ...


@runtime_checkable
class PayCapable(Protocol):
    def calculate_pay(self, employee: Optional[EmployeeRecord]) -> float: ...


@runtime_checkable
class StockOptionsCapable(Protocol):
    def calculate_stock_options(self, employee: Optional[EmployeeRecord]) -> float: ...


def supports_pay(strategy: object) -> bool:
    return isinstance(strategy, PayCapable)


def supports_stock_options(strategy: object) -> bool:
    return isinstance(strategy, StockOptionsCapable)


def capabilities(strategy: object) -> FrozenSet[Capability]:
    """Return the set of capabilities a strategy implements."""
    found = set()
    if isinstance(strategy, RewardsCapable):
        found.add(Capability.REWARDS)
    if isinstance(strategy, PayCapable):
        found.add(Capability.PAY)
    if isinstance(strategy, StockOptionsCapable):
        found.add(Capability.STOCK_OPTIONS)
    return frozenset(found)


def pay_or_none(strategy: object, employee: Optional[EmployeeRecord]) -> Optional[float]:
    """Pay for strategies that have it, None for those that don't."""
    if not supports_pay(strategy):
        return None
    return strategy.calculate_pay(employee)


def stock_options_or_zero(strategy: object, employee: Optional[EmployeeRecord]) -> float:
    """Stock options for strategies that grant them, 0.0 otherwise."""
    if not supports_stock_options(strategy):
        return 0.0
    return strategy.calculate_stock_options(employee)


# =============================================================================
# Strategies
# =============================================================================

class FullTimeStrategy:
    """Hourly pay with time-and-a-half past 40 hours."""

    classification = Classification.FULL_TIME

    def calculate_pay(self, employee: Optional[EmployeeRecord]) -> float:
        if employee is None:
            return 0.0
        hours = sanitize_hours(employee.hours_worked)

        regular = min(FTE_REGULAR_HOURS, hours)
        overtime = max(0.0, hours - FTE_REGULAR_HOURS)

        pay = (regular * FTE_HOURLY_RATE) + (overtime * FTE_HOURLY_RATE * FTE_OVERTIME_MULTIPLIER)
        return round2(pay)

    def calculate_rewards(self, employee: Optional[EmployeeRecord]) -> float:
        if employee is None:
            return 0.0
        pay = self.calculate_pay(employee)
        return round2(pay * FTE_REWARDS_RATE + FTE_REWARDS_BONUS)


class PartTimeStrategy:
    """Flat hourly pay, no overtime premium, rewards floored at 50."""

    classification = Classification.PART_TIME

    def calculate_pay(self, employee: Optional[EmployeeRecord]) -> float:
        if employee is None:
            return 0.0
        hours = sanitize_hours(employee.hours_worked)
        return round2(hours * PTE_HOURLY_RATE)

    def calculate_rewards(self, employee: Optional[EmployeeRecord]) -> float:
        if employee is None:
            return 0.0
        pay = self.calculate_pay(employee)
        return round2(max(PTE_REWARDS_FLOOR, pay * PTE_REWARDS_RATE))


class ContractorStrategy:
    """Rewards only: base bonus plus one per hour, capped at 200."""

    classification = Classification.CONTRACTOR

    def calculate_rewards(self, employee: Optional[EmployeeRecord]) -> float:
        if employee is None:
            return 0.0
        hours = sanitize_hours(employee.hours_worked)
        performance = min(CONTRACTOR_PERFORMANCE_CAP, hours * CONTRACTOR_PER_HOUR)
        return round2(CONTRACTOR_BASE_BONUS + performance)


class ExecutiveStrategy:
    """Fixed period salary, 10% cash bonus, stock grant stepping every 10 hours."""

    classification = Classification.EXECUTIVE

    def calculate_pay(self, employee: Optional[EmployeeRecord]) -> float:
        if employee is None:
            return 0.0
        return round2(EXEC_PERIOD_SALARY)

    def calculate_rewards(self, employee: Optional[EmployeeRecord]) -> float:
        if employee is None:
            return 0.0
        return round2(self.calculate_pay(employee) * EXEC_REWARDS_RATE)

    def calculate_stock_options(self, employee: Optional[EmployeeRecord]) -> float:
        if employee is None:
            return 0.0
        hours = sanitize_hours(employee.hours_worked)
        steps = math.floor(hours / EXEC_GRANT_STEP_HOURS)
        return round2(EXEC_BASE_GRANT + steps * EXEC_GRANT_PER_STEP)


STRATEGIES = {
    Classification.FULL_TIME: FullTimeStrategy(),
    Classification.PART_TIME: PartTimeStrategy(),
    Classification.CONTRACTOR: ContractorStrategy(),
    Classification.EXECUTIVE: ExecutiveStrategy(),
}


def get_strategy(classification: Classification) -> RewardsCapable:
    """Get the shared strategy instance for a classification."""
    return STRATEGIES[classification]
