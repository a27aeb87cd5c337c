"""Compensation calculation.

Ties the selector and the strategies together: one employee record in,
one CompensationResult out. Stateless, so batches are a plain map.
"""

import logging
from typing import Iterable, List, Optional

from .employee import EmployeeRecord
from .schemas import CompensationResult
from .selector import resolve_strategy
from .sink import Sink, format_calc_line
from .strategies import pay_or_none, stock_options_or_zero

logger = logging.getLogger(__name__)


def calculate(employee: EmployeeRecord, sink: Optional[Sink] = None) -> CompensationResult:
    """Compute pay, rewards and stock options for one employee.

    Args:
        employee: Record with classification and hours filled in
        sink: Optional sink; receives the [CALC] line when given

    Returns:
        CompensationResult (pay is None for strategies without pay)
    """
    selection = resolve_strategy(employee.classification)
    strategy = selection.strategy

    result = CompensationResult(
        display_name=employee.display_name,
        classification=employee.classification,
        resolved=selection.classification,
        fallback=selection.fallback,
        hours_worked=employee.hours_worked,
        pay=pay_or_none(strategy, employee),
        rewards=strategy.calculate_rewards(employee),
        stock_options=stock_options_or_zero(strategy, employee),
    )
    logger.debug(
        f"calculated {result.display_name}: pay={result.pay} "
        f"rewards={result.rewards} stock={result.stock_options}"
    )

    if sink is not None:
        sink.write(format_calc_line(result))

    return result


def calculate_batch(
    employees: Iterable[EmployeeRecord],
    sink: Optional[Sink] = None,
) -> List[CompensationResult]:
    """Compute results for many employees, in input order."""
    return [calculate(employee, sink=sink) for employee in employees]
