"""Text sinks for audit lines.

A sink receives one human-readable line per notable event (logins,
calculations). The file sink appends under a lock so lines from
concurrent callers never interleave.
"""

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable

from .operations import format_hours
from .schemas import CompensationResult

logger = logging.getLogger(__name__)


@runtime_checkable
class Sink(Protocol):
    def write(self, message: str) -> None: ...


class FileSink:
    """Append timestamped lines to a log file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def write(self, message: str) -> None:
        entry = f"[{datetime.now():%Y-%m-%d %H:%M:%S}] {message}"
        logger.info(message)

        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, "a") as f:
                    f.write(entry + "\n")
            except OSError as e:
                # A broken log file must not abort the calculation.
                logger.error(f"Could not write to log file {self.path}: {e}")


class MemorySink:
    """Keep lines in memory."""

    def __init__(self):
        self.lines: List[str] = []
        self._lock = threading.Lock()

    def write(self, message: str) -> None:
        with self._lock:
            self.lines.append(message)


def _fmt_amount(amount: Optional[float]) -> str:
    if amount is None:
        return "n/a"
    return format_hours(amount)


def format_calc_line(result: CompensationResult) -> str:
    """Render a calculation as one sink line.

    Example:
        [CALC] Name=Ada, Type=FTE, Hours=38, Pay=380, Rewards=119, Stock=0
    """
    return (
        f"[CALC] Name={result.display_name}, Type={result.classification}, "
        f"Hours={format_hours(result.hours_worked)}, Pay={_fmt_amount(result.pay)}, "
        f"Rewards={_fmt_amount(result.rewards)}, Stock={_fmt_amount(result.stock_options)}"
    )
