"""Classification text to strategy resolution.

Free-text classifications are matched case-insensitively against a fixed
token table. Anything unrecognized resolves to the part-time strategy
with `fallback=True` so the caller can warn; it never resolves to
full-time or executive, which cost materially more.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .employee import Classification
from .strategies import RewardsCapable, get_strategy

logger = logging.getLogger(__name__)

FALLBACK_CLASSIFICATION = Classification.PART_TIME

CLASSIFICATION_TOKENS: Dict[str, Classification] = {
    "fte": Classification.FULL_TIME,
    "fulltime": Classification.FULL_TIME,
    "pte": Classification.PART_TIME,
    "parttime": Classification.PART_TIME,
    "contractor": Classification.CONTRACTOR,
    "clevel": Classification.EXECUTIVE,
    "executive": Classification.EXECUTIVE,
}


@dataclass(frozen=True)
class StrategySelection:
    """Outcome of resolving a classification string."""

    strategy: RewardsCapable
    classification: Classification
    fallback: bool
    raw: str


def normalize_classification(text: Optional[str]) -> Optional[Classification]:
    """Match classification text against the token table.

    Returns:
        The Classification, or None if the text matches nothing
    """
    if text is None:
        return None
    return CLASSIFICATION_TOKENS.get(text.strip().lower())


def resolve_strategy(text: Optional[str]) -> StrategySelection:
    """Resolve classification text to a strategy. Never raises.

    Args:
        text: Raw classification, e.g. "FTE", "pte", "CLevel"

    Returns:
        StrategySelection; `fallback` is True when the text was not
        recognized and the part-time strategy was substituted
    """
    raw = text or ""
    classification = normalize_classification(raw)

    if classification is None:
        logger.warning(
            f"Unknown employee type '{raw}', defaulting to {FALLBACK_CLASSIFICATION}"
        )
        return StrategySelection(
            strategy=get_strategy(FALLBACK_CLASSIFICATION),
            classification=FALLBACK_CLASSIFICATION,
            fallback=True,
            raw=raw,
        )

    logger.debug(f"resolved '{raw}' -> {classification}")
    return StrategySelection(
        strategy=get_strategy(classification),
        classification=classification,
        fallback=False,
        raw=raw,
    )


def tokens_for(classification: Classification) -> List[str]:
    """List the accepted tokens for a classification, in table order."""
    return [token for token, value in CLASSIFICATION_TOKENS.items() if value is classification]
