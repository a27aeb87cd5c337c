"""Pydantic schemas for emp-comp.

Profile schemas use extra='forbid' so typos in profile.yaml cause clear
errors rather than being silently ignored.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .employee import Classification, DEFAULT_DISPLAY_NAME


# =============================================================================
# Profile (profile.yaml)
# =============================================================================


class RosterEntry(BaseModel):
    """Defaults applied to the employee record when this user logs in."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default=DEFAULT_DISPLAY_NAME, description="Display name")
    type: str = Field(default="FullTime", description="Classification text, e.g. FTE, PTE, CLevel")
    hours: float = Field(default=38.0, description="Hours worked this period")


class ProfileSchema(BaseModel):
    """Top-level profile.yaml contents."""

    model_config = ConfigDict(extra="forbid")

    employees: Dict[str, RosterEntry] = Field(
        default_factory=dict,
        description="Roster keyed by login identifier",
    )


# =============================================================================
# Results
# =============================================================================


class CompensationResult(BaseModel):
    """Figures for one employee in one period.

    `pay` is None when the strategy has no pay capability (contractors),
    which is different from a zero paycheck.
    """

    display_name: str
    classification: str = Field(..., description="Classification text as entered")
    resolved: Classification = Field(..., description="Classification actually applied")
    fallback: bool = Field(default=False, description="True if the text was not recognized")
    hours_worked: float = Field(..., description="Hours as entered, before sanitizing")
    pay: Optional[float] = Field(default=None, ge=0)
    rewards: float = Field(default=0.0, ge=0)
    stock_options: float = Field(default=0.0, ge=0)

    @property
    def has_pay(self) -> bool:
        return self.pay is not None
