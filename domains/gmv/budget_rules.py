"""Daily budget rules for the GMV Max campaign.

Two independent rules apply to a budget change:

- Same-day non-decrease: the new budget may not be lower than the budget
  currently configured on the campaign.
- 105% rule: TikTok rejects a daily budget below 105% of what the campaign
  has already spent today, so the requested amount is lifted to that floor.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

Number = Union[int, float, Decimal]

MINIMUM_RAISE_FACTOR = Decimal("1.05")


@dataclass(frozen=True)
class BudgetPlan:
    """Outcome of checking a requested budget against both rules."""
    desired: int
    current_budget: float
    spend: float
    effective: int
    rejected: bool

    @property
    def raised(self) -> bool:
        """True when the 105% rule lifted the requested amount."""
        return not self.rejected and self.effective > self.desired


def minimum_allowed_budget(current_spend: Number) -> int:
    """Smallest daily budget TikTok accepts given today's spend."""
    return math.ceil(Decimal(str(current_spend)) * MINIMUM_RAISE_FACTOR)


def enforce_minimum_raise(desired: Number, current_spend: Number) -> int:
    """Return max(desired, ceil(spend * 1.05)) as whole Rupiah."""
    return max(math.ceil(Decimal(str(desired))), minimum_allowed_budget(current_spend))


def is_decrease(desired: Number, current_budget: Number) -> bool:
    return Decimal(str(desired)) < Decimal(str(current_budget))


def plan_budget_change(desired: int, current_budget: Number, spend: Number) -> BudgetPlan:
    """Apply the non-decrease check, then the 105% rule.

    A rejected plan keeps effective == desired and must not be committed.
    """
    if is_decrease(desired, current_budget):
        return BudgetPlan(desired, current_budget, spend, desired, rejected=True)

    effective = enforce_minimum_raise(desired, spend)
    return BudgetPlan(desired, current_budget, spend, effective, rejected=False)
