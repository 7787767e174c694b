"""GMV Max campaign domain - daily status and budget control over Telegram."""

from .amount_parser import parse_amount
from .budget_rules import BudgetPlan, enforce_minimum_raise, plan_budget_change
from .access import authorize_user, authorize_webhook, parse_allow_list
from .router import CommandRouter

__all__ = [
    "parse_amount",
    "BudgetPlan",
    "enforce_minimum_raise",
    "plan_budget_change",
    "authorize_user",
    "authorize_webhook",
    "parse_allow_list",
    "CommandRouter",
]
