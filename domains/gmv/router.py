"""Command router for the GMV campaign bot.

Direct command matching, no LLM. One Telegram update is handled as:

- no chat or sender -> ignored
- sender not allowed -> single denial notice
- /start, /status, /setbudget -> handler
- anything else -> list of valid commands

Upstream failures are caught here and shown to the user; nothing is retried.
"""

import asyncio
from datetime import date, datetime
from typing import Iterable, Optional, Protocol, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx

from logger import logger
from utils.log_sanitizer import sanitize_for_log
from . import formatters
from .access import authorize_user
from .amount_parser import parse_amount
from .budget_rules import plan_budget_change
from .services.tiktok import TikTokAPIError
from .types import BudgetState, Snapshot

ChatId = Union[int, str]

# Errors from the ad platform that are reported to the user
UPSTREAM_ERRORS = (TikTokAPIError, httpx.HTTPError, ValueError)


class AdPlatform(Protocol):
    async def get_daily_snapshot(self, day: date) -> Snapshot: ...
    async def get_daily_budget(self) -> BudgetState: ...
    async def set_daily_budget(self, amount: int) -> dict: ...


class Notifier(Protocol):
    async def send(self, chat_id: ChatId, text: str, **options) -> dict: ...


def split_command(text: str) -> tuple[str, list[str]]:
    """Split message text into (command, args).

    A /command@BotName suffix, as sent in group chats, is dropped.
    """
    parts = (text or "").split()
    if not parts:
        return "", []
    command = parts[0].split("@", 1)[0] if parts[0].startswith("/") else parts[0]
    return command, parts[1:]


class CommandRouter:
    """Dispatches one Telegram update. Holds only read-only configuration."""

    def __init__(
        self,
        ads: AdPlatform,
        notifier: Notifier,
        admin_id: Optional[str],
        allow_list: Optional[Iterable[str]],
        tz: Optional[str] = None,
    ):
        self.ads = ads
        self.notifier = notifier
        self.admin_id = admin_id
        self.allow_list = frozenset(allow_list) if allow_list is not None else None
        self.tz = None
        if tz:
            try:
                self.tz = ZoneInfo(tz)
            except (ZoneInfoNotFoundError, ValueError):
                logger.warning(f"Unknown timezone {tz!r} - using server local time")

    def _now(self) -> datetime:
        return datetime.now(self.tz) if self.tz else datetime.now().astimezone()

    async def handle_update(self, update: dict) -> None:
        """Handle a Telegram update that already passed the secret check."""
        msg = update.get("message") or update.get("edited_message") or {}
        chat_id = (msg.get("chat") or {}).get("id")
        from_id = (msg.get("from") or {}).get("id")
        text = msg.get("text") or ""

        if not chat_id or not from_id:
            return

        if not authorize_user(from_id, self.admin_id, self.allow_list):
            logger.warning(f"Rejected command from unauthorized user {from_id}")
            await self.notifier.send(chat_id, formatters.NOT_ALLOWED)
            return

        command, args = split_command(text)
        logger.info(f"Command {command or '<empty>'} from {from_id} in chat {chat_id}")

        if command == "/start":
            await self.notifier.send(chat_id, formatters.GREETING)
        elif command == "/status":
            await self.handle_status(chat_id)
        elif command == "/setbudget":
            await self.handle_set_budget(chat_id, args)
        else:
            await self.notifier.send(chat_id, formatters.UNKNOWN_COMMAND)

    async def _fetch(self) -> tuple[Snapshot, BudgetState]:
        """Read snapshot and budget concurrently; fails if either read fails."""
        today = self._now().date()
        snapshot, budget = await asyncio.gather(
            self.ads.get_daily_snapshot(today),
            self.ads.get_daily_budget(),
        )
        return snapshot, budget

    async def handle_status(self, chat_id: ChatId) -> None:
        await self.notifier.send(chat_id, formatters.FETCHING)
        try:
            snapshot, budget = await self._fetch()
        except UPSTREAM_ERRORS as e:
            logger.error(f"Status fetch failed: {sanitize_for_log(e)}")
            await self.notifier.send(chat_id, formatters.status_failed(e))
            return

        report = formatters.format_status(self._now(), snapshot, budget.current_budget)
        await self.notifier.send(chat_id, report)

    async def handle_set_budget(self, chat_id: ChatId, args: list[str]) -> None:
        if not args:
            await self.notifier.send(chat_id, formatters.SETBUDGET_USAGE)
            return

        desired = parse_amount(" ".join(args))
        if desired is None or desired <= 0:
            await self.notifier.send(chat_id, formatters.INVALID_AMOUNT)
            return

        try:
            snapshot, budget = await self._fetch()
        except UPSTREAM_ERRORS as e:
            logger.error(f"Budget pre-check fetch failed: {sanitize_for_log(e)}")
            await self.notifier.send(chat_id, formatters.status_failed(e))
            return

        plan = plan_budget_change(desired, budget.current_budget, snapshot.cost)
        if plan.rejected:
            logger.info(f"Refused budget decrease {budget.current_budget} -> {desired}")
            await self.notifier.send(chat_id, formatters.decrease_not_allowed(budget.current_budget))
            return

        if plan.raised:
            await self.notifier.send(
                chat_id, formatters.minimum_raise_applied(plan.desired, plan.effective, snapshot.cost)
            )

        await self.notifier.send(chat_id, formatters.applying_budget(plan.effective))
        try:
            await self.ads.set_daily_budget(plan.effective)
        except UPSTREAM_ERRORS as e:
            logger.error(f"Budget update to {plan.effective} failed: {sanitize_for_log(e)}")
            await self.notifier.send(chat_id, formatters.set_budget_failed(e))
            return

        await self.notifier.send(chat_id, formatters.BUDGET_UPDATED)
