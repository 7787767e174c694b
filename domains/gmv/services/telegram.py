"""Telegram Bot API notifier.

Replies are best-effort: a refused delivery is logged, never raised.
"""

from typing import Union

import httpx

from logger import logger
from utils.log_sanitizer import sanitize_for_log
from ..config import TELEGRAM_API_BASE, HTTP_TIMEOUT

ChatId = Union[int, str]


class TelegramNotifier:
    """Sends HTML-formatted messages through sendMessage."""

    def __init__(self, bot_token: str, api_base: str = TELEGRAM_API_BASE, timeout: float = HTTP_TIMEOUT):
        self.bot_token = bot_token
        self.api_base = api_base
        self.timeout = timeout

    def _method_url(self, method: str) -> str:
        return f"{self.api_base}/bot{self.bot_token}/{method}"

    async def send(self, chat_id: ChatId, text: str, **options) -> dict:
        """Send text to a chat. Options override the defaults (HTML, no link previews)."""
        payload = {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": "HTML",
            "disable_web_page_preview": True,
            **options,
        }
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(self._method_url("sendMessage"), json=payload)

        try:
            result = response.json()
        except ValueError:
            result = {"ok": False, "description": response.text}

        if not result.get("ok"):
            logger.warning(
                f"Telegram sendMessage to {chat_id} failed ({response.status_code}): "
                f"{sanitize_for_log(result.get('description'))}"
            )
        return result
