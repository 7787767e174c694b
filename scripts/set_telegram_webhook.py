#!/usr/bin/env python3
"""Register (or inspect) the Telegram webhook for the GMV bot.

Telegram sends SECRET_TOKEN back in X-Telegram-Bot-Api-Secret-Token on
every update, which is what the webhook endpoint checks.

Usage:
    python scripts/set_telegram_webhook.py https://bot.example.com
    python scripts/set_telegram_webhook.py --info
    python scripts/set_telegram_webhook.py --delete
"""

import argparse
import asyncio
import sys
from pathlib import Path

import httpx

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import BOT_TOKEN, SECRET_TOKEN
from domains.gmv.config import TELEGRAM_API_BASE, WEBHOOK_PATH, HTTP_TIMEOUT


async def call(method: str, payload: dict = None) -> dict:
    """Call a Bot API method and return its JSON answer."""
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as client:
        response = await client.post(f"{TELEGRAM_API_BASE}/bot{BOT_TOKEN}/{method}", json=payload or {})
    return response.json()


def main():
    parser = argparse.ArgumentParser(description="Manage the GMV bot Telegram webhook")
    parser.add_argument("base_url", nargs="?", help="Public base URL of the deployed API")
    parser.add_argument("--info", action="store_true", help="Show current webhook info")
    parser.add_argument("--delete", action="store_true", help="Remove the webhook")

    args = parser.parse_args()

    if not BOT_TOKEN:
        parser.error("BOT_TOKEN is not set")

    if args.info:
        result = asyncio.run(call("getWebhookInfo"))
    elif args.delete:
        result = asyncio.run(call("deleteWebhook"))
    else:
        if not args.base_url:
            parser.error("base_url is required unless --info or --delete is given")
        if not SECRET_TOKEN:
            parser.error("SECRET_TOKEN is not set - the webhook would reject every update")
        result = asyncio.run(call("setWebhook", {
            "url": args.base_url.rstrip("/") + WEBHOOK_PATH,
            "secret_token": SECRET_TOKEN,
            "allowed_updates": ["message", "edited_message"],
        }))

    print(result)
    if not result.get("ok"):
        sys.exit(1)


if __name__ == "__main__":
    main()
