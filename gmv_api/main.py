"""GMV Bot API - Telegram webhook for the GMV Max campaign bot.

Exposes exactly two paths: a liveness check and the Telegram webhook.
Run with: uvicorn gmv_api.main:app --port 8080
"""

from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
from logger import logger
from domains.gmv import CommandRouter, authorize_webhook, parse_allow_list
from domains.gmv.config import SECRET_HEADER, WEBHOOK_PATH
from domains.gmv.services import TelegramNotifier, TikTokClient

app = FastAPI(
    title="GMV Bot API",
    description="Telegram webhook for daily GMV Max status and budget control",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@lru_cache(maxsize=1)
def get_router() -> CommandRouter:
    """Build the command router once per process from configuration."""
    allow_list = parse_allow_list(config.ALLOW_USER)
    if allow_list is None:
        logger.error("ALLOW_USER is not a JSON list - only the admin can use the bot")

    return CommandRouter(
        ads=TikTokClient(
            access_token=config.TIKTOK_ACCESS_TOKEN,
            advertiser_id=config.TIKTOK_ADVERTISER_ID,
            campaign_id=config.CAMPAIGN_ID,
        ),
        notifier=TelegramNotifier(config.BOT_TOKEN),
        admin_id=config.ADMIN_CHAT_ID,
        allow_list=allow_list,
        tz=config.TZ,
    )


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and methods all answer 404 not found."""
    if exc.status_code in (404, 405):
        return PlainTextResponse("not found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


# ============================================================
# Health Check
# ============================================================

@app.api_route("/", methods=ALL_METHODS, response_class=PlainTextResponse)
async def root():
    """Liveness check, answered for any method."""
    return "ok"


# ============================================================
# Telegram Webhook
# ============================================================

@app.post(WEBHOOK_PATH, response_class=PlainTextResponse)
async def telegram_webhook(request: Request, router: CommandRouter = Depends(get_router)):
    """Receive a Telegram update and run the command it carries."""
    received = request.headers.get(SECRET_HEADER)
    if not authorize_webhook(received, config.SECRET_TOKEN):
        logger.warning("Webhook call with missing or wrong secret token")
        return PlainTextResponse("forbidden", status_code=403)

    try:
        update = await request.json()
    except ValueError:
        logger.warning("Webhook body is not valid JSON - ignored")
        return "ok"

    if isinstance(update, dict):
        await router.handle_update(update)
    return "ok"
