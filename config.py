"""Global configuration for the GMV campaign bot."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Telegram
BOT_TOKEN = os.getenv("BOT_TOKEN")
SECRET_TOKEN = os.getenv("SECRET_TOKEN")

# TikTok Business API
TIKTOK_ACCESS_TOKEN = os.getenv("TIKTOK_ACCESS_TOKEN")
TIKTOK_ADVERTISER_ID = os.getenv("TIKTOK_ADVERTISER_ID")
STORE_ID = os.getenv("STORE_ID")
CAMPAIGN_ID = os.getenv("CAMPAIGN_ID", "1843042905662609")

# Timezone of the advertiser account (used for "today" and report timestamps)
TZ = os.getenv("CAMPAIGN_TZ") or os.getenv("TZ") or "Asia/Jakarta"

# Access control - ALLOW_USER is a JSON list, e.g. ["7702808040"]
ALLOW_USER = os.getenv("ALLOW_USER", "[]")
ADMIN_CHAT_ID = os.getenv("ADMIN_CHAT_ID") or None

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", Path(os.getenv("LOCALAPPDATA", ".")) / "gmv-bot" / "logs"))
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
