"""GMV domain configuration - TikTok and Telegram endpoints."""

# TikTok Business API
TIKTOK_BASE = "https://business-api.tiktok.com"
REPORT_ENDPOINT = "/open_api/v1.3/report/integrated/get/"
CAMPAIGN_GET_ENDPOINT = "/open_api/v1.3/campaign/get/"
CAMPAIGN_UPDATE_ENDPOINT = "/open_api/v1.3/campaign/update/"

REPORT_METRICS = ["spend", "stat_cost", "gross_revenue", "paid_orders", "roi"]
BUDGET_MODE_DAY = "BUDGET_MODE_DAY"

# Telegram Bot API
TELEGRAM_API_BASE = "https://api.telegram.org"
WEBHOOK_PATH = "/telegram-webhook"
SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"

# Seconds per outbound HTTP call
HTTP_TIMEOUT = 30

# Upstream error text shown to the user is cut to this many characters
ERROR_TRUNCATE = 500
