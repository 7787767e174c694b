"""GMV domain services - external API clients."""

from .tiktok import TikTokClient, TikTokAPIError
from .telegram import TelegramNotifier

__all__ = ["TikTokClient", "TikTokAPIError", "TelegramNotifier"]
