"""GMV Bot API - FastAPI app serving the Telegram webhook."""
