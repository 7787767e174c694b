"""Shared builders for Telegram updates and HTTP responses."""

from unittest.mock import Mock


def make_response(status_code: int = 200, payload=None, text: str = None):
    """Build a stand-in for an httpx.Response."""
    response = Mock()
    response.status_code = status_code
    response.json = Mock(return_value=payload if payload is not None else {})
    response.text = text if text is not None else str(payload)
    return response


def make_update(text: str, user_id=111, chat_id=222, key: str = "message") -> dict:
    """Build a Telegram update carrying a text message."""
    return {
        "update_id": 1,
        key: {
            "message_id": 10,
            "chat": {"id": chat_id, "type": "private"},
            "from": {"id": user_id, "is_bot": False},
            "text": text,
        },
    }


def sent_texts(notifier) -> list[str]:
    """Texts passed to notifier.send, in order."""
    return [c.args[1] for c in notifier.send.await_args_list]
