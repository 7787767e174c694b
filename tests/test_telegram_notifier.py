"""Tests for the Telegram notifier."""

import pytest

from domains.gmv.services.telegram import TelegramNotifier
from helpers import make_response


class TestSend:

    @pytest.mark.asyncio
    async def test_send_uses_html_without_previews(self, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(200, {"ok": True, "result": {}})

        result = await TelegramNotifier("123:abc").send(42, "<b>hi</b>")

        assert result["ok"] is True
        url = mock_httpx_client.post.await_args.args[0]
        assert url == "https://api.telegram.org/bot123:abc/sendMessage"
        payload = mock_httpx_client.post.await_args.kwargs["json"]
        assert payload == {
            "chat_id": 42,
            "text": "<b>hi</b>",
            "parse_mode": "HTML",
            "disable_web_page_preview": True,
        }

    @pytest.mark.asyncio
    async def test_options_override_defaults(self, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(200, {"ok": True})

        await TelegramNotifier("t").send(42, "x", disable_web_page_preview=False, reply_to_message_id=7)

        payload = mock_httpx_client.post.await_args.kwargs["json"]
        assert payload["disable_web_page_preview"] is False
        assert payload["reply_to_message_id"] == 7

    @pytest.mark.asyncio
    async def test_refused_delivery_is_returned_not_raised(self, mock_httpx_client):
        mock_httpx_client.post.return_value = make_response(
            403, {"ok": False, "description": "Forbidden: bot was blocked by the user"}
        )

        result = await TelegramNotifier("t").send(42, "x")

        assert result["ok"] is False

    @pytest.mark.asyncio
    async def test_non_json_answer_is_reported_as_failure(self, mock_httpx_client):
        response = make_response(502, text="<html>Bad Gateway</html>")
        response.json.side_effect = ValueError("not json")
        mock_httpx_client.post.return_value = response

        result = await TelegramNotifier("t").send(42, "x")

        assert result == {"ok": False, "description": "<html>Bad Gateway</html>"}
