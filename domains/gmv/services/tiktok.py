"""TikTok Business API client for a single GMV Max campaign.

Reads today's report and the current daily budget, and commits budget
updates. Every call opens its own httpx client; nothing is cached.
"""

import json
import math
from datetime import date
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from logger import logger
from utils.log_sanitizer import sanitize_for_log
from ..config import (
    TIKTOK_BASE,
    REPORT_ENDPOINT,
    CAMPAIGN_GET_ENDPOINT,
    CAMPAIGN_UPDATE_ENDPOINT,
    REPORT_METRICS,
    BUDGET_MODE_DAY,
    HTTP_TIMEOUT,
)
from ..types import Snapshot, BudgetState


class TikTokAPIError(Exception):
    """Non-success answer from the TikTok Business API."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"TikTok API {status_code}: {body}")


def _malformed(what: str, value: Any) -> TikTokAPIError:
    return TikTokAPIError(200, f"unexpected {what}: {json.dumps(value, default=str)}")


def _first_number(row: dict, *keys: str) -> float:
    """Return the first present field of row as a float (0 if none)."""
    for key in keys:
        value = row.get(key)
        if value is None or value == "":
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise _malformed(key, value)
        try:
            number = float(value)
        except ValueError:
            raise _malformed(key, value)
        if not math.isfinite(number):
            raise _malformed(key, value)
        return number
    return 0.0


def _first_row(data: dict) -> dict:
    """First entry of data.list, or {} when the list is empty."""
    body = data.get("data") or {}
    if not isinstance(body, dict):
        raise _malformed("data", body)
    rows = body.get("list") or []
    if not isinstance(rows, list):
        raise _malformed("data.list", rows)
    if not rows:
        return {}
    if not isinstance(rows[0], dict):
        raise _malformed("row", rows[0])
    return rows[0]


class TikTokClient:
    """Ad platform client bound to one advertiser and campaign."""

    def __init__(
        self,
        access_token: str,
        advertiser_id: str,
        campaign_id: str,
        base_url: str = TIKTOK_BASE,
        timeout: float = HTTP_TIMEOUT,
    ):
        self.access_token = access_token
        self.advertiser_id = advertiser_id
        self.campaign_id = campaign_id
        self.base_url = base_url
        self.timeout = timeout

    def _headers(self) -> dict:
        return {
            "Access-Token": self.access_token or "",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        payload: Optional[dict] = None,
    ) -> dict:
        """Send one request; raise TikTokAPIError on any non-success answer."""
        url = f"{self.base_url}{path}"
        if params:
            url = f"{url}?{urlencode(params)}"

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            if method == "GET":
                response = await client.get(url, headers=self._headers())
            else:
                response = await client.post(url, headers=self._headers(), content=json.dumps(payload or {}))

        if not 200 <= response.status_code < 300:
            logger.warning(f"TikTok {method} {path} returned {response.status_code}: {sanitize_for_log(response.text)}")
            raise TikTokAPIError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError:
            raise TikTokAPIError(response.status_code, f"response is not JSON: {response.text}")
        if not isinstance(data, dict):
            raise TikTokAPIError(response.status_code, f"unexpected response: {response.text}")

        # TikTok reports business errors with HTTP 200 and a non-zero code
        code = data.get("code", 0)
        if code and str(code) != "0":
            message = data.get("message") or json.dumps(data)
            logger.warning(f"TikTok {method} {path} code {code}: {sanitize_for_log(message)}")
            raise TikTokAPIError(response.status_code, f"code {code}: {message}")

        return data

    def _report_payload(self, day: date) -> dict:
        return {
            "advertiser_id": self.advertiser_id,
            "report_type": "BASIC",
            "data_level": "AUCTION_CAMPAIGN",
            "dimensions": ["campaign_id"],
            "metrics": list(REPORT_METRICS),
            "start_date": day.isoformat(),
            "end_date": day.isoformat(),
            "filtering": [
                {"field_name": "campaign_id", "operator": "IN", "values": [self.campaign_id]}
            ],
        }

    async def get_daily_snapshot(self, day: date) -> Snapshot:
        """Fetch cost, orders and gross revenue for the campaign on `day`.

        The integrated report endpoint sometimes refuses POST with 405.
        In that case the same report is requested with GET, lists and
        objects JSON-encoded into the query string.
        """
        payload = self._report_payload(day)
        try:
            data = await self._request("POST", REPORT_ENDPOINT, payload=payload)
        except TikTokAPIError as e:
            if e.status_code != 405:
                raise
            logger.info("Report endpoint refused POST, retrying as GET")
            params = {
                key: value if isinstance(value, str) else json.dumps(value)
                for key, value in payload.items()
            }
            data = await self._request("GET", REPORT_ENDPOINT, params=params)

        row = _first_row(data)
        metrics = row.get("metrics") or {}
        if not isinstance(metrics, dict):
            raise _malformed("metrics", metrics)
        fields: dict[str, Any] = {**row, **metrics}
        snapshot = Snapshot(
            cost=_first_number(fields, "spend", "stat_cost"),
            orders=int(_first_number(fields, "paid_orders", "order")),
            gross=_first_number(fields, "gross_revenue", "gmv"),
        )
        logger.info(f"Snapshot {day}: cost={snapshot.cost} orders={snapshot.orders} gross={snapshot.gross}")
        return snapshot

    async def get_daily_budget(self) -> BudgetState:
        """Fetch the daily budget currently set on the campaign."""
        params = {
            "advertiser_id": self.advertiser_id,
            "campaign_ids": json.dumps([self.campaign_id]),
        }
        data = await self._request("GET", CAMPAIGN_GET_ENDPOINT, params=params)
        item = _first_row(data)
        return BudgetState(current_budget=_first_number(item, "budget", "daily_budget"))

    async def set_daily_budget(self, amount: int) -> dict:
        """Commit a new daily budget. Rule checks happen before this call."""
        payload = {
            "advertiser_id": self.advertiser_id,
            "campaign_id": self.campaign_id,
            "budget_mode": BUDGET_MODE_DAY,
            "budget": int(round(amount)),
        }
        data = await self._request("POST", CAMPAIGN_UPDATE_ENDPOINT, payload=payload)
        logger.info(f"Daily budget for campaign {self.campaign_id} set to {payload['budget']}")
        return data
