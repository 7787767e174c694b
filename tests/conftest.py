"""Pytest configuration and fixtures."""

import os
import sys
from unittest.mock import Mock, AsyncMock, patch

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domains.gmv.types import Snapshot, BudgetState


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx client."""
    with patch('httpx.AsyncClient') as mock:
        client = AsyncMock()
        mock.return_value.__aenter__.return_value = client
        yield client


@pytest.fixture
def notifier():
    """Notifier that records every message sent."""
    mock = Mock()
    mock.send = AsyncMock(return_value={"ok": True})
    return mock


@pytest.fixture
def ads():
    """Ad platform with a quiet day: nothing spent, 100k budget."""
    mock = Mock()
    mock.get_daily_snapshot = AsyncMock(return_value=Snapshot(cost=0, orders=0, gross=0))
    mock.get_daily_budget = AsyncMock(return_value=BudgetState(current_budget=100000))
    mock.set_daily_budget = AsyncMock(return_value={"code": 0, "message": "OK"})
    return mock
