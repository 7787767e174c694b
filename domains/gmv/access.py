"""Webhook authentication and user authorization.

Pure predicates: every input, configuration included, is passed in.
Anything unexpected denies access.
"""

import hmac
import json
from typing import Iterable, Optional, Union

UserId = Union[int, str]


def authorize_webhook(received_secret: Optional[str], expected_secret: Optional[str]) -> bool:
    """Check the X-Telegram-Bot-Api-Secret-Token header against the configured secret."""
    if not expected_secret or received_secret is None:
        return False
    return hmac.compare_digest(received_secret.encode("utf-8"), expected_secret.encode("utf-8"))


def parse_allow_list(raw: Optional[str]) -> Optional[frozenset[str]]:
    """Parse the ALLOW_USER JSON list into normalized string ids.

    Returns None when the value is not a JSON list.
    """
    try:
        parsed = json.loads(raw if raw is not None else "[]")
    except (TypeError, ValueError):
        return None
    if not isinstance(parsed, list):
        return None
    return frozenset(str(item) for item in parsed)


def authorize_user(
    user_id: Optional[UserId],
    admin_id: Optional[UserId],
    allow_list: Optional[Iterable[str]],
) -> bool:
    """Admin is always allowed; everyone else must be on the allow-list.

    allow_list=None means the configuration could not be parsed.
    """
    if not user_id:
        return False
    if admin_id and str(user_id) == str(admin_id):
        return True
    if allow_list is None:
        return False
    return str(user_id) in allow_list
