"""Log sanitizer - removes credentials from log messages.

Telegram bot tokens travel inside request URLs and TikTok tokens inside
headers, so error text from either API can leak them into log files.
"""

import re
from typing import Union

# Patterns to detect and redact sensitive data
SENSITIVE_PATTERNS = [
    # Telegram bot token inside an API URL (bot123456:AA...)
    (r'bot\d{6,}:[A-Za-z0-9_-]{20,}', 'bot[BOT_TOKEN]'),

    # Bare Telegram bot token
    (r'\b\d{6,}:[A-Za-z0-9_-]{30,}\b', '[BOT_TOKEN]'),

    # TikTok Access-Token header and key=value secrets
    (r'(access[-_]token|secret[-_]token|secret|token)["\s:=]+[^\s,}"\']{8,}',
     r'\1=[REDACTED]'),

    # Bearer tokens
    (r'(Bearer)\s+[A-Za-z0-9\-_\.]+', r'\1 [REDACTED]'),

    # Generic long hex/alphanumeric strings that look like keys (40+ chars)
    (r'\b[A-Za-z0-9]{40,}\b', '[LONG_TOKEN]'),
]

# Compiled patterns for efficiency
_COMPILED_PATTERNS = [(re.compile(p, re.IGNORECASE), r) for p, r in SENSITIVE_PATTERNS]


def sanitize_log(text: str) -> str:
    """Remove credentials from text for safe logging.

    Args:
        text: The text to sanitize

    Returns:
        Sanitized text with credentials replaced by placeholders
    """
    if not text:
        return text

    result = text
    for pattern, replacement in _COMPILED_PATTERNS:
        result = pattern.sub(replacement, result)

    return result


def sanitize_for_log(value: Union[str, bytes, BaseException, None], max_length: int = 500) -> str:
    """Sanitize and truncate a value for logging.

    Args:
        value: The value to sanitize (string, bytes or exception)
        max_length: Maximum length of returned string

    Returns:
        Sanitized, truncated string safe for logging
    """
    if value is None:
        return "<None>"

    if isinstance(value, bytes):
        text = value.decode('utf-8', errors='replace')
    else:
        text = str(value)

    sanitized = sanitize_log(text)

    if len(sanitized) > max_length:
        return sanitized[:max_length] + f"... [{len(text)} chars total]"

    return sanitized
