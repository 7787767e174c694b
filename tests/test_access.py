"""Tests for webhook authentication and user authorization."""

import pytest

from domains.gmv.access import authorize_webhook, authorize_user, parse_allow_list


class TestWebhookSecret:

    @pytest.mark.parametrize("secret", ["s", "abc123", "a-long-secret-token_with:chars"])
    def test_matching_secret_is_accepted(self, secret):
        assert authorize_webhook(secret, secret) is True

    @pytest.mark.parametrize("received, expected", [
        ("abc", "abd"),
        ("abc", "abc "),
        ("", "abc"),
        (None, "abc"),
        ("abc", ""),
        ("", ""),
        ("abc", None),
        (None, None),
    ])
    def test_mismatch_or_missing_secret_is_rejected(self, received, expected):
        assert authorize_webhook(received, expected) is False


class TestAllowList:

    def test_ids_are_normalized_to_strings(self):
        assert parse_allow_list('["7702808040", 12345]') == frozenset({"7702808040", "12345"})

    def test_missing_value_is_empty(self):
        assert parse_allow_list(None) == frozenset()

    @pytest.mark.parametrize("raw", ["not json", "[1, 2", '{"id": 1}', "42", '"7702808040"'])
    def test_malformed_value_is_none(self, raw):
        assert parse_allow_list(raw) is None


class TestAuthorizeUser:

    def test_listed_user_is_allowed(self):
        assert authorize_user(7702808040, None, frozenset({"7702808040"})) is True

    def test_unlisted_user_is_denied(self):
        assert authorize_user(1, None, frozenset({"7702808040"})) is False

    def test_admin_allowed_without_being_listed(self):
        assert authorize_user(99, "99", frozenset()) is True

    def test_admin_allowed_when_allow_list_is_malformed(self):
        assert authorize_user(99, "99", None) is True

    def test_malformed_allow_list_denies_everyone_else(self):
        assert authorize_user(7702808040, "99", parse_allow_list("oops")) is False

    def test_missing_user_is_denied(self):
        assert authorize_user(None, "99", frozenset({"None"})) is False
