"""Unit tests for the rate limit key function."""

from starlette.requests import Request

from tests.helpers.token_factory import create_access_token
from translation_stats.rate_limit import rate_limit_key


def _request(headers: dict[str, str] | None = None, client=("10.0.0.5", 4321)) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "headers": raw, "client": client})


class TestRateLimitKey:
    def test_authenticated_user_keyed_by_account(self):
        token = create_access_token("user-admin", "administrator")
        assert rate_limit_key(_request({"Authorization": f"Bearer {token}"})) == "user:user-admin"

    def test_session_cookie_keyed_by_account(self):
        token = create_access_token("user-cookie", "administrator")
        request = _request({"Cookie": f"tstats_token={token}"})
        assert rate_limit_key(request) == "user:user-cookie"

    def test_anonymous_keyed_by_address(self):
        assert rate_limit_key(_request()) == "ip:10.0.0.5"

    def test_forwarded_for_first_hop(self):
        request = _request({"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})
        assert rate_limit_key(request) == "ip:203.0.113.7"

    def test_invalid_token_falls_back_to_address(self):
        request = _request({"Authorization": "Bearer not-a-jwt"})
        assert rate_limit_key(request) == "ip:10.0.0.5"
