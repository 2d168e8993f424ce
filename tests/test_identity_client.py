import json

import httpx
import pytest

from gardenswap.config.settings import PublicSettings
from gardenswap.errors import IdentityCreationError
from gardenswap.supabase_http import SupabaseIdentityClient


def make_client(status_code=200, body=None, seen=None, raw=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        if raw is not None:
            return httpx.Response(status_code, content=raw)
        return httpx.Response(status_code, json=body)

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SupabaseIdentityClient("https://proj.supabase.co/", "anon-key", http)


async def test_signup_request_shape():
    seen = []
    client = make_client(body={"id": "u1"}, seen=seen)

    await client.create_user("nelson@example.com", "secret123", {"full_name": "Nelson Chen"})

    request = seen[0]
    assert str(request.url) == "https://proj.supabase.co/auth/v1/signup"
    assert request.headers["apikey"] == "anon-key"
    assert json.loads(request.content) == {
        "email": "nelson@example.com",
        "password": "secret123",
        "data": {"full_name": "Nelson Chen"},
    }


async def test_confirmation_pending_returns_top_level_id():
    client = make_client(body={"id": "u1", "email": "nelson@example.com", "confirmation_sent_at": "now"})
    assert await client.create_user("nelson@example.com", "secret123") == "u1"


async def test_session_response_returns_nested_user_id():
    client = make_client(body={"access_token": "t", "user": {"id": "u2"}})
    assert await client.create_user("nelson@example.com", "secret123") == "u2"


async def test_missing_id_is_a_failure():
    client = make_client(body={"user": None})
    with pytest.raises(IdentityCreationError) as excinfo:
        await client.create_user("nelson@example.com", "secret123")
    assert excinfo.value.message == "User not created."


@pytest.mark.parametrize(
    "body, message",
    [
        ({"code": 422, "msg": "User already registered"}, "User already registered"),
        ({"error": "invalid_grant", "error_description": "Signups not allowed"}, "Signups not allowed"),
        ({"message": "Password should be at least 6 characters"}, "Password should be at least 6 characters"),
    ],
)
async def test_service_error_message_is_surfaced(body, message):
    client = make_client(status_code=422, body=body)
    with pytest.raises(IdentityCreationError) as excinfo:
        await client.create_user("nelson@example.com", "secret123")
    assert excinfo.value.message == message


async def test_non_json_error_body():
    client = make_client(status_code=502, raw=b"Bad Gateway")
    with pytest.raises(IdentityCreationError) as excinfo:
        await client.create_user("nelson@example.com", "secret123")
    assert excinfo.value.message == "Bad Gateway"


async def test_transport_error_is_identity_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = SupabaseIdentityClient("https://proj.supabase.co", "anon-key", http)

    with pytest.raises(IdentityCreationError) as excinfo:
        await client.create_user("nelson@example.com", "secret123")
    assert excinfo.value.message == "connection refused"


def test_from_settings_requires_public_config():
    with pytest.raises(ValueError):
        SupabaseIdentityClient.from_settings(PublicSettings(SUPABASE_URL=None, SUPABASE_ANON_KEY=None), httpx.AsyncClient())
