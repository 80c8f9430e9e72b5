import httpx
import pytest

from mxdirectory.core.errors import InternalServerError
from mxdirectory.directory.homeserver import (
    HomeserverDirectoryClient,
    HomeserverFailure,
    HomeserverSuccess,
    HomeserverUnsupported,
)
from tests.unit.fakes import TARGET, homeserver_client, hs_payload, responding


@pytest.mark.asyncio
async def test_success_carries_entries_and_limited():
    client = homeserver_client(responding(200, hs_payload("@a:hs", "@b:hs", limited=True)))

    outcome = await client.query(TARGET, "a")

    assert isinstance(outcome, HomeserverSuccess)
    assert [e.user_id for e in outcome.result.results] == ["@a:hs", "@b:hs"]
    assert outcome.result.limited is True


@pytest.mark.asyncio
async def test_success_keeps_unknown_entry_fields():
    payload = {
        "results": [{"user_id": "@a:hs", "display_name": "A", "avatar_url": None, "extra": 1}],
        "limited": False,
    }
    client = homeserver_client(responding(200, payload))

    outcome = await client.query(TARGET, "a")

    assert isinstance(outcome, HomeserverSuccess)
    assert outcome.result.results[0].model_dump()["extra"] == 1


@pytest.mark.asyncio
async def test_unrecognized_is_unsupported():
    client = homeserver_client(
        responding(400, {"errcode": "M_UNRECOGNIZED", "error": "Unrecognized request"})
    )

    outcome = await client.query(TARGET, "a")

    assert isinstance(outcome, HomeserverUnsupported)
    assert outcome.error == "Unrecognized request"


@pytest.mark.asyncio
async def test_other_error_is_failure_with_original_status():
    client = homeserver_client(
        responding(429, {"errcode": "M_LIMIT_EXCEEDED", "error": "Too many requests"})
    )

    outcome = await client.query(TARGET, "a")

    assert outcome == HomeserverFailure(
        status=429, errcode="M_LIMIT_EXCEEDED", error="Too many requests"
    )


@pytest.mark.asyncio
async def test_unknown_errcode_is_kept_verbatim():
    client = homeserver_client(responding(502, {"errcode": "ORG_CUSTOM", "error": "upstream"}))

    outcome = await client.query(TARGET, "a")

    assert isinstance(outcome, HomeserverFailure)
    assert outcome.errcode == "ORG_CUSTOM"


@pytest.mark.asyncio
async def test_malformed_success_body_raises_internal_error():
    client = homeserver_client(responding(200, {"results": "nope"}))

    with pytest.raises(InternalServerError) as exc_info:
        await client.query(TARGET, "a")
    assert exc_info.value.status == 500
    assert exc_info.value.errcode == "M_UNKNOWN"
    assert "Invalid JSON reply from the HS" in exc_info.value.error


@pytest.mark.asyncio
async def test_non_json_error_body_raises_internal_error():
    client = homeserver_client(responding(502, text="Bad Gateway"))

    with pytest.raises(InternalServerError):
        await client.query(TARGET, "a")


@pytest.mark.asyncio
async def test_transport_error_raises_internal_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = homeserver_client(handler)

    with pytest.raises(InternalServerError) as exc_info:
        await client.query(TARGET, "a")
    assert "I/O error" in exc_info.value.error


@pytest.mark.asyncio
async def test_owned_client_sends_user_agent():
    client = HomeserverDirectoryClient(user_agent="mxdirectory-test", timeout=5.0)
    try:
        assert client.client.headers["User-Agent"] == "mxdirectory-test"
        assert client.client.timeout.read == 5.0
    finally:
        await client.close()
    assert client.client.is_closed
