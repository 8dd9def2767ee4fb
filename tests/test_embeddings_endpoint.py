from __future__ import annotations

import json
import logging

import httpx
import pytest

from embedclient.api.errors import ApiError
from embedclient.embeddings.types import EmbeddingsRequest, EmbeddingsResponse, encode_embedding
from tests.utils import make_client, recording_transport


@pytest.mark.asyncio
async def test_single_string_posts_to_embeddings_path(recorded_client) -> None:
    client, seen = recorded_client
    response = await client.embeddings.create_embedding("The food was delicious")

    assert isinstance(response, EmbeddingsResponse)
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.example.test/v1/embeddings"
    assert request.headers["authorization"] == "Bearer sk-test"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {"input": "The food was delicious"}


@pytest.mark.asyncio
async def test_list_input_with_model_and_user(recorded_client) -> None:
    client, seen = recorded_client
    await client.embeddings.create_embedding(["a", "b"], model="text-embedding-3-small", user="user-1")
    assert json.loads(seen[0].content) == {
        "input": ["a", "b"],
        "model": "text-embedding-3-small",
        "user": "user-1",
    }


@pytest.mark.asyncio
async def test_prebuilt_request_is_sent_as_is(recorded_client) -> None:
    client, seen = recorded_client
    request = EmbeddingsRequest(input=("x",), model="m", dimensions=8)
    await client.embeddings.create_embedding(request)
    assert json.loads(seen[0].content) == {"input": ["x"], "model": "m", "dimensions": 8}


@pytest.mark.asyncio
async def test_prebuilt_request_rejects_extra_arguments(recorded_client) -> None:
    client, seen = recorded_client
    with pytest.raises(ValueError):
        await client.embeddings.create_embedding(EmbeddingsRequest(input="x"), model="m")
    assert seen == []


@pytest.mark.asyncio
async def test_organization_header_sent_when_configured() -> None:
    transport, seen = recording_transport()
    async with make_client(transport, organization="org-abc") as client:
        await client.embeddings.create_embedding("hi")
    assert seen[0].headers["openai-organization"] == "org-abc"


@pytest.mark.asyncio
async def test_base64_response_is_decoded() -> None:
    payload = {
        "object": "list",
        "model": "m",
        "data": [{"object": "embedding", "index": 0, "embedding": encode_embedding([0.25, 0.5])}],
    }
    transport, _seen = recording_transport(payload=payload)
    async with make_client(transport) as client:
        response = await client.embeddings.create_embedding(
            EmbeddingsRequest(input="hi", encoding_format="base64")
        )
    assert response.first == [0.25, 0.5]


@pytest.mark.asyncio
async def test_non_success_status_raises_api_error() -> None:
    error_body = {"error": {"message": "Invalid API key", "type": "invalid_request_error"}}
    transport, _seen = recording_transport(
        payload=error_body,
        status_code=401,
        headers={"x-request-id": "req_err"},
    )
    async with make_client(transport) as client:
        with pytest.raises(ApiError) as excinfo:
            await client.embeddings.create_embedding("hi")

    error = excinfo.value
    assert error.status_code == 401
    assert error.request_id == "req_err"
    assert "Invalid API key" in error.response_text
    assert error.request["body"] == {"input": "hi"}
    assert "authorization" not in json.dumps(error.request).lower()
    assert str(error) == "ApiError(status=401, request_id=req_err)"


@pytest.mark.asyncio
async def test_malformed_json_propagates() -> None:
    transport, _seen = recording_transport(content=b"{not json")
    async with make_client(transport) as client:
        with pytest.raises(json.JSONDecodeError):
            await client.embeddings.create_embedding("hi")


@pytest.mark.asyncio
async def test_transport_error_propagates_unchanged() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(httpx.MockTransport(handler)) as client:
        with pytest.raises(httpx.ConnectError):
            await client.embeddings.create_embedding("hi")


@pytest.mark.asyncio
async def test_debug_logs_raw_bodies(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="embedclient")
    transport, _seen = recording_transport()
    async with make_client(transport, debug=True) as client:
        await client.embeddings.create_embedding("log me")

    messages = [record.getMessage() for record in caplog.records]
    assert any("request" in message and "log me" in message for message in messages)
    assert any("response 200" in message and "text-embedding-ada-002" in message for message in messages)


@pytest.mark.asyncio
async def test_no_body_logging_without_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="embedclient")
    transport, _seen = recording_transport()
    async with make_client(transport) as client:
        await client.embeddings.create_embedding("quiet")
    assert not any("quiet" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_debug_setting_alone_enables_body_logs(caplog: pytest.LogCaptureFixture) -> None:
    transport, _seen = recording_transport()
    async with make_client(transport, debug=True) as client:
        await client.embeddings.create_embedding("log me")

    assert logging.getLogger("embedclient").getEffectiveLevel() == logging.DEBUG
    assert any("log me" in record.getMessage() for record in caplog.records)
