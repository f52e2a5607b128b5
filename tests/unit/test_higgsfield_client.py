"""Provider client against httpx.MockTransport: request shapes and error mapping."""

from __future__ import annotations

import json

import httpx
import pytest

from core.higgsfield_client import HiggsfieldClient
from model.job import ImageFormat
from util.errors import (
    ProviderAuthError,
    ProviderMalformedError,
    ProviderQuotaError,
    ProviderSubmissionError,
)

BASE = "https://hf.test"


def _client(handler) -> HiggsfieldClient:
    return HiggsfieldClient("key", "secret", BASE, transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_upload_image_uses_presigned_url_without_credentials() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path == "/files/generate-upload-url":
            assert json.loads(request.content) == {"content_type": "image/png"}
            return httpx.Response(
                200,
                json={"public_url": "https://cdn.test/a.png", "upload_url": "https://s3.test/put"},
            )
        return httpx.Response(200)

    client = _client(handler)
    url = await client.upload_image(b"png-bytes", ImageFormat.png)
    await client.aclose()

    assert url == "https://cdn.test/a.png"
    assert seen[0].headers["hf-api-key"] == "key"
    assert seen[0].headers["hf-secret"] == "secret"
    put = seen[1]
    assert put.method == "PUT"
    assert str(put.url) == "https://s3.test/put"
    assert put.content == b"png-bytes"
    assert put.headers["content-type"] == "image/png"
    assert "hf-api-key" not in put.headers
    assert "hf-secret" not in put.headers


@pytest.mark.anyio
async def test_create_job_wraps_params() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/image2video/dop"
        body = json.loads(request.content)
        assert body["params"]["model"] == "dop-turbo"
        return httpx.Response(200, json={"id": "js-9", "jobs": [{"status": "queued"}]})

    client = _client(handler)
    job_set = await client.create_job({"model": "dop-turbo"})
    await client.aclose()
    assert job_set["id"] == "js-9"


@pytest.mark.anyio
async def test_get_job_set_hits_job_set_path() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/job-sets/js-9"
        return httpx.Response(200, json={"id": "js-9", "jobs": []})

    client = _client(handler)
    assert (await client.get_job_set("js-9"))["id"] == "js-9"
    await client.aclose()


@pytest.mark.anyio
@pytest.mark.parametrize(
    "status_code, body, expected",
    [
        (401, {"detail": "Invalid key"}, ProviderAuthError),
        (403, {"detail": "Forbidden"}, ProviderAuthError),
        (402, {"detail": "Payment required"}, ProviderQuotaError),
        (400, {"detail": "Not enough credits"}, ProviderQuotaError),
        (500, {"detail": "Internal"}, ProviderSubmissionError),
        (422, "plain text failure", ProviderSubmissionError),
    ],
)
async def test_error_statuses_map_to_taxonomy(status_code, body, expected) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)

    client = _client(handler)
    with pytest.raises(expected):
        await client.create_job({"model": "dop-lite"})
    await client.aclose()


@pytest.mark.anyio
async def test_network_error_is_submission_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = _client(handler)
    with pytest.raises(ProviderSubmissionError):
        await client.upload_image(b"x", ImageFormat.jpeg)
    await client.aclose()


@pytest.mark.anyio
async def test_non_json_job_set_is_malformed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>gateway</html>")

    client = _client(handler)
    with pytest.raises(ProviderMalformedError):
        await client.get_job_set("js-1")
    await client.aclose()


@pytest.mark.anyio
async def test_list_motions_accepts_wrapped_lists() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/motions"
        return httpx.Response(200, json={"items": [{"id": "m1", "name": "Zoom"}, "junk"]})

    client = _client(handler)
    assert await client.list_motions() == [{"id": "m1", "name": "Zoom"}]
    await client.aclose()


@pytest.mark.anyio
async def test_get_client_is_memoized() -> None:
    from core import higgsfield_client

    await higgsfield_client.close_client()
    first = higgsfield_client.get_client()
    assert higgsfield_client.get_client() is first
    await higgsfield_client.close_client()
    assert higgsfield_client._client is None


@pytest.mark.anyio
async def test_job_set_id_stays_one_path_segment() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "x", "jobs": []})

    client = _client(handler)
    await client.get_job_set("../../v1/motions?x=1")
    await client.aclose()

    raw_path = seen[0].url.raw_path
    assert raw_path.startswith(b"/v1/job-sets/")
    assert raw_path.count(b"/") == 3
    assert b"?" not in raw_path
    assert seen[0].url.query == b""


@pytest.mark.anyio
@pytest.mark.parametrize("put_status", [401, 403, 500])
async def test_storage_put_rejection_is_submission_failure(put_status) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(
                200,
                json={"public_url": "https://cdn.test/a.jpg", "upload_url": "https://s3.test/put"},
            )
        return httpx.Response(put_status, text="Request has expired")

    client = _client(handler)
    with pytest.raises(ProviderSubmissionError) as exc:
        await client.upload_image(b"x", ImageFormat.jpeg)
    await client.aclose()
    assert not isinstance(exc.value, ProviderAuthError)
