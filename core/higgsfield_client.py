# core/higgsfield_client.py
import logging
from typing import Any, Dict, List, Optional
import httpx
from urllib.parse import quote
from fastapi import status
from config.settings import settings
from model.job import ImageFormat
from util.constants import FORMAT_TO_MIME, ExternalURIs
from util.errors import (
    ProviderAuthError,
    ProviderMalformedError,
    ProviderQuotaError,
    ProviderSubmissionError,
)
from util.functions import clip
from util.timing import timed
from util.types import RawJobSet, RawMotion

logger = logging.getLogger(__name__)


def _error_detail(res: httpx.Response) -> str:
    try:
        body = res.json()
    except ValueError:
        return res.text[:200]
    if isinstance(body, dict):
        for key in ("detail", "message", "error"):
            if body.get(key):
                return str(body[key])
    return str(body)[:200]


def _raise_for_provider_status(res: httpx.Response, op: str) -> None:
    """Map non-2xx provider responses onto the error taxonomy."""
    if res.status_code // 100 == 2:
        return
    detail = _error_detail(res)
    logger.warning("hf.%s.bad_status status=%d detail=%s", op, res.status_code, clip(detail, 120))
    lowered = detail.lower()

    if res.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN) or (
        "authentication" in lowered or "credentials" in lowered
    ):
        raise ProviderAuthError(detail or "Authentication failed")
    if res.status_code == status.HTTP_402_PAYMENT_REQUIRED or "credits" in lowered:
        raise ProviderQuotaError(detail or "Insufficient credits")
    raise ProviderSubmissionError(f"{op} failed with status {res.status_code}: {detail}")


class HiggsfieldClient:
    """
    Thin async wrapper over the Higgsfield platform API.
    Only the four calls the generation flow needs; no embedded polling.
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        base_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "hf-api-key": api_key,
                "hf-secret": api_secret,
                "accept": "application/json",
            },
            timeout=httpx.Timeout(timeout, connect=10.0),
            transport=transport,
        )

    async def _send(self, op: str, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            res = await self._http.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error("hf.%s.request_error err=%s", op, type(e).__name__)
            raise ProviderSubmissionError(f"{op} request failed: {type(e).__name__}") from e
        _raise_for_provider_status(res, op)
        return res

    @staticmethod
    def _json(res: httpx.Response, op: str) -> Any:
        try:
            return res.json()
        except ValueError as e:
            raise ProviderMalformedError(f"{op} returned a non-JSON body") from e

    async def upload_image(self, data: bytes, image_format: ImageFormat) -> str:
        """Upload bytes to the provider CDN; returns the public URL."""
        content_type = FORMAT_TO_MIME[image_format.value]
        with timed(logger, "hf.upload", bytes=len(data), fmt=image_format.value):
            res = await self._send(
                "upload_url",
                "POST",
                ExternalURIs.UPLOAD_URL,
                json={"content_type": content_type},
            )
            body = self._json(res, "upload_url")
            public_url = body.get("public_url") if isinstance(body, dict) else None
            upload_url = body.get("upload_url") if isinstance(body, dict) else None
            if not public_url or not upload_url:
                raise ProviderSubmissionError("Upload URL response is missing URLs")

            # Pre-signed URL: absolute, and must not carry our credential headers
            req = self._http.build_request(
                "PUT", upload_url, content=data, headers={"content-type": content_type}
            )
            del req.headers["hf-api-key"]
            del req.headers["hf-secret"]
            try:
                put = await self._http.send(req)
            except httpx.RequestError as e:
                logger.error("hf.upload.request_error err=%s", type(e).__name__)
                raise ProviderSubmissionError(f"upload request failed: {type(e).__name__}") from e
            if put.status_code // 100 != 2:
                # Storage rejections (e.g. expired signature) are not credential problems
                logger.warning("hf.upload.put_status status=%d", put.status_code)
                raise ProviderSubmissionError(f"upload failed with status {put.status_code}")

        logger.info("hf.upload.ok url=%s", clip(public_url))
        return public_url

    async def create_job(self, params: Dict[str, Any]) -> RawJobSet:
        with timed(logger, "hf.create_job", model=params.get("model")):
            res = await self._send(
                "create_job", "POST", ExternalURIs.IMAGE_TO_VIDEO, json={"params": params}
            )
        body = self._json(res, "create_job")
        if not isinstance(body, dict):
            raise ProviderSubmissionError("Job creation returned an unexpected body")
        return body  # type: ignore[return-value]

    async def get_job_set(self, job_set_id: str) -> RawJobSet:
        with timed(logger, "hf.get_job_set", job_set=job_set_id):
            # Caller-supplied id: escape so it stays a single path segment
            path = ExternalURIs.JOB_SET.format(job_set_id=quote(job_set_id, safe=""))
            res = await self._send("get_job_set", "GET", path)
        body = self._json(res, "get_job_set")
        if not isinstance(body, dict):
            raise ProviderMalformedError("Job set response is not an object")
        return body  # type: ignore[return-value]

    async def list_motions(self) -> List[RawMotion]:
        with timed(logger, "hf.list_motions"):
            res = await self._send("list_motions", "GET", ExternalURIs.MOTIONS)
        body = self._json(res, "list_motions")
        if isinstance(body, dict):
            # Some deployments wrap lists in {"items": [...]}
            body = body.get("items") or body.get("motions") or []
        if not isinstance(body, list):
            raise ProviderMalformedError("Motions response is not a list")
        return [m for m in body if isinstance(m, dict)]

    async def aclose(self) -> None:
        await self._http.aclose()


_client: Optional[HiggsfieldClient] = None


def get_client() -> HiggsfieldClient:
    """Process-wide provider handle, built on first use and reused afterwards."""
    global _client
    if _client is None:
        logger.debug("hf.client.init base=%s", settings.HF_API_URL)
        _client = HiggsfieldClient(
            api_key=settings.HF_API_KEY,
            api_secret=settings.HF_SECRET,
            base_url=settings.HF_API_URL,
            timeout=settings.HF_TIMEOUT_SECONDS,
        )
        logger.info("hf.client.ready")
    return _client


async def close_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


