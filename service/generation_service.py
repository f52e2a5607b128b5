# service/generation_service.py
import logging
from typing import List, Optional
from config.settings import settings
from core.higgsfield_client import HiggsfieldClient, get_client
from core.polling import JobStatusPoller
from core.submission import submit
from core.validation import validate_upload
from model.api import GenerateResponse
from model.generation import GenerationParams, GenerationRequest, GenerationResult, RawUpload
from model.job import QualityTier, QualityTierInfo, Theme

logger = logging.getLogger(__name__)

QUALITY_TIERS: List[QualityTierInfo] = [
    QualityTierInfo(
        id=QualityTier.lite,
        name="Lite",
        description="Fastest & most affordable (~2 credits)",
        cost="~$0.125",
    ),
    QualityTierInfo(
        id=QualityTier.turbo,
        name="Turbo",
        description="Balanced speed & quality (~6.5 credits)",
        cost="~$0.41",
    ),
    QualityTierInfo(
        id=QualityTier.standard,
        name="Preview",
        description="Higher quality preview (~9 credits)",
        cost="~$0.56",
    ),
]


def theme_prompt(theme: Theme) -> str:
    if theme == Theme.zombies:
        return settings.ZOMBIES_PROMPT
    return settings.DINOSAURS_PROMPT


class GenerationService:
    """
    Two calls for the HTTP layer: submit once, then check status as often as the
    caller likes. Nothing is remembered between calls; the provider owns job state.
    """

    def __init__(
        self,
        client: Optional[HiggsfieldClient] = None,
        poller: Optional[JobStatusPoller] = None,
    ) -> None:
        self._client = client or get_client()
        self._poller = poller or JobStatusPoller(
            self._client,
            max_attempts=settings.POLL_MAX_ATTEMPTS,
            interval_ms=settings.POLL_INTERVAL_MS,
        )

    @staticmethod
    def quality_tiers() -> List[QualityTierInfo]:
        return list(QUALITY_TIERS)

    async def start_generation(
        self, upload: RawUpload, params: GenerationParams
    ) -> GenerateResponse:
        """
        Validate then submit. Validation failures raise UploadRejected before
        the provider is contacted.
        """
        image_format = validate_upload(
            upload.byte_length, upload.mime_type, settings.max_file_bytes
        )
        request = GenerationRequest(
            image_bytes=upload.data,
            image_format=image_format,
            prompt=(params.prompt or "").strip() or theme_prompt(params.theme),
            motion_id=params.motion_id or None,
            strength=(
                params.strength if params.strength is not None else settings.DEFAULT_STRENGTH
            ),
            quality=params.quality,
        )
        try:
            job_set_id = await submit(self._client, request)
        except Exception:
            logger.error(
                "generate.submit.error theme=%s quality=%s",
                params.theme.value,
                params.quality.value,
            )
            raise
        return GenerateResponse(jobSetId=job_set_id)

    async def check_status(self, job_set_id: str) -> GenerationResult:
        logger.info("status.check job_set=%s", job_set_id)
        result = await self._poller.probe(job_set_id)
        if result.status != "processing":
            logger.info(
                "status.terminal job_set=%s status=%s", job_set_id, result.status
            )
        return result

    async def wait_for_result(self, job_set_id: str) -> GenerationResult:
        """Blocking variant for in-process callers; bounded by the poll settings."""
        return await self._poller.poll(job_set_id)
