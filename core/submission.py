# core/submission.py
import logging
from typing import Any, Dict, Final, Protocol
from model.generation import GenerationRequest
from model.job import ImageFormat, QualityTier
from util.errors import ProviderSubmissionError
from util.functions import non_empty_str
from util.timing import timed
from util.types import RawJobSet

logger = logging.getLogger(__name__)

# Closed mapping; a tier missing here is a programming error, not a fallback.
MODEL_IDS: Final[Dict[QualityTier, str]] = {
    QualityTier.lite: "dop-lite",
    QualityTier.standard: "dop-preview",
    QualityTier.turbo: "dop-turbo",
}


class SubmitClient(Protocol):
    async def upload_image(self, data: bytes, image_format: ImageFormat) -> str: ...

    async def create_job(self, params: Dict[str, Any]) -> RawJobSet: ...


def build_payload(request: GenerationRequest, image_url: str) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "model": MODEL_IDS[request.quality],
        "prompt": request.prompt,
        "input_images": [{"type": "image_url", "image_url": image_url}],
        "enhance_prompt": True,
    }
    if request.motion_id:
        params["motions"] = [{"id": request.motion_id, "strength": request.strength}]
    return params


def _submitted_id(job_set: RawJobSet) -> str:
    """
    Accept only a fully submitted set: an id, at least one job, none failed.
    The provider may hand back a half-created set; that is a hard error here.
    """
    job_set_id = non_empty_str(job_set.get("id"))
    jobs = job_set.get("jobs")
    if job_set_id is None or not isinstance(jobs, list) or not jobs:
        raise ProviderSubmissionError("Job set was not submitted")
    if any(isinstance(j, dict) and j.get("status") == "failed" for j in jobs):
        raise ProviderSubmissionError("Job set was rejected on submission")
    return job_set_id


async def submit(client: SubmitClient, request: GenerationRequest) -> str:
    """
    Upload + create job, single shot. Returns the job-set id without waiting
    for the video; progress is tracked separately by polling.
    """
    logger.info(
        "submit.start bytes=%d fmt=%s quality=%s motion=%s prompt_len=%d",
        len(request.image_bytes),
        request.image_format.value,
        request.quality.value,
        bool(request.motion_id),
        len(request.prompt),
    )
    with timed(logger, "submit.total") as t:
        image_url = await client.upload_image(request.image_bytes, request.image_format)
        params = build_payload(request, image_url)
        job_set = await client.create_job(params)
        job_set_id = _submitted_id(job_set)
    logger.info(
        "submit.ok job_set=%s model=%s ms=%d", job_set_id, params["model"], t["ms"]
    )
    return job_set_id
