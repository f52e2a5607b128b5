from typing import Final


class InternalURIs:
    API = "/api"
    V1 = API + "/v1"
    GENERATE = V1 + "/generate"
    JOB_STATUS = V1 + "/job-status"
    MOTIONS = V1 + "/motions"
    MODELS = V1 + "/models"


class ExternalURIs:
    # Relative to settings.HF_API_URL
    UPLOAD_URL = "/files/generate-upload-url"
    IMAGE_TO_VIDEO = "/v1/image2video/dop"
    JOB_SET = "/v1/job-sets/{job_set_id}"
    MOTIONS = "/v1/motions"


MIME_TO_FORMAT: Final[dict[str, str]] = {
    "image/jpeg": "jpeg",
    "image/jpg": "jpeg",
    "image/png": "png",
    "image/webp": "webp",
}

ALLOWED_MIME_TYPES: Final[tuple[str, ...]] = tuple(MIME_TO_FORMAT)

FORMAT_TO_MIME: Final[dict[str, str]] = {
    "jpeg": "image/jpeg",
    "png": "image/png",
    "webp": "image/webp",
}

JOB_FAILED_FALLBACK: Final[str] = "Video generation failed"
NO_RESULTS_MESSAGE: Final[str] = "No results available"
