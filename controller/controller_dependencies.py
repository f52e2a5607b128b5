# controller/controller_dependencies.py
import logging
from typing import Optional
from fastapi import File, UploadFile
from config.settings import settings
from model.generation import RawUpload
from repository.motion_repository import MotionRepository
from service.generation_service import GenerationService
from service.motion_service import MotionService
from util.enums import ErrorKind, ErrorMessage
from util.errors import AppError, GenerationError

logger = logging.getLogger(__name__)

_KIND_TO_MESSAGE = {
    ErrorKind.MISSING_FILE: ErrorMessage.MISSING_FILE,
    ErrorKind.TOO_LARGE: ErrorMessage.TOO_LARGE,
    ErrorKind.UNSUPPORTED_TYPE: ErrorMessage.UNSUPPORTED_TYPE,
    ErrorKind.PROVIDER_AUTH: ErrorMessage.PROVIDER_AUTH,
    ErrorKind.PROVIDER_QUOTA: ErrorMessage.PROVIDER_QUOTA,
    ErrorKind.PROVIDER_SUBMISSION: ErrorMessage.PROVIDER_SUBMISSION,
    ErrorKind.PROVIDER_MALFORMED: ErrorMessage.PROVIDER_MALFORMED,
    ErrorKind.POLL_TIMEOUT: ErrorMessage.POLL_TIMEOUT,
}


def get_generation_service() -> GenerationService:
    return GenerationService()


def get_motion_service() -> MotionService:
    return MotionService(MotionRepository())


def app_error_for(
    err: GenerationError, fallback: ErrorMessage = ErrorMessage.PROVIDER_SUBMISSION
) -> AppError:
    """Translate a generation failure into the JSON error envelope."""
    message = _KIND_TO_MESSAGE.get(err.kind, fallback)
    # Submission failures while reading status are reported as status failures
    if err.kind == ErrorKind.PROVIDER_SUBMISSION:
        message = fallback
    return AppError.of(
        message, err.kind, details=err.message, max_mb=settings.MAX_FILE_MB
    )


async def read_bounded_upload(image: Optional[UploadFile] = File(None)) -> RawUpload:
    """
    Read at most MAX_FILE_MB + 1 bytes; oversized files whose size is already
    known are not read at all. The validation gate decides on the result.
    """
    if image is None or not image.filename:
        return RawUpload(data=None, mime_type=None)

    max_bytes = settings.max_file_bytes
    if image.size is not None and image.size > max_bytes:
        logger.info("upload.oversized bytes=%d", image.size)
        return RawUpload(data=None, mime_type=image.content_type, size=image.size)

    data = await image.read(max_bytes + 1)
    await image.seek(0)
    return RawUpload(data=data, mime_type=image.content_type)
