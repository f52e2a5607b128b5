# core/validation.py
from typing import Optional
from model.job import ImageFormat
from util.constants import ALLOWED_MIME_TYPES, MIME_TO_FORMAT
from util.enums import ErrorKind, ErrorMessage
from util.errors import UploadRejected


def validate_upload(
    byte_length: Optional[int], mime_type: Optional[str], max_bytes: int
) -> ImageFormat:
    """
    Pure gate run before any bytes leave the process.
    Returns the canonical image format or raises UploadRejected with the reason.
    Order matters: missing, then size, then type.
    """
    if not byte_length or byte_length <= 0:
        raise UploadRejected(ErrorKind.MISSING_FILE, ErrorMessage.MISSING_FILE.value.message)

    if byte_length > max_bytes:
        max_mb = max_bytes / 1024 / 1024
        raise UploadRejected(
            ErrorKind.TOO_LARGE,
            ErrorMessage.TOO_LARGE.value.message.format(max_mb=f"{max_mb:g}"),
        )

    mime = (mime_type or "").split(";")[0].strip().lower()
    if mime not in MIME_TO_FORMAT:
        raise UploadRejected(
            ErrorKind.UNSUPPORTED_TYPE,
            f"Invalid file type. Allowed types: {', '.join(ALLOWED_MIME_TYPES)}",
        )

    return ImageFormat(MIME_TO_FORMAT[mime])
