# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorKind(str, Enum):
    """Failure taxonomy of a single generation request."""

    MISSING_FILE = "missing_file"
    TOO_LARGE = "too_large"
    UNSUPPORTED_TYPE = "unsupported_type"
    MISSING_JOB_ID = "missing_job_id"
    PROVIDER_AUTH = "provider_auth"
    PROVIDER_QUOTA = "provider_quota"
    PROVIDER_SUBMISSION = "provider_submission"
    PROVIDER_JOB_FAILED = "provider_job_failed"
    POLL_TIMEOUT = "poll_timeout"
    PROVIDER_MALFORMED = "provider_malformed"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    MISSING_FILE = ErrorInfo("Image file is required", status.HTTP_400_BAD_REQUEST)
    TOO_LARGE = ErrorInfo(
        "File size exceeds {max_mb}MB limit",
        status.HTTP_413_CONTENT_TOO_LARGE,
    )
    UNSUPPORTED_TYPE = ErrorInfo(
        "Invalid file type", status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    )
    MISSING_JOB_ID = ErrorInfo("Job ID is required", status.HTTP_400_BAD_REQUEST)
    PROVIDER_AUTH = ErrorInfo("Authentication failed", status.HTTP_401_UNAUTHORIZED)
    PROVIDER_QUOTA = ErrorInfo("Insufficient credits", status.HTTP_402_PAYMENT_REQUIRED)
    PROVIDER_SUBMISSION = ErrorInfo(
        "Failed to generate video", status.HTTP_502_BAD_GATEWAY
    )
    PROVIDER_MALFORMED = ErrorInfo("No results available", status.HTTP_502_BAD_GATEWAY)
    POLL_TIMEOUT = ErrorInfo(
        "Video generation timed out", status.HTTP_504_GATEWAY_TIMEOUT
    )
    STATUS_CHECK_FAILED = ErrorInfo(
        "Failed to check job status", status.HTTP_502_BAD_GATEWAY
    )
    MOTIONS_FAILED = ErrorInfo("Failed to fetch motions", status.HTTP_502_BAD_GATEWAY)
