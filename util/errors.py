# util/errors.py
from typing import Any, Optional
from fastapi import HTTPException, status
from util.enums import ErrorKind, ErrorMessage


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & JSON envelope.
    def __init__(
        self,
        message: str,
        http_status: int = status.HTTP_400_BAD_REQUEST,
        kind: Optional[ErrorKind] = None,
        details: Optional[str] = None,
    ) -> None:
        body: dict[str, Any] = {"ok": False, "message": message}
        if kind is not None:
            body["error"] = kind.value
        if details:
            body["details"] = details
        super().__init__(status_code=http_status, detail=body)
        self.kind = kind

    @classmethod
    def of(
        cls, error: ErrorMessage, kind: ErrorKind, details: Optional[str] = None, **fmt
    ) -> "AppError":
        info = error.value
        return cls(info.message.format(**fmt), info.http_status, kind, details)


class GenerationError(Exception):
    """Base for every failure scoped to one generation request."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UploadRejected(GenerationError):
    # Raised before any network call; reason is one of the input-validation kinds.
    def __init__(self, reason: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = reason


class ProviderError(GenerationError):
    kind = ErrorKind.PROVIDER_SUBMISSION


class ProviderAuthError(ProviderError):
    kind = ErrorKind.PROVIDER_AUTH


class ProviderQuotaError(ProviderError):
    kind = ErrorKind.PROVIDER_QUOTA


class ProviderSubmissionError(ProviderError):
    kind = ErrorKind.PROVIDER_SUBMISSION


class ProviderMalformedError(ProviderError):
    kind = ErrorKind.PROVIDER_MALFORMED


class PollTimeoutError(GenerationError):
    # Distinct from a provider-reported job failure: resubmitting may still succeed.
    kind = ErrorKind.POLL_TIMEOUT
