# controller/generation_controller.py
from typing import Optional
from fastapi import APIRouter, Depends, Form, Query, status
from fastapi_limiter.depends import RateLimiter
from config.settings import settings
from controller.controller_dependencies import (
    app_error_for,
    get_generation_service,
    read_bounded_upload,
)
from model.api import GenerateResponse
from model.generation import GenerationParams, GenerationResult, RawUpload
from model.job import QualityTier, Theme
from service.generation_service import GenerationService
from util.constants import InternalURIs
from util.enums import ErrorKind, ErrorMessage
from util.errors import AppError, GenerationError

generation_router = APIRouter()

# Generation spends provider credits; status polling is not limited
generate_rate_limit = RateLimiter(
    times=settings.RATE_LIMIT_TIMES, seconds=settings.RATE_LIMIT_SECONDS
)


@generation_router.post(
    InternalURIs.GENERATE,
    response_model=GenerateResponse,
    status_code=status.HTTP_202_ACCEPTED,
    dependencies=[Depends(generate_rate_limit)],
)
async def generate(
    upload: RawUpload = Depends(read_bounded_upload),
    prompt: Optional[str] = Form(None),
    motionId: Optional[str] = Form(None),
    strength: Optional[float] = Form(None, ge=0.0, le=1.0),
    model: QualityTier = Form(QualityTier.turbo),
    theme: Theme = Form(Theme.dinosaurs),
    service: GenerationService = Depends(get_generation_service),
) -> GenerateResponse:
    params = GenerationParams(
        prompt=prompt,
        motion_id=motionId,
        strength=strength,
        quality=model,
        theme=theme,
    )
    try:
        return await service.start_generation(upload, params)
    except GenerationError as e:
        raise app_error_for(e, ErrorMessage.PROVIDER_SUBMISSION) from e


@generation_router.get(InternalURIs.JOB_STATUS, response_model=GenerationResult)
async def job_status(
    job_set_id: Optional[str] = Query(None, alias="id"),
    service: GenerationService = Depends(get_generation_service),
) -> GenerationResult:
    if not job_set_id or not job_set_id.strip():
        raise AppError.of(ErrorMessage.MISSING_JOB_ID, ErrorKind.MISSING_JOB_ID)
    try:
        return await service.check_status(job_set_id.strip())
    except GenerationError as e:
        raise app_error_for(e, ErrorMessage.STATUS_CHECK_FAILED) from e
