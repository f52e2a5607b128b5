# controller/catalog_controller.py
from typing import List
from fastapi import APIRouter, Depends
from controller.controller_dependencies import app_error_for, get_motion_service
from model.api import Motion
from model.job import QualityTierInfo
from service.generation_service import GenerationService
from service.motion_service import MotionService
from util.constants import InternalURIs
from util.enums import ErrorMessage
from util.errors import GenerationError

catalog_router = APIRouter()


@catalog_router.get(InternalURIs.MOTIONS, response_model=List[Motion])
async def list_motions(
    service: MotionService = Depends(get_motion_service),
) -> List[Motion]:
    try:
        return await service.list_motions()
    except GenerationError as e:
        raise app_error_for(e, ErrorMessage.MOTIONS_FAILED) from e


@catalog_router.get(InternalURIs.MODELS, response_model=List[QualityTierInfo])
async def list_models() -> List[QualityTierInfo]:
    return GenerationService.quality_tiers()
