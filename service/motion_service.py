# service/motion_service.py
import logging
from typing import List, Optional
from redis.exceptions import RedisError
from core.higgsfield_client import HiggsfieldClient, get_client
from model.api import Motion
from repository.motion_repository import MotionRepository
from util.functions import non_empty_str
from util.types import RawMotion

logger = logging.getLogger(__name__)


def _to_motion(raw: RawMotion) -> Optional[Motion]:
    motion_id = non_empty_str(raw.get("id"))
    if motion_id is None:
        return None
    return Motion(
        id=motion_id,
        name=non_empty_str(raw.get("name")) or motion_id,
        description=non_empty_str(raw.get("description")),
        preview_url=non_empty_str(raw.get("preview_url")),
    )


class MotionService:
    """
    Motion presets, read-through cached. A cache outage degrades to a direct
    provider call rather than failing the request.
    """

    def __init__(
        self,
        cache: MotionRepository,
        client: Optional[HiggsfieldClient] = None,
    ) -> None:
        self._cache = cache
        self._client = client or get_client()

    async def list_motions(self) -> List[Motion]:
        try:
            cached = await self._cache.get_all()
        except RedisError as e:
            logger.warning("motions.cache.read_error err=%s", type(e).__name__)
            cached = None
        if cached is not None:
            logger.debug("motions.cache.hit count=%d", len(cached))
            return cached

        raw = await self._client.list_motions()
        motions = [m for m in (_to_motion(r) for r in raw) if m is not None]
        logger.info("motions.fetched count=%d dropped=%d", len(motions), len(raw) - len(motions))

        try:
            await self._cache.put_all(motions)
        except RedisError as e:
            logger.warning("motions.cache.write_error err=%s", type(e).__name__)
        return motions
