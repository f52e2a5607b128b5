# repository/motion_repository.py
import json
import logging
from typing import List, Optional
from pydantic import ValidationError
from redis.asyncio import Redis
from config.cache import get_redis
from config.settings import settings
from model.api import Motion
from repository.namespaces import MOTIONS

logger = logging.getLogger(__name__)


class MotionRepository:
    """
    Flow:
    - Cache the provider's motion catalogue as one JSON array under a single key.
    - The catalogue is the same for every user, so it is not keyed per request.
    - Entries expire after MOTIONS_CACHE_TTL_SECONDS; a miss triggers a refetch.
    """

    def __init__(self, ttl_seconds: int = settings.MOTIONS_CACHE_TTL_SECONDS) -> None:
        self._ttl = int(ttl_seconds)

    @staticmethod
    async def _client() -> Redis:
        return await get_redis()

    @staticmethod
    def _key() -> str:
        return f"{MOTIONS}:all"

    async def get_all(self) -> Optional[List[Motion]]:
        r = await self._client()
        raw = await r.get(self._key())
        if raw is None:
            return None
        try:
            items = json.loads(raw)
            return [Motion.model_validate(m) for m in items]
        except (ValueError, TypeError, ValidationError):
            # Corrupt snapshot: treat as a miss, the next put overwrites it
            logger.warning("motions.cache.corrupt")
            return None

    async def put_all(self, motions: List[Motion]) -> None:
        r = await self._client()
        payload = json.dumps([m.model_dump(exclude_none=True) for m in motions])
        await r.set(self._key(), payload.encode("utf-8"), ex=self._ttl)
