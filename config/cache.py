# config/cache.py
import logging
from typing import Optional
from redis.asyncio import Redis, from_url
from redis.exceptions import RedisError
from config.settings import settings

logger = logging.getLogger(__name__)

_client: Optional[Redis] = None


async def get_redis() -> Redis:
    """Shared Redis handle used by the rate limiter and the motion cache."""
    global _client
    if _client is None:
        _client = from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=False,  # repositories decode their own payloads
            socket_keepalive=True,
            health_check_interval=30,
        )
        # Fail fast on startup if Redis is unreachable.
        await _client.ping()
        logger.info("redis.connected")
    return _client


async def redis_healthy() -> bool:
    """Liveness probe for /healthz; never raises."""
    if _client is None:
        return False
    try:
        return bool(await _client.ping())
    except RedisError as e:
        logger.warning("redis.ping.error err=%s", type(e).__name__)
        return False


async def close_redis() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
        logger.info("redis.closed")
