# core/polling.py
import asyncio
import logging
from typing import Awaitable, Callable, Optional, Protocol, TypeVar
from core.job_state import JobSetState, classify_job_set, is_terminal, to_result
from model.generation import GenerationResult
from util.errors import PollTimeoutError
from util.types import RawJobSet

T = TypeVar("T")
logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class AttemptsExhausted(Exception):
    def __init__(self, attempts: int, last: object) -> None:
        super().__init__(f"no terminal state after {attempts} attempts")
        self.attempts = attempts
        self.last = last


async def retry_fixed_interval(
    fetch: Callable[[], Awaitable[T]],
    is_done: Callable[[T], bool],
    *,
    max_attempts: int,
    interval_s: float,
    sleep: Sleep = asyncio.sleep,
) -> T:
    """
    Call `fetch` until `is_done` accepts its value, at most `max_attempts` times.

    Fixed interval, no backoff, no jitter. Sleeps only between attempts, so the
    worst case is (max_attempts - 1) * interval_s of waiting. Errors raised by
    `fetch` propagate immediately. Raises AttemptsExhausted otherwise.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    last: Optional[T] = None
    for attempt in range(1, max_attempts + 1):
        last = await fetch()
        if is_done(last):
            return last
        if attempt < max_attempts:
            await sleep(interval_s)
    raise AttemptsExhausted(max_attempts, last)


class JobSetSource(Protocol):
    async def get_job_set(self, job_set_id: str) -> RawJobSet: ...


class JobStatusPoller:
    """Tracks one job set at a time; holds no per-job state between calls."""

    def __init__(
        self,
        client: JobSetSource,
        *,
        max_attempts: int = 60,
        interval_ms: int = 3000,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._client = client
        self._max_attempts = max_attempts
        self._interval_s = interval_ms / 1000.0
        self._sleep = sleep

    async def _state(self, job_set_id: str) -> JobSetState:
        return classify_job_set(await self._client.get_job_set(job_set_id))

    async def probe(self, job_set_id: str) -> GenerationResult:
        """Single non-blocking status check."""
        state = await self._state(job_set_id)
        logger.debug("poll.probe job_set=%s state=%s", job_set_id, type(state).__name__)
        return to_result(job_set_id, state)

    async def poll(self, job_set_id: str) -> GenerationResult:
        """Wait for a terminal state; raises PollTimeoutError when attempts run out."""
        attempts = 0

        async def fetch() -> JobSetState:
            nonlocal attempts
            attempts += 1
            state = await self._state(job_set_id)
            logger.info(
                "poll.attempt job_set=%s attempt=%d/%d state=%s",
                job_set_id,
                attempts,
                self._max_attempts,
                type(state).__name__,
            )
            return state

        try:
            state = await retry_fixed_interval(
                fetch,
                is_terminal,
                max_attempts=self._max_attempts,
                interval_s=self._interval_s,
                sleep=self._sleep,
            )
        except AttemptsExhausted as e:
            total_s = int(self._max_attempts * self._interval_s)
            logger.warning("poll.timeout job_set=%s attempts=%d", job_set_id, e.attempts)
            raise PollTimeoutError(
                f"Video generation timed out after {total_s} seconds"
            ) from e
        return to_result(job_set_id, state)
