# core/job_state.py
"""
Classification of a provider job-set snapshot.

The provider returns partially-populated objects while work is in flight, so
nothing here trusts a fixed shape: every field is checked for presence before
use and the outcome is one of four explicit states.

Constraint: job[0] is treated as the representative job of a set. The provider
documents no aggregation policy for sets with more than one job, so success
URLs always come from the first job.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union
from model.generation import GenerationResult
from util.constants import JOB_FAILED_FALLBACK, NO_RESULTS_MESSAGE
from util.enums import ErrorKind
from util.errors import ProviderMalformedError
from util.functions import dig, non_empty_str


@dataclass(frozen=True)
class Processing:
    pass


@dataclass(frozen=True)
class Completed:
    video_url: str
    preview_url: str


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Malformed:
    reason: str


JobSetState = Union[Processing, Completed, Failed, Malformed]


def _jobs_of(job_set: Any) -> Sequence[Mapping[str, Any]]:
    jobs = job_set.get("jobs") if isinstance(job_set, Mapping) else None
    if not isinstance(jobs, (list, tuple)):
        return []
    return [j for j in jobs if isinstance(j, Mapping)]


def _status(job: Mapping[str, Any]) -> str:
    return str(job.get("status") or "").lower()


def classify_job_set(job_set: Any) -> JobSetState:
    """
    Done iff every job is completed (success from job[0]) or any job failed.
    Anything else, including an empty job list, is still processing.
    """
    jobs = _jobs_of(job_set)
    if not jobs:
        return Processing()

    if all(_status(j) == "completed" for j in jobs):
        first = jobs[0]
        if not isinstance(first.get("results"), Mapping):
            return Malformed(NO_RESULTS_MESSAGE)
        video_url = non_empty_str(dig(first, "results", "raw", "url"))
        preview_url = non_empty_str(dig(first, "results", "min", "url"))
        if video_url is None or preview_url is None:
            return Malformed(NO_RESULTS_MESSAGE)
        return Completed(video_url=video_url, preview_url=preview_url)

    failed = next((j for j in jobs if _status(j) == "failed"), None)
    if failed is not None:
        return Failed(non_empty_str(failed.get("error")) or JOB_FAILED_FALLBACK)

    return Processing()


def is_terminal(state: JobSetState) -> bool:
    return not isinstance(state, Processing)


def to_result(job_set_id: str, state: JobSetState) -> GenerationResult:
    if isinstance(state, Completed):
        return GenerationResult(
            success=True,
            jobSetId=job_set_id,
            status="completed",
            videoUrl=state.video_url,
            previewUrl=state.preview_url,
        )
    if isinstance(state, Failed):
        return GenerationResult(
            success=False,
            jobSetId=job_set_id,
            status="failed",
            error=state.message,
            errorKind=ErrorKind.PROVIDER_JOB_FAILED,
        )
    if isinstance(state, Malformed):
        raise ProviderMalformedError(state.reason)
    return GenerationResult(success=False, jobSetId=job_set_id, status="processing")
