# util/types.py
from typing import Literal, TypedDict


# Flow: Narrow types for the provider's raw JSON. Every key is optional because
# the provider returns partially-populated objects while a job is running.
ProviderJobStatus = Literal["queued", "processing", "completed", "failed"]


class RawUrl(TypedDict, total=False):
    url: str


class RawResults(TypedDict, total=False):
    raw: RawUrl
    min: RawUrl


class RawJob(TypedDict, total=False):
    id: str
    status: ProviderJobStatus
    error: str
    results: RawResults


class RawJobSet(TypedDict, total=False):
    id: str
    type: str
    jobs: list[RawJob]


class RawMotion(TypedDict, total=False):
    id: str
    name: str
    description: str
    preview_url: str
