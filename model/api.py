from typing import Optional
from pydantic import BaseModel, Field


class GenerateResponse(BaseModel):
    jobSetId: str


class Motion(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    preview_url: Optional[str] = None


class HealthResponse(BaseModel):
    ok: bool
    redis: bool = Field(default=False)
