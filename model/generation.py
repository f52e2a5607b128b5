from dataclasses import dataclass
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from model.job import GenerationStatus, ImageFormat, QualityTier, Theme
from util.enums import ErrorKind


@dataclass(frozen=True)
class RawUpload:
    """What the HTTP layer hands over: bytes plus declared metadata, unchecked."""

    data: Optional[bytes]
    mime_type: Optional[str]
    # Declared size; lets oversized uploads be rejected without reading them
    size: Optional[int] = None

    @property
    def byte_length(self) -> int:
        if self.size is not None:
            return self.size
        return len(self.data) if self.data else 0


class GenerationParams(BaseModel):
    prompt: Optional[str] = None
    motion_id: Optional[str] = None
    strength: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    quality: QualityTier = QualityTier.turbo
    theme: Theme = Theme.dinosaurs


class GenerationRequest(BaseModel):
    """Validated, immutable input for one submission."""

    model_config = ConfigDict(frozen=True)

    image_bytes: bytes = Field(repr=False, min_length=1)
    image_format: ImageFormat
    prompt: str = Field(min_length=1)
    motion_id: Optional[str] = None
    strength: float = Field(default=0.8, ge=0.0, le=1.0)
    quality: QualityTier = QualityTier.turbo


class GenerationResult(BaseModel):
    """Derived per status query from the current job-set snapshot; never stored."""

    model_config = ConfigDict(frozen=True)

    success: bool
    jobSetId: str
    status: GenerationStatus
    videoUrl: Optional[str] = None
    previewUrl: Optional[str] = None
    error: Optional[str] = None
    errorKind: Optional[ErrorKind] = None
