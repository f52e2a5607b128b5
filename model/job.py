from enum import Enum
from typing import Literal
from pydantic import BaseModel

# Client-facing status of a job set; "processing" covers queued and mixed sets.
GenerationStatus = Literal["processing", "completed", "failed"]


class QualityTier(str, Enum):
    lite = "lite"
    standard = "standard"
    turbo = "turbo"


class Theme(str, Enum):
    dinosaurs = "dinosaurs"
    zombies = "zombies"


class ImageFormat(str, Enum):
    jpeg = "jpeg"
    png = "png"
    webp = "webp"


class QualityTierInfo(BaseModel):
    id: QualityTier
    name: str
    description: str
    cost: str
