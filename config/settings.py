# config/settings.py
import os
import sys
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.enums import Environment
import logging


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()

_log = logging.getLogger("config.settings")


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(..., validation_alias="APP_ENV")
    REDIS_URL: str = Field(..., validation_alias="REDIS_URL")

    # CORS & Limits
    ALLOWED_ORIGIN: str = Field(..., validation_alias="ALLOWED_ORIGIN")
    RATE_LIMIT_TIMES: int = Field(default=5, validation_alias="RATE_LIMIT_TIMES")
    RATE_LIMIT_SECONDS: int = Field(default=60, validation_alias="RATE_LIMIT_SECONDS")
    MAX_FILE_MB: int = Field(default=10, validation_alias="MAX_FILE_MB")
    TRUST_PROXY: bool = Field(default=False, validation_alias="TRUST_PROXY")

    # Higgsfield credentials are static secrets, never user supplied.
    HF_API_KEY: str = Field(..., min_length=1, validation_alias="HF_API_KEY")
    HF_SECRET: str = Field(..., min_length=1, validation_alias="HF_SECRET")
    HF_API_URL: str = Field(
        default="https://platform.higgsfield.ai", validation_alias="HF_API_URL"
    )
    HF_TIMEOUT_SECONDS: float = Field(default=60.0, validation_alias="HF_TIMEOUT_SECONDS")

    # Job polling: 60 x 3s = 3 minutes ceiling
    POLL_MAX_ATTEMPTS: int = Field(default=60, ge=1, validation_alias="POLL_MAX_ATTEMPTS")
    POLL_INTERVAL_MS: int = Field(default=3000, ge=0, validation_alias="POLL_INTERVAL_MS")

    DEFAULT_STRENGTH: float = Field(default=0.8, ge=0.0, le=1.0)
    MOTIONS_CACHE_TTL_SECONDS: int = Field(
        default=3600, validation_alias="MOTIONS_CACHE_TTL_SECONDS"
    )

    # Logging knobs
    LOGGER_NAME: str = "dino-cam"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=50 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")

    # Prompts
    DINOSAURS_PROMPT: str = (
        "Cinematic shot where a group of realistic dinosaurs enter the room toward the camera, "
        "Jurassic Park style, dramatic lighting, epic atmosphere"
    )
    ZOMBIES_PROMPT: str = (
        "Horror scene where a horde of realistic zombies enter the room toward the camera, "
        "zombie apocalypse style, dark atmospheric lighting, terrifying and dramatic"
    )

    @property
    def max_file_bytes(self) -> int:
        return self.MAX_FILE_MB * 1024 * 1024


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    print(
        "Set HF_API_KEY and HF_SECRET in your environment or .env file.",
        file=sys.stderr,
    )
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
