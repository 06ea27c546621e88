from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum
from typing import Optional

from hangul_corrector.core.domain.models import SpeechLevel

class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"

class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "hangul-corrector"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "hangul-corrector"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Correction Defaults ---
    DEFAULT_SPEECH_LEVEL: SpeechLevel = SpeechLevel.PLAIN
    # Bumped whenever a rule table changes; external caches key on it.
    RULESET_VERSION: str = "v4"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
