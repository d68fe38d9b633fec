from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ─── App ──────────────────────────────
    APP_NAME: str = "varshaphala-engine"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]
    DEFAULT_LANGUAGE: str = "en"

    # ─── Ephemeris ────────────────────────
    EPHEMERIS_PATH: Optional[str] = None
    AYANAMSA: str = "lahiri"

    # ─── Solar return ─────────────────────
    SOLAR_RETURN_TOLERANCE_DEG: float = 1e-4
    SOLAR_RETURN_MAX_ITERATIONS: int = 100
    SOLAR_RETURN_BRACKET_DAYS: float = 5.0

    # ─── Components ───────────────────────
    SEPARATING_ORB_FACTOR: float = 0.75
    MUDDA_DEPTH: int = 2
    MUDDA_YEAR_DAYS: Optional[int] = None

    # ─── Execution ────────────────────────
    MAX_WORKERS: int = 4
    CACHE_ENABLED: bool = True
    CACHE_SIZE: int = 128

    class Config:
        env_prefix = "VARSHAPHALA_"
        env_file = ".env"
        case_sensitive = True


settings = Settings()


@lru_cache()
def get_settings() -> Settings:
    return settings
