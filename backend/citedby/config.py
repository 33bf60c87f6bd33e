"""
Configuration management for GetCitedBy
Environment-based settings plus the tunable scoring tables
"""

from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "getcitedby"
    APP_ENV: str = "development"  # development, staging, production
    DEBUG: bool = False
    API_VERSION: str = "v1"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    WORKERS: int = 4

    # LLM provider (calibration script only)
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_DEFAULT_MODEL: str = "gpt-4o-mini"

    # LLM Execution Settings
    LLM_DEFAULT_TEMPERATURE: float = 0.3
    LLM_DEFAULT_MAX_TOKENS: int = 800
    LLM_REQUEST_TIMEOUT: int = 60  # seconds

    # Calibration
    CALIBRATION_MIN_ACCURACY: float = 80.0  # percent
    CALIBRATION_LOCAL_WEIGHT: float = 0.6  # direct query gets the remainder
    CALIBRATION_CONCURRENCY: int = 4

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return str(v).upper()

    @field_validator("CALIBRATION_LOCAL_WEIGHT")
    @classmethod
    def check_local_weight(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("CALIBRATION_LOCAL_WEIGHT must be between 0 and 1")
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Cached settings loader"""
    return Settings()


# Scoring weights configuration (maximum points per component)
VISIBILITY_SCORE_WEIGHTS = {
    "exact_mention": 40,
    "partial_mention": 25,
    "direct_query_position": 15,
    "real_info": 20,
    "generic_info": 5,
    "positive_sentiment": 15,
    "neutral_sentiment": 10,
    "negative_sentiment": 0,
    "unknown_sentiment": 5,
}

# Position in a local-search list -> points; anything further down gets the floor
POSITION_LADDER = {
    1: 25,
    2: 20,
    3: 15,
    4: 10,
    5: 10,
}
POSITION_FLOOR_SCORE = 5

# Calibration-tuned matching constants. Values were tuned empirically against
# the calibration dataset; changing them means re-running the calibration.
MENTION_PROXIMITY_WINDOW = 50  # max chars between two significant name words
PARTIAL_MATCH_RATIO = 0.6  # share of significant words required for long names
MIN_NAME_WORD_LENGTH = 3  # words shorter than this are ignored when matching
MAX_ESTIMATED_POSITION = 5  # cap for positions inferred from line numbers
SENTIMENT_CONTEXT_WINDOW = 100  # chars before/after the mention
INFO_MIN_LENGTH = 200  # shorter responses without a service list are filler
INFO_MIN_LIST_ITEMS = 3  # comma-separated items that count as a service list
NAP_SIMILARITY_THRESHOLD = 0.8  # Dice coefficient for name/address matches

# Citation status transitions persisted by the NAP check caller
CITATION_STATUS_THRESHOLDS = {
    "conflict_below": 70,
    "verified_from": 90,
}

# Overall-score bands (lower bound, rating, color, description)
SCORE_RATING_BANDS = [
    (80, "excellent", "green", "Your business is highly visible and well-recommended by AI assistants."),
    (60, "good", "lime", "Your business has good AI visibility with room for improvement."),
    (40, "fair", "amber", "Your business has partial AI visibility. Optimization recommended."),
    (20, "poor", "orange", "Your business has limited AI visibility. Action needed."),
    (0, "invisible", "red", "Your business is not visible to AI assistants. Immediate action required."),
]
