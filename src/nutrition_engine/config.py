"""Engine configuration."""

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_engine.domain.nutrition import DietaryThresholds
from nutrition_engine.domain.queries import SORT_KEYS, SORT_NAME_ASC

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    suggestion_limit: int = Field(default=10, ge=0)
    default_sort: str = SORT_NAME_ASC
    high_protein_threshold: float = 15
    low_carb_threshold: float = 10
    low_calorie_threshold: float = 50
    high_fiber_threshold: float = 5
    catalog_debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("default_sort")
    @classmethod
    def _known_sort(cls, value: str) -> str:
        if value not in SORT_KEYS:
            msg = f"Unsupported sort key: {value}"
            raise ValueError(msg)
        return value

    def dietary_thresholds(self) -> DietaryThresholds:
        """Return the dietary flag thresholds as a domain value."""
        return DietaryThresholds(
            high_protein=self.high_protein_threshold,
            low_carb=self.low_carb_threshold,
            low_calorie=self.low_calorie_threshold,
            high_fiber=self.high_fiber_threshold,
        )
