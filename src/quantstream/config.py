"""
Central configuration for quantstream.

All settings are loaded from environment variables with sensible defaults.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from quantstream.models.enums import MovingAverageType


class Settings(BaseSettings):
    """Indicator defaults loaded from environment variables."""

    # --- Bollinger Bands Defaults ---
    bollinger_period: int = Field(default=20, gt=0)
    bollinger_std_period: int | None = Field(default=None, gt=0)  # None = same as period
    bollinger_k: float = 2.0
    moving_average_type: MovingAverageType = MovingAverageType.SIMPLE

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


# Singleton settings instance
settings = Settings()
