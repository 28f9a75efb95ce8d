"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class IndicatorSettings(BaseModel):
    """Indicator periods and signal thresholds."""

    rsi_period: int = Field(default=14, ge=1)
    macd_fast: int = Field(default=12, ge=1)
    macd_slow: int = Field(default=26, ge=1)
    macd_signal: int = Field(default=9, ge=1)
    bollinger_period: int = Field(default=20, ge=1)
    bollinger_std_dev: float = Field(default=2.0, gt=0)

    # RSI badge thresholds
    rsi_overbought: float = Field(default=70.0, ge=0, le=100)
    rsi_oversold: float = Field(default=30.0, ge=0, le=100)

    @model_validator(mode="after")
    def check_ordering(self) -> "IndicatorSettings":
        if self.macd_fast >= self.macd_slow:
            raise ValueError(
                f"macd_fast ({self.macd_fast}) must be below macd_slow ({self.macd_slow})"
            )
        if self.rsi_oversold >= self.rsi_overbought:
            raise ValueError(
                f"rsi_oversold ({self.rsi_oversold}) must be below "
                f"rsi_overbought ({self.rsi_overbought})"
            )
        return self


class Settings(BaseSettings):
    """Application settings from environment variables.

    Env var examples:
        STOCKDASH_LOG_LEVEL=DEBUG
        STOCKDASH_INDICATORS__RSI_PERIOD=21
    """

    model_config = SettingsConfigDict(
        env_prefix="STOCKDASH_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "StockDash"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"

    # Logging
    log_level: str = "INFO"

    # Indicator engine
    indicators: IndicatorSettings = IndicatorSettings()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v}"
            )
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
