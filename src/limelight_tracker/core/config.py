"""Application configuration via Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TelemetrySettings(BaseSettings):
    """Telemetry table and field names published by the vision sensor."""

    model_config = SettingsConfigDict(env_prefix="LIMELIGHT_")

    table: str = "limelight"
    bot_pose_key: str = "botpose"
    pipeline_key: str = "pipeline"
    led_mode_key: str = "ledMode"
    has_target_key: str = "tv"
    horizontal_offset_key: str = "tx"
    vertical_offset_key: str = "ty"
    skew_key: str = "ts"
    area_key: str = "ta"
    target_id_key: str = "tid"


class DistanceSettings(BaseSettings):
    """Piecewise forward-distance model.

    Heights are measured from the camera lens to each target row. Offsets are
    the inclusive upper bound, in degrees, of the vertical angle at which the
    matching target row is assumed to be in view.
    """

    model_config = SettingsConfigDict(env_prefix="DISTANCE_")

    height_low: float = 0.31
    height_med: float = 0.62
    height_high: float = 0.92
    max_offset_low: float = 10.0
    max_offset_med: float = 20.0
    max_offset_high: float = 30.0

    @model_validator(mode="after")
    def _check_bands(self) -> "DistanceSettings":
        if not 0.0 < self.max_offset_low < self.max_offset_med < self.max_offset_high:
            raise ValueError(
                "distance bands must satisfy 0 < max_offset_low < max_offset_med < max_offset_high"
            )
        return self


class SelfTestSettings(BaseSettings):
    """Hardware self-test routine."""

    model_config = SettingsConfigDict(env_prefix="SELF_TEST_")

    blink_duration_s: float = Field(default=2.0, ge=0.0)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    file: str | None = None
    repeat_interval_s: float = Field(default=5.0, ge=0.0)


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
    distance: DistanceSettings = Field(default_factory=DistanceSettings)
    self_test: SelfTestSettings = Field(default_factory=SelfTestSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings instance."""
    return Settings()
