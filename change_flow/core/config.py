"""Application configuration management."""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Scheduler and service configuration with environment variable support.

    Every field can be overridden with a ``CHANGE_FLOW_``-prefixed
    environment variable, e.g. ``CHANGE_FLOW_STEP_THRESHOLD=10``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHANGE_FLOW_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Scheduling
    step_threshold: int = Field(default=100, ge=1, description="Ticks needed to finish one task")
    move_speed: float = Field(default=5.0, gt=0, description="Distance a completed job travels per tick")
    job_anchor_offset: float = Field(default=80.0, description="Vertical offset of a job below its worker")
    random_job_length: int = Field(default=5, ge=1)

    # Completion slots
    slot_x: float = Field(default=1250.0)
    slot_top_y: float = Field(default=680.0)
    slot_spacing: float = Field(default=80.0, gt=0)

    # Driver cadence
    max_fps: int = Field(default=60, ge=1)
    default_speed: float = Field(default=1.0, gt=0)
    autostart_driver: bool = Field(default=False)
    load_defaults_on_start: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001)
    reload: bool = Field(default=False)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _config
    _config = None
