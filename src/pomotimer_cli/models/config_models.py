"""Configuration models for Pomotimer CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SoundConfig(BaseModel):
    """Notification sound configuration."""

    enabled: bool = Field(default=True, description="Play a sound on completion")
    file: str | None = Field(
        default=None, description="Sound file overriding the platform default"
    )
    player: str | None = Field(
        default=None, description="Player command overriding the platform default"
    )


class TimerConfig(BaseModel):
    """Timer behaviour configuration."""

    transition_delay: float = Field(
        default=2.0,
        gt=0,
        description="Seconds between completion and the next auto session",
    )


class UIConfig(BaseModel):
    """UI configuration."""

    color: bool = Field(default=True)


class AppConfig(BaseModel):
    """Main Pomotimer configuration"""

    model_config = {"validate_assignment": True}

    sound: SoundConfig = Field(default_factory=SoundConfig)
    timer: TimerConfig = Field(default_factory=TimerConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
