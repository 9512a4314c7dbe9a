"""Pomotimer CLI models.

``config_models`` holds the Pydantic configuration models; ``timer`` holds the
session state machine.
"""

from .config_models import AppConfig, SoundConfig, TimerConfig, UIConfig

__all__ = [
    "AppConfig",
    "SoundConfig",
    "TimerConfig",
    "UIConfig",
]
