"""Service layer for Pomotimer CLI."""

from .config_service import ConfigService, get_config_service
from .sound_service import SoundPlayer

__all__ = ["ConfigService", "SoundPlayer", "get_config_service"]
