"""Fire-and-forget notification sound playback."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys

from pomotimer_cli.models.config_models import SoundConfig
from pomotimer_cli.utils.logger import get_logger

MACOS_SOUND = "/System/Library/Sounds/Glass.aiff"
LINUX_SOUND = "/usr/share/sounds/freedesktop/stereo/complete.oga"
WINDOWS_SOUND = r"C:\Windows\Media\Windows Notify System Generic.wav"

# Tried in order on Linux; the first one on PATH wins.
LINUX_PLAYERS = (
    ["paplay"],
    ["pw-play"],
    ["aplay", "-q"],
)


def powershell_play_script(path: str) -> str:
    """PowerShell one-liner playing ``path`` synchronously."""
    quoted = path.replace("'", "''")
    return f"(New-Object Media.SoundPlayer '{quoted}').PlaySync()"


def default_command(platform: str | None = None) -> list[str] | None:
    """Build the platform's default playback command, or None if unavailable."""
    platform = platform or sys.platform

    if platform == "darwin":
        if shutil.which("afplay"):
            return ["afplay", MACOS_SOUND]
        return None

    if platform.startswith("win"):
        return ["powershell", "-NoProfile", "-Command", powershell_play_script(WINDOWS_SOUND)]

    for player in LINUX_PLAYERS:
        if shutil.which(player[0]):
            return [*player, LINUX_SOUND]
    return None


class SoundPlayer:
    """Launches the notification sound as a detached background process.

    ``play`` never blocks and never raises: a missing player or sound file
    must not disturb the timer.
    """

    def __init__(self, config: SoundConfig | None = None, platform: str | None = None):
        self.config = config or SoundConfig()
        self.platform = platform or sys.platform

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def build_command(self) -> list[str] | None:
        """Resolve the command line, honouring configured overrides."""
        if self.config.player:
            command = shlex.split(self.config.player)
            if self.config.file:
                command.append(self.config.file)
            return command

        command = default_command(self.platform)
        if command and self.config.file:
            if self.platform.startswith("win"):
                command = [*command[:-1], powershell_play_script(self.config.file)]
            else:
                command = [*command[:-1], self.config.file]
        return command

    def play(self) -> None:
        """Start playback and return immediately."""
        if not self.enabled:
            return

        logger = get_logger()
        command = self.build_command()
        if not command:
            logger.debug("no sound player available, skipping notification")
            return

        try:
            subprocess.Popen(
                command,
                start_new_session=True,  # Detach from parent session
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
            )
        except (OSError, ValueError) as e:
            logger.debug("sound playback failed: %s", e)
            return
        logger.debug("sound playback started: %s", command[0])
