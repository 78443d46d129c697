"""Audible feedback once a batch of folders has been optimized."""

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

SOUND_PLAYER = "afplay"
SOUNDS_DIR = "/System/Library/Sounds"
SUCCESS_SOUND = "Glass"
FAILURE_SOUND = "Basso"


def launch_detached(args: Sequence[str]) -> None:
    """Start a process without waiting for it to exit."""
    subprocess.Popen(
        list(args),
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


class SoundPlayer:
    """Plays a system sound that tells whether the optimization worked."""

    def __init__(
        self,
        player: str = SOUND_PLAYER,
        sounds_dir: str = SOUNDS_DIR,
        launcher: Optional[Callable[[Sequence[str]], None]] = None,
    ):
        self.player = player
        self.sounds_dir = Path(sounds_dir)
        self.launcher = launcher or launch_detached

    def sound_path(self, success: bool) -> str:
        name = SUCCESS_SOUND if success else FAILURE_SOUND
        return str(self.sounds_dir / f"{name}.aiff")

    def play(self, success: bool) -> None:
        """Launch the player; a missing player is logged, never raised."""
        command = [self.player, self.sound_path(success)]
        try:
            self.launcher(command)
        except OSError as e:
            logger.warning("Could not play sound with %s: %s", self.player, e)

    def __call__(self, success: bool) -> None:
        self.play(success)


class NullSoundPlayer:
    """Stays silent."""

    def play(self, success: bool) -> None:
        pass

    def __call__(self, success: bool) -> None:
        self.play(success)
