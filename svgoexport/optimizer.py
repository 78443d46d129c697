"""SVGO invocation for folders of exported SVG files."""

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from .utils import calculate_compression_ratio, folder_svg_size, format_size

logger = logging.getLogger(__name__)

# svgo is expected here; there is no PATH lookup.
SVGO_PATH = "/usr/local/bin/svgo"

# These passes shrink the SVGs the design app writes without changing how
# they render.
DISABLED_PLUGINS: Tuple[str, ...] = ("convertShapeToPath",)
ENABLED_PLUGINS: Tuple[str, ...] = (
    "removeTitle",
    "removeDesc",
    "removeDoctype",
    "removeEmptyAttrs",
    "removeUnknownsAndDefaults",
    "removeUnusedNS",
    "removeEditorsNSData",
)


@dataclass
class CommandResult:
    """Exit status and captured output of a finished process."""
    returncode: int
    stdout: str = ""
    stderr: str = ""


def run_subprocess(args: Sequence[str]) -> CommandResult:
    """
    Run a command and block until it exits.

    Args:
        args: Program followed by its arguments; no shell is involved

    Returns:
        CommandResult with the exit code and captured output

    Raises:
        OSError: If the program cannot be launched
    """
    completed = subprocess.run(list(args), capture_output=True, text=True)
    return CommandResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


@dataclass
class OptimizationResult:
    """Result of optimizing one folder."""
    success: bool
    folder: str
    command: List[str] = field(default_factory=list)
    returncode: Optional[int] = None
    original_size: int = 0
    optimized_size: int = 0
    compression_ratio: float = 0.0
    error: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "folder": self.folder,
            "command": self.command,
            "returncode": self.returncode,
            "original_size": self.original_size,
            "original_size_formatted": format_size(self.original_size),
            "optimized_size": self.optimized_size,
            "optimized_size_formatted": format_size(self.optimized_size),
            "compression_ratio": round(self.compression_ratio * 100, 1),
            "error": self.error,
        }


class SVGOOptimizer:
    """
    Runs svgo over a folder, rewriting its SVG files in place.

    Instances are callable with a folder path and return True on success,
    which is the shape ExportCompletionHandler expects from an optimizer.
    """

    def __init__(
        self,
        svgo_path: str = SVGO_PATH,
        run_command: Optional[Callable[[Sequence[str]], CommandResult]] = None,
    ):
        """
        Initialize optimizer.

        Args:
            svgo_path: Location of the svgo executable
            run_command: Process runner; defaults to a blocking subprocess call
        """
        self.svgo_path = svgo_path
        self.run_command = run_command or run_subprocess

    def build_command(self, folder: str) -> List[str]:
        """Build the svgo argument list for a folder."""
        command = [self.svgo_path, f"--folder={folder}", "--pretty"]
        command.extend(f"--disable={name}" for name in DISABLED_PLUGINS)
        command.extend(f"--enable={name}" for name in ENABLED_PLUGINS)
        return command

    def is_available(self) -> bool:
        """Check whether the svgo executable exists at the configured path."""
        return Path(self.svgo_path).is_file()

    def _measure(self, folder: str, default: int = 0) -> int:
        """Size of the folder's SVG files; unreadable folders report the default."""
        try:
            return folder_svg_size(folder)
        except OSError as e:
            logger.warning("Could not measure %s: %s", folder, e)
            return default

    def optimize_folder(self, folder: str) -> OptimizationResult:
        """
        Optimize every SVG file in a folder.

        Args:
            folder: Folder containing the exported SVG files

        Returns:
            OptimizationResult; success means svgo exited with status 0
        """
        command = self.build_command(folder)
        original_size = self._measure(folder)

        logger.debug("Running %s", command)

        try:
            completed = self.run_command(command)
        except OSError as e:
            return OptimizationResult(
                success=False,
                folder=folder,
                command=command,
                original_size=original_size,
                optimized_size=original_size,
                error=f"Could not launch {self.svgo_path}: {e}",
            )

        optimized_size = self._measure(folder, default=original_size)
        success = completed.returncode == 0

        error = None
        if not success:
            error = completed.stderr.strip() or f"svgo exited with status {completed.returncode}"

        return OptimizationResult(
            success=success,
            folder=folder,
            command=command,
            returncode=completed.returncode,
            original_size=original_size,
            optimized_size=optimized_size,
            compression_ratio=calculate_compression_ratio(original_size, optimized_size),
            error=error,
        )

    def __call__(self, folder: str) -> bool:
        return self.optimize_folder(folder).success
