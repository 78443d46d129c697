"""Export-finished handling: optimize the folders SVG assets were written to."""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional

from .exports import ExportBatch, ExportPayloadError
from .optimizer import SVGOOptimizer
from .sound import SoundPlayer

logger = logging.getLogger(__name__)


@dataclass
class CompressionOutcome:
    """Result of handling one export batch."""
    success: bool
    folders: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "folders": list(self.folders),
        }


def unique_paths(paths: Iterable[str]) -> List[str]:
    """
    Drop repeated paths, keeping the first occurrence of each.

    Paths are compared as plain strings: no normalization, case folding or
    symlink resolution.
    """
    return list(dict.fromkeys(paths))


def svg_folders(batch: ExportBatch) -> List[str]:
    """Folders holding the batch's SVG exports, each listed once."""
    return unique_paths(os.path.dirname(record.path) for record in batch.svg_records())


class ExportCompletionHandler:
    """
    Compresses SVG exports right after an export operation finishes.

    Every folder that received at least one SVG is handed to the optimizer
    once, in export order. A failing folder does not stop the others; the
    batch only counts as successful if every folder was optimized. One sound
    is played per batch that contained SVGs.
    """

    def __init__(
        self,
        optimizer: Optional[Callable[[str], bool]] = None,
        sound: Optional[Callable[[bool], None]] = None,
        progress_callback: Optional[Callable[[str, int], None]] = None,
    ):
        """
        Initialize handler.

        Args:
            optimizer: Called with a folder path, returns True on success
            sound: Called once per batch with the overall outcome
            progress_callback: Optional callback for progress updates (folder, percentage)
        """
        self.optimizer = optimizer if optimizer is not None else SVGOOptimizer()
        self.sound = sound if sound is not None else SoundPlayer()
        self.progress_callback = progress_callback

    def _report_progress(self, folder: str, percentage: int):
        """Report progress if callback is set."""
        if not self.progress_callback:
            return
        try:
            self.progress_callback(folder, percentage)
        except Exception:
            logger.exception("Progress callback failed on %s", folder)

    def _optimize(self, folder: str) -> bool:
        try:
            return bool(self.optimizer(folder))
        except Exception:
            logger.exception("Optimizer failed on %s", folder)
            return False

    def handle(self, batch: ExportBatch) -> Optional[CompressionOutcome]:
        """
        Optimize the folders of a batch's SVG exports.

        Args:
            batch: Records of the finished export

        Returns:
            CompressionOutcome, or None if the batch had no SVG exports
        """
        return self.handle_folders(svg_folders(batch))

    def handle_folders(self, folders: Iterable[str]) -> Optional[CompressionOutcome]:
        """
        Optimize folders one at a time and play a single sound for all of them.

        Repeated folders are optimized once. Returns None if there is nothing
        to optimize.
        """
        folders = unique_paths(folders)
        if not folders:
            return None

        success = True
        for index, folder in enumerate(folders, start=1):
            logger.info("Compressing SVG files in %s", folder)
            if self._optimize(folder):
                logger.info("✅ compression ok")
            else:
                logger.info("❌ compression error")
                success = False
            self._report_progress(folder, int(index / len(folders) * 100))

        try:
            self.sound(success)
        except Exception:
            logger.exception("Could not play the completion sound")

        return CompressionOutcome(success=success, folders=folders)

    def __call__(self, batch: ExportBatch) -> Optional[CompressionOutcome]:
        return self.handle(batch)


def on_export_slices(
    action_context: Any,
    handler: Optional[ExportCompletionHandler] = None,
) -> None:
    """
    Entry point for the host's export-finished event.

    Args:
        action_context: The event's context, holding the ``exports`` list
        handler: Handler to use; a default one is created if omitted
    """
    try:
        batch = ExportBatch.from_action_context(action_context)
    except ExportPayloadError as e:
        logger.error("Ignoring export event: %s", e)
        return

    (handler or ExportCompletionHandler()).handle(batch)
