"""
SVGO Export

Compresses SVG assets with svgo right after a design application exports
them, then plays a sound telling whether it worked.
"""

__version__ = "1.0.0"
__author__ = "SVGO Export Team"

from .exports import ExportBatch, ExportPayloadError, ExportRecord
from .handler import (
    CompressionOutcome,
    ExportCompletionHandler,
    on_export_slices,
    svg_folders,
    unique_paths,
)
from .optimizer import OptimizationResult, SVGOOptimizer
from .sound import NullSoundPlayer, SoundPlayer

__all__ = [
    "ExportBatch",
    "ExportPayloadError",
    "ExportRecord",
    "CompressionOutcome",
    "ExportCompletionHandler",
    "on_export_slices",
    "svg_folders",
    "unique_paths",
    "OptimizationResult",
    "SVGOOptimizer",
    "NullSoundPlayer",
    "SoundPlayer",
]
