"""Utility functions for SVG export optimization."""

from pathlib import Path
from typing import Union


def format_size(size_bytes: int) -> str:
    """
    Format bytes to human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable size string
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.2f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.2f} GB"


def calculate_compression_ratio(original_size: int, compressed_size: int) -> float:
    """
    Calculate compression ratio.

    Args:
        original_size: Original size in bytes
        compressed_size: Compressed size in bytes

    Returns:
        Compression ratio (e.g., 0.65 means 65% reduction)
    """
    if original_size == 0:
        return 0.0
    return 1 - (compressed_size / original_size)


def folder_svg_size(folder: Union[str, Path]) -> int:
    """
    Sum the sizes of the SVG files directly inside a folder.

    Subfolders are not descended into, since svgo only rewrites the
    top level of the folder it is given.

    Args:
        folder: Folder to measure

    Returns:
        Total size in bytes (0 if the folder does not exist)
    """
    folder = Path(folder)
    if not folder.is_dir():
        return 0

    return sum(
        file_path.stat().st_size
        for file_path in folder.iterdir()
        if file_path.is_file() and file_path.suffix.lower() == ".svg"
    )
