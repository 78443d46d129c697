"""Export records handed over by the design application."""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Sequence, Tuple

SVG_FORMAT = "svg"


class ExportPayloadError(ValueError):
    """Raised when an export-finished payload cannot be read."""


@dataclass(frozen=True)
class ExportRecord:
    """One asset written to disk by an export operation."""
    path: str
    format: str

    @property
    def is_svg(self) -> bool:
        """Only an exact "svg" tag counts; anything else is ignored."""
        return self.format == SVG_FORMAT

    @classmethod
    def from_dict(cls, data: Any) -> "ExportRecord":
        """
        Build a record from the host's export entry.

        The host sends ``{"path": ..., "request": {"format": ...}}``; a flat
        ``{"path": ..., "format": ...}`` is accepted as well.

        Raises:
            ExportPayloadError: If the entry is not an object or has no path
        """
        if not isinstance(data, Mapping):
            raise ExportPayloadError(f"Export entry must be an object, got {type(data).__name__}")

        path = data.get("path")
        if not isinstance(path, str) or not path:
            raise ExportPayloadError("Export entry is missing a 'path'")

        request = data.get("request")
        if isinstance(request, Mapping):
            fmt = request.get("format")
        else:
            fmt = data.get("format")

        # Unknown or malformed formats are kept as "" and simply never match.
        return cls(path=path, format=fmt if isinstance(fmt, str) else "")

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"path": self.path, "format": self.format}


class ExportBatch:
    """All assets produced by a single export operation, in export order."""

    def __init__(self, records: Iterable[ExportRecord] = ()):
        self._records: Tuple[ExportRecord, ...] = tuple(records)

    @classmethod
    def from_action_context(cls, data: Any) -> "ExportBatch":
        """
        Read a batch from the host's export-finished action context.

        Args:
            data: Mapping with an ``exports`` list; other keys are ignored

        Raises:
            ExportPayloadError: If the context or any export entry is malformed
        """
        if not isinstance(data, Mapping):
            raise ExportPayloadError("Action context must be an object")

        if "exports" not in data:
            raise ExportPayloadError("Action context has no 'exports'")

        exports = data["exports"]
        if not isinstance(exports, Sequence) or isinstance(exports, (str, bytes)):
            raise ExportPayloadError("'exports' must be a list")

        return cls(ExportRecord.from_dict(entry) for entry in exports)

    @property
    def records(self) -> Tuple[ExportRecord, ...]:
        return self._records

    def svg_records(self) -> Tuple[ExportRecord, ...]:
        return tuple(record for record in self._records if record.is_svg)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ExportRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> ExportRecord:
        return self._records[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExportBatch):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"ExportBatch({list(self._records)!r})"
