"""Normalization of picker and filesystem results into display-ready records.

Every optional field is resolved to a real value or an explicit fallback, so
downstream consumers never deal with absent attributes. EXIF resolution is
table driven: each output field lists its upstream tag names in preference
order and falls back to `NOT_AVAILABLE`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.models import NOT_AVAILABLE, ExifData, ExtractedData, FileInfo
from core.services.interfaces import RawFileInfo, SelectionResult

UNKNOWN = "Unknown"

# (output field, upstream EXIF tags in preference order)
EXIF_FIELDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("make", ("Make",)),
    ("model", ("Model",)),
    ("software", ("Software",)),
    ("date_time", ("DateTime", "DateTimeOriginal")),
    ("gps_latitude", ("GPSLatitude",)),
    ("gps_longitude", ("GPSLongitude",)),
    ("gps_altitude", ("GPSAltitude",)),
    ("orientation", ("Orientation",)),
    ("flash", ("Flash",)),
    ("focal_length", ("FocalLength",)),
    ("exposure_time", ("ExposureTime",)),
    ("aperture", ("FNumber", "ApertureValue")),
    ("iso", ("ISOSpeedRatings", "ISO")),
)


def format_kilobytes(num_bytes: int | float | None) -> str:
    """Format a byte count as kilobytes with two decimals, e.g. "2.00 KB"."""
    if num_bytes is None:
        return UNKNOWN
    return f"{num_bytes / 1024:.2f} KB"


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _resolve_tag(exif: Mapping[str, Any], sources: tuple[str, ...]) -> str:
    """Return the first present source tag as a string, else the sentinel."""
    for key in sources:
        value = exif.get(key)
        if not _is_absent(value):
            return str(value)
    return NOT_AVAILABLE


def normalize_exif(exif: Mapping[str, Any] | None) -> ExifData | None:
    """Resolve the raw EXIF mapping into `ExifData`.

    Returns None when no EXIF block was provided at all, which is distinct from
    an empty block whose fields all resolve to the sentinel.
    """
    if exif is None:
        return None
    return ExifData(**{name: _resolve_tag(exif, sources) for name, sources in EXIF_FIELDS})


def normalize_selection(selection: SelectionResult) -> ExtractedData:
    """Build `ExtractedData` from a picker result, applying per-field fallbacks."""
    return ExtractedData(
        width=selection.width,
        height=selection.height,
        type=selection.type or "image",
        file_name=selection.file_name or UNKNOWN,
        mime_type=selection.mime_type or UNKNOWN,
        file_size=format_kilobytes(selection.file_size),
        exif=normalize_exif(selection.exif),
    )


def normalize_file_info(uri: str, raw: RawFileInfo) -> FileInfo:
    return FileInfo(
        uri=uri,
        size=format_kilobytes(raw.size),
        exists=bool(raw.exists),
        is_directory=bool(raw.is_directory),
    )


def missing_file_info(uri: str) -> FileInfo:
    """Fallback record used when the filesystem lookup could not complete."""
    return FileInfo(uri=uri, size=UNKNOWN, exists=False, is_directory=False)
