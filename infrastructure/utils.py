"""Utilities for converting raw EXIF values into plain Python values.

Conversions are best-effort and will not raise on malformed input; callers
should expect `None` when a value cannot be interpreted.
"""

from __future__ import annotations

from typing import Any

from loguru import logger


def rational_to_float(value: Any) -> float | None:
    """Convert an EXIF rational (Pillow `IFDRational` or `(num, den)`) to float."""
    if value is None:
        return None
    if isinstance(value, tuple) and len(value) == 2:
        num, den = value
        if not den:
            return None
        return float(num) / float(den)
    try:
        return float(value)
    except (TypeError, ValueError, ZeroDivisionError):
        return None


def dms_to_degrees(dms: Any, ref: Any = None) -> float | None:
    """Convert a (degrees, minutes, seconds) triple to signed decimal degrees.

    `ref` is the hemisphere letter; "S" and "W" yield negative values.
    """
    try:
        parts = [rational_to_float(p) for p in dms]
    except TypeError:
        return None
    if len(parts) != 3 or any(p is None for p in parts):
        return None
    degrees = parts[0] + parts[1] / 60.0 + parts[2] / 3600.0  # type: ignore[operator]
    if str(exif_value(ref) or "").upper() in {"S", "W"}:
        degrees = -degrees
    return round(degrees, 6)


def exif_value(value: Any) -> Any:
    """Return a printable form of a raw EXIF value.

    Bytes are decoded (trailing NULs dropped), rationals become floats, and
    sequences are converted element-wise.
    """
    if isinstance(value, bytes):
        text = value.decode("utf-8", errors="ignore").rstrip("\x00").strip()
        return text or None
    if isinstance(value, str):
        return value.rstrip("\x00").strip() or None
    if isinstance(value, (list, tuple)):
        return tuple(exif_value(v) for v in value)
    if hasattr(value, "numerator") and hasattr(value, "denominator") and not isinstance(value, int):
        converted = rational_to_float(value)
        if converted is None:
            logger.debug("Unreadable EXIF rational: {!r}", value)
        return converted
    return value
