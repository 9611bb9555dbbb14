"""Pillow-backed image picker reporting dimensions, file facts and EXIF tags."""

from __future__ import annotations

import mimetypes
import os
from pathlib import Path
from typing import Any

from PIL import ExifTags, Image
from loguru import logger

from core.services.interfaces import SelectionResult
from infrastructure.utils import dms_to_degrees, exif_value, rational_to_float

# Pointer tags in the base IFD; their sub-IFDs are read separately.
_POINTER_TAGS = {"ExifOffset", "GPSInfo", "InteropOffset"}


def _read_exif_tags(im: Image.Image) -> dict[str, Any]:
    """Collect base IFD, Exif sub-IFD and GPS IFD tags keyed by tag name."""
    exif = im.getexif()
    tags: dict[str, Any] = {}
    for tag_id, raw in exif.items():
        name = ExifTags.TAGS.get(tag_id, str(tag_id))
        if name not in _POINTER_TAGS:
            tags[name] = exif_value(raw)

    for tag_id, raw in exif.get_ifd(ExifTags.IFD.Exif).items():
        tags.setdefault(ExifTags.TAGS.get(tag_id, str(tag_id)), exif_value(raw))

    gps_ifd = exif.get_ifd(ExifTags.IFD.GPSInfo)
    gps = {ExifTags.GPSTAGS.get(k, str(k)): v for k, v in gps_ifd.items()}
    if gps:
        lat = dms_to_degrees(gps.get("GPSLatitude", ()), gps.get("GPSLatitudeRef"))
        lon = dms_to_degrees(gps.get("GPSLongitude", ()), gps.get("GPSLongitudeRef"))
        alt = rational_to_float(gps.get("GPSAltitude"))
        if alt is not None and exif_value(gps.get("GPSAltitudeRef")) in (1, "\x01"):
            alt = -alt
        tags["GPSLatitude"] = lat
        tags["GPSLongitude"] = lon
        tags["GPSAltitude"] = alt
    return tags


class PillowImagePicker:
    """Select local image files the way a gallery picker would."""

    def __init__(self, include_exif: bool = True) -> None:
        self._include_exif = include_exif

    def select(self, path: str) -> SelectionResult:
        """Open `path` with Pillow and report its properties.

        Raises:
            OSError: The file is missing or is not a readable image.
        """
        p = Path(path)
        with Image.open(p) as im:
            width, height = im.size
            mime = Image.MIME.get(im.format or "") or mimetypes.guess_type(p.name)[0]
            exif = _read_exif_tags(im) if self._include_exif else None
        size = os.path.getsize(p)
        logger.debug(
            "Picked {} ({}x{}, {}, {} bytes, {} EXIF tags)",
            p,
            width,
            height,
            mime,
            size,
            len(exif) if exif is not None else "no",
        )
        return SelectionResult(
            uri=str(p.resolve()),
            width=width,
            height=height,
            file_name=p.name,
            file_size=size,
            mime_type=mime,
            type="image",
            exif=exif,
        )
