"""Projection of a metadata record into titled label/value sections.

The projection is for rendering only and never raises: sections that depend on
optional data are skipped, and the always-present sections fall back to "N/A"
per row.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from core.models import DisplayRow, DisplaySection, LocationData, Metadata

NA = "N/A"


def _or_na(value: object) -> str:
    if value is None or value == "":
        return NA
    return str(value)


def _metres(value: float | None) -> str:
    """Whole metres, halves rounded away from zero (12.5 -> "13m")."""
    if value is None:
        return NA
    whole = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{whole}m"


def _location_section(loc: LocationData) -> DisplaySection:
    rows = [
        DisplayRow("Latitude", f"{loc.latitude:.6f}"),
        DisplayRow("Longitude", f"{loc.longitude:.6f}"),
        DisplayRow("Accuracy", _metres(loc.accuracy)),
    ]
    if loc.address is not None:
        rows += [
            DisplayRow("Street", _or_na(loc.address.street)),
            DisplayRow("City", _or_na(loc.address.city)),
            DisplayRow("Region", _or_na(loc.address.region)),
            DisplayRow("Country", _or_na(loc.address.country)),
        ]
    return DisplaySection("Current Location", "location", rows)


def project_metadata(metadata: Metadata) -> list[DisplaySection]:
    """Return display sections for `metadata` in their fixed order."""
    sections: list[DisplaySection] = []

    if metadata.location_data is not None:
        sections.append(_location_section(metadata.location_data))

    exif = metadata.exif
    if exif is not None:
        # EXIF values are shown verbatim, sentinel included
        sections.append(
            DisplaySection(
                "Camera/Device Info",
                "camera",
                [
                    DisplayRow("Make", exif.make),
                    DisplayRow("Model", exif.model),
                    DisplayRow("Software", exif.software),
                    DisplayRow("Date Taken", exif.date_time),
                    DisplayRow("Orientation", exif.orientation),
                    DisplayRow("Flash", exif.flash),
                    DisplayRow("Focal Length", exif.focal_length),
                    DisplayRow("Exposure Time", exif.exposure_time),
                    DisplayRow("Aperture", exif.aperture),
                    DisplayRow("ISO", exif.iso),
                ],
            )
        )
        if exif.has_gps:
            sections.append(
                DisplaySection(
                    "Photo GPS Location",
                    "map",
                    [
                        DisplayRow("Latitude", exif.gps_latitude),
                        DisplayRow("Longitude", exif.gps_longitude),
                        DisplayRow("Altitude", exif.gps_altitude),
                    ],
                )
            )

    ext = metadata.extracted_data
    width = ext.width if ext else None
    height = ext.height if ext else None
    sections.append(
        DisplaySection(
            "Image Properties",
            "image",
            [
                DisplayRow(
                    "Dimensions",
                    f"{width}x{height}" if width is not None and height is not None else NA,
                ),
                DisplayRow("File Name", _or_na(ext.file_name if ext else None)),
                DisplayRow("File Size", _or_na(ext.file_size if ext else None)),
                DisplayRow("Type", _or_na(ext.mime_type if ext else None)),
            ],
        )
    )

    dev = metadata.device_info
    sections.append(
        DisplaySection(
            "Device Fingerprint",
            "phone",
            [
                DisplayRow("Platform", _or_na(dev.platform if dev else None)),
                DisplayRow("OS Version", _or_na(dev.version if dev else None)),
            ],
        )
    )
    return sections
