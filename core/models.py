"""Core domain models for harvested photo metadata and derived findings."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

NOT_AVAILABLE = "Not available"


@dataclass(frozen=True)
class ExifData:
    """EXIF attributes rendered as strings; absent tags hold `NOT_AVAILABLE`."""

    make: str = NOT_AVAILABLE
    model: str = NOT_AVAILABLE
    software: str = NOT_AVAILABLE
    date_time: str = NOT_AVAILABLE
    gps_latitude: str = NOT_AVAILABLE
    gps_longitude: str = NOT_AVAILABLE
    gps_altitude: str = NOT_AVAILABLE
    orientation: str = NOT_AVAILABLE
    flash: str = NOT_AVAILABLE
    focal_length: str = NOT_AVAILABLE
    exposure_time: str = NOT_AVAILABLE
    aperture: str = NOT_AVAILABLE
    iso: str = NOT_AVAILABLE

    @property
    def has_gps(self) -> bool:
        """True when the photo carries an embedded GPS latitude."""
        return self.gps_latitude != NOT_AVAILABLE


@dataclass(frozen=True)
class ExtractedData:
    """Image properties reported by the picker."""

    width: int | None = None
    height: int | None = None
    type: str = "image"
    file_name: str = "Unknown"
    mime_type: str = "Unknown"
    file_size: str = "Unknown"
    exif: ExifData | None = None


@dataclass(frozen=True)
class FileInfo:
    uri: str
    size: str = "Unknown"
    exists: bool = False
    is_directory: bool = False


@dataclass(frozen=True)
class DeviceInfo:
    platform: str
    version: str | int | float
    is_tv: bool = False


@dataclass(frozen=True)
class Address:
    street: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None
    postal_code: str | None = None


@dataclass(frozen=True)
class LocationData:
    """A single device geolocation reading, optionally reverse geocoded."""

    latitude: float
    longitude: float
    altitude: float | None
    accuracy: float | None
    timestamp: str
    address: Address | None = None


class RiskLevel(str, Enum):
    """Severity of a privacy finding, ordered from LOW to CRITICAL."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class RiskFinding:
    level: RiskLevel
    category: str
    description: str
    data: str


@dataclass(frozen=True)
class Metadata:
    """Root record built once per selected image.

    Attributes:
        timestamp: ISO-8601 capture time of the record.
        extracted_data: Picker-reported image properties, None without a selection.
        device_info: Platform descriptor of the running device.
        location_data: Opportunistic geolocation, None when unavailable.
        file_info: Filesystem lookup of the image URI.
        risk_assessment: Findings derived after every other field was set.
        error: Human-readable note when collection partially failed.
    """

    timestamp: str
    file_info: FileInfo
    extracted_data: ExtractedData | None = None
    device_info: DeviceInfo | None = None
    location_data: LocationData | None = None
    risk_assessment: tuple[RiskFinding, ...] = ()
    error: str | None = None

    @property
    def exif(self) -> ExifData | None:
        """EXIF block of the extracted data, if any."""
        return self.extracted_data.exif if self.extracted_data else None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase mapping consumed by the UI layer."""
        data: dict[str, Any] = {
            "timestamp": self.timestamp,
            "extractedData": _camel(asdict(self.extracted_data)) if self.extracted_data else {},
            "deviceInfo": _camel(asdict(self.device_info)) if self.device_info else {},
            "locationData": _camel(asdict(self.location_data)) if self.location_data else None,
            "fileInfo": _camel(asdict(self.file_info)),
            "riskAssessment": [
                {
                    "level": f.level.value,
                    "category": f.category,
                    "description": f.description,
                    "data": f.data,
                }
                for f in self.risk_assessment
            ],
        }
        if data["extractedData"].get("exif") is None:
            data["extractedData"].pop("exif", None)
        if data["locationData"] is not None and data["locationData"].get("address") is None:
            data["locationData"].pop("address", None)
        if self.error is not None:
            data["error"] = self.error
        return data


_KEY_OVERRIDES = {"is_tv": "isTV"}


def _camel(value: Any) -> Any:
    """Recursively convert snake_case dict keys to camelCase."""
    if isinstance(value, dict):
        out: dict[str, Any] = {}
        for key, inner in value.items():
            head, *rest = key.split("_")
            name = _KEY_OVERRIDES.get(key, head + "".join(p.capitalize() for p in rest))
            out[name] = _camel(inner)
        return out
    return value


@dataclass(frozen=True)
class DisplayRow:
    label: str
    value: str


@dataclass(frozen=True)
class DisplaySection:
    """A titled group of label/value rows for rendering."""

    title: str
    icon: str
    rows: list[DisplayRow] = field(default_factory=list)


@dataclass(frozen=True)
class SessionEntry:
    id: int
    metadata: Metadata


@dataclass(frozen=True)
class SessionStatistics:
    """Aggregate counts over the harvested history."""

    total_images: int = 0
    images_with_location: int = 0
    images_with_exif: int = 0
    unique_devices: int = 0
    critical_risks: int = 0
    high_risks: int = 0
