"""Core service interfaces and shared data structures.

This module defines the raw inputs handed to the pipeline by platform
collaborators (picker, filesystem, geolocation), the per-step result type
threaded through collection, and the provider protocols the services depend on.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from core.models import DeviceInfo

T = TypeVar("T")


@dataclass
class SelectionResult:
    """Image-selection result as reported by a picker.

    Attributes:
        uri: Location of the selected image.
        width: Pixel width, if reported.
        height: Pixel height, if reported.
        file_name: Base name of the file, if reported.
        file_size: Size in bytes, if reported.
        mime_type: MIME type, if reported.
        type: Media type label (e.g. "image"), if reported.
        exif: Mapping of EXIF tag names to raw values; None when the picker
            offers no EXIF at all.
    """

    uri: str
    width: int | None = None
    height: int | None = None
    file_name: str | None = None
    file_size: int | None = None
    mime_type: str | None = None
    type: str | None = None
    exif: Mapping[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SelectionResult:
        """Build from a camelCase picker payload."""
        return cls(
            uri=str(data.get("uri", "")),
            width=data.get("width"),
            height=data.get("height"),
            file_name=data.get("fileName"),
            file_size=data.get("fileSize"),
            mime_type=data.get("mimeType"),
            type=data.get("type"),
            exif=data.get("exif"),
        )


@dataclass
class RawFileInfo:
    exists: bool
    is_directory: bool = False
    size: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RawFileInfo:
        return cls(
            exists=bool(data.get("exists", False)),
            is_directory=bool(data.get("isDirectory", False)),
            size=data.get("size"),
        )


@dataclass
class GeoReading:
    """One device geolocation reading; `timestamp_ms` is epoch milliseconds."""

    latitude: float
    longitude: float
    altitude: float | None
    accuracy: float | None
    timestamp_ms: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GeoReading:
        """Build from `{coords: {latitude, longitude, altitude, accuracy}, timestamp}`."""
        coords = data.get("coords") or {}
        return cls(
            latitude=float(coords["latitude"]),
            longitude=float(coords["longitude"]),
            altitude=coords.get("altitude"),
            accuracy=coords.get("accuracy"),
            timestamp_ms=float(data.get("timestamp", 0)),
        )


@dataclass
class GeocodeResult:
    street: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None
    postal_code: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GeocodeResult:
        return cls(
            street=data.get("street"),
            city=data.get("city"),
            region=data.get("region"),
            country=data.get("country"),
            postal_code=data.get("postalCode"),
        )


class StepStatus(str, Enum):
    OK = "ok"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"


@dataclass
class StepResult(Generic[T]):
    """Outcome of one best-effort collection step.

    Attributes:
        status: OK with a value, UNAVAILABLE when the capability is absent or
            denied, FAILED when the collaborator raised.
        value: Collected value for OK results.
        reason: Human-readable explanation for non-OK results.
    """

    status: StepStatus
    value: T | None = None
    reason: str | None = None

    @classmethod
    def ok(cls, value: T) -> StepResult[T]:
        return cls(StepStatus.OK, value=value)

    @classmethod
    def unavailable(cls, reason: str) -> StepResult[T]:
        return cls(StepStatus.UNAVAILABLE, reason=reason)

    @classmethod
    def failed(cls, reason: str) -> StepResult[T]:
        return cls(StepStatus.FAILED, reason=reason)

    @property
    def is_ok(self) -> bool:
        return self.status is StepStatus.OK


class FileInfoProvider(Protocol):
    def get_info(self, uri: str) -> RawFileInfo:
        """Return filesystem information for `uri`."""
        raise NotImplementedError


class DeviceInfoProvider(Protocol):
    def describe(self) -> DeviceInfo:
        """Return the running device descriptor."""
        raise NotImplementedError


class LocationProvider(Protocol):
    """Abstracts the platform geolocation service."""

    def request_permission(self) -> bool:
        """Prompt for foreground location permission; True when granted."""
        raise NotImplementedError

    def current_position(self) -> GeoReading:
        """Read the current position once."""
        raise NotImplementedError

    def reverse_geocode(self, latitude: float, longitude: float) -> list[GeocodeResult]:
        """Return candidate addresses for the coordinates, best match first."""
        raise NotImplementedError


class ImagePicker(Protocol):
    def select(self, path: str) -> SelectionResult:
        """Select the image at `path` and report its properties."""
        raise NotImplementedError
