from __future__ import annotations

from datetime import datetime, timezone

import pytest

from core.models import DeviceInfo
from core.services.extraction_service import MetadataExtractor
from core.services.interfaces import GeocodeResult, GeoReading, RawFileInfo, SelectionResult

FULL_EXIF = {
    "Make": "Apple",
    "Model": "iPhone 14",
    "Software": "17.1",
    "DateTime": "2024:05:01 10:20:30",
    "GPSLatitude": 40.689247,
    "GPSLongitude": -74.044502,
    "GPSAltitude": 12.5,
    "Orientation": 1,
    "Flash": 16,
    "FocalLength": 5.7,
    "ExposureTime": 0.008,
    "FNumber": 1.5,
    "ISOSpeedRatings": 64,
}


class FakeFiles:
    def __init__(self, info: RawFileInfo | None = None, error: Exception | None = None) -> None:
        self.info = info or RawFileInfo(exists=True, size=2048)
        self.error = error

    def get_info(self, uri: str) -> RawFileInfo:
        if self.error is not None:
            raise self.error
        return self.info


class FakeDevice:
    def describe(self) -> DeviceInfo:
        return DeviceInfo(platform="ios", version="17.1", is_tv=False)


class FakeLocation:
    def __init__(
        self,
        granted: bool = True,
        reading: GeoReading | None = None,
        addresses: list[GeocodeResult] | None = None,
        read_error: Exception | None = None,
        geocode_error: Exception | None = None,
    ) -> None:
        self.granted = granted
        self.reading = reading or GeoReading(
            latitude=37.774929,
            longitude=-122.419416,
            altitude=16.0,
            accuracy=12.4,
            timestamp_ms=1_700_000_000_000,
        )
        self.addresses = [] if addresses is None else addresses
        self.read_error = read_error
        self.geocode_error = geocode_error
        self.geocode_calls = 0
        self.read_calls = 0

    def request_permission(self) -> bool:
        return self.granted

    def current_position(self) -> GeoReading:
        self.read_calls += 1
        if self.read_error is not None:
            raise self.read_error
        return self.reading

    def reverse_geocode(self, latitude: float, longitude: float) -> list[GeocodeResult]:
        self.geocode_calls += 1
        if self.geocode_error is not None:
            raise self.geocode_error
        return self.addresses


def make_selection(exif=None, **overrides) -> SelectionResult:
    fields = {
        "uri": "file:///photos/IMG_0001.jpg",
        "width": 4032,
        "height": 3024,
        "file_name": "IMG_0001.jpg",
        "file_size": 2048,
        "mime_type": "image/jpeg",
        "type": "image",
        "exif": exif,
    }
    fields.update(overrides)
    return SelectionResult(**fields)


def fixed_clock() -> datetime:
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sf_address() -> GeocodeResult:
    return GeocodeResult(
        street="1 Dr Carlton B Goodlett Pl",
        city="San Francisco",
        region="CA",
        country="United States",
        postal_code="94102",
    )


@pytest.fixture
def make_extractor():
    def _factory(files=None, location=None) -> MetadataExtractor:
        return MetadataExtractor(files or FakeFiles(), FakeDevice(), location, clock=fixed_clock)

    return _factory
