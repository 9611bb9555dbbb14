from dataclasses import replace

from conftest import FULL_EXIF

from core.models import (
    NOT_AVAILABLE,
    Address,
    DeviceInfo,
    ExifData,
    ExtractedData,
    FileInfo,
    LocationData,
    Metadata,
    RiskLevel,
)
from core.rules.engine import RiskEngine
from core.services.capture_normalizer import normalize_exif

LOCATION = LocationData(
    latitude=37.5,
    longitude=-122.25,
    altitude=None,
    accuracy=5.0,
    timestamp="2024-05-01T12:00:00.000Z",
)
DEVICE = DeviceInfo(platform="android", version=34)


def _metadata(exif=None, location=None, device=DEVICE) -> Metadata:
    return Metadata(
        timestamp="2024-05-01T12:00:00.000Z",
        file_info=FileInfo(uri="file:///a.jpg"),
        extracted_data=ExtractedData(exif=exif),
        device_info=device,
        location_data=location,
    )


def test_full_record_produces_findings_in_fixed_order():
    location = replace(LOCATION, address=Address(street="Main St", city="Springfield"))
    findings = RiskEngine().assess(_metadata(normalize_exif(FULL_EXIF), location))

    assert [(f.category, f.level) for f in findings] == [
        ("Location Tracking", RiskLevel.HIGH),
        ("Address Exposure", RiskLevel.CRITICAL),
        ("Photo Location", RiskLevel.HIGH),
        ("Device Fingerprinting", RiskLevel.MEDIUM),
        ("Timestamp Analysis", RiskLevel.MEDIUM),
        ("Platform Information", RiskLevel.LOW),
    ]
    assert findings[0].data == "37.5, -122.25"
    assert findings[1].data == "Main St, Springfield"
    assert findings[2].data == "40.689247, -74.044502"
    assert findings[3].data == "Apple iPhone 14"
    assert findings[4].data == "2024:05:01 10:20:30"
    assert findings[5].data == "android 34"


def test_no_location_means_no_location_findings():
    findings = RiskEngine().assess(_metadata(normalize_exif(FULL_EXIF), None))
    categories = [f.category for f in findings]
    assert "Location Tracking" not in categories
    assert "Address Exposure" not in categories
    assert categories[0] == "Photo Location"


def test_location_without_address_skips_address_exposure():
    findings = RiskEngine().assess(_metadata(None, LOCATION))
    assert [f.category for f in findings] == ["Location Tracking", "Platform Information"]


def test_address_missing_parts_render_na():
    location = replace(LOCATION, address=Address(city="Springfield"))
    findings = RiskEngine().assess(_metadata(None, location))
    assert findings[1].data == "N/A, Springfield"


def test_gps_sentinel_does_not_fire_photo_location():
    exif = ExifData(make="Canon", model="EOS R5", gps_latitude=NOT_AVAILABLE)
    categories = [f.category for f in RiskEngine().assess(_metadata(exif))]
    assert "Photo Location" not in categories
    assert "Device Fingerprinting" in categories


def test_absent_exif_block_skips_exif_rules_without_raising():
    findings = RiskEngine().assess(_metadata(None))
    assert [f.category for f in findings] == ["Platform Information"]


def test_missing_extracted_data_and_device_yields_nothing():
    record = Metadata(timestamp="t", file_info=FileInfo(uri="u"))
    assert RiskEngine().assess(record) == ()


def test_all_sentinel_exif_only_reports_platform():
    findings = RiskEngine().assess(_metadata(normalize_exif({})))
    assert [f.level for f in findings] == [RiskLevel.LOW]

