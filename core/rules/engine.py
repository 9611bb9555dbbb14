"""Privacy risk rules evaluated against a normalized metadata record."""

from __future__ import annotations

from collections.abc import Callable

from core.models import NOT_AVAILABLE, Metadata, RiskFinding, RiskLevel

Rule = Callable[[Metadata], RiskFinding | None]


def _na(value: object) -> str:
    return "N/A" if value is None else str(value)


def _location_tracking(md: Metadata) -> RiskFinding | None:
    loc = md.location_data
    if loc is None:
        return None
    return RiskFinding(
        level=RiskLevel.HIGH,
        category="Location Tracking",
        description=(
            "Your current GPS location was captured. An attacker could track your movements."
        ),
        data=f"{loc.latitude}, {loc.longitude}",
    )


def _address_exposure(md: Metadata) -> RiskFinding | None:
    loc = md.location_data
    if loc is None or loc.address is None:
        return None
    return RiskFinding(
        level=RiskLevel.CRITICAL,
        category="Address Exposure",
        description="Your physical address could be determined from GPS coordinates.",
        data=f"{_na(loc.address.street)}, {_na(loc.address.city)}",
    )


def _photo_location(md: Metadata) -> RiskFinding | None:
    exif = md.exif
    if exif is None or exif.gps_latitude == NOT_AVAILABLE:
        return None
    return RiskFinding(
        level=RiskLevel.HIGH,
        category="Photo Location",
        description="The photo contains embedded GPS coordinates showing where it was taken.",
        data=f"{exif.gps_latitude}, {exif.gps_longitude}",
    )


def _device_fingerprinting(md: Metadata) -> RiskFinding | None:
    exif = md.exif
    if exif is None or exif.make == NOT_AVAILABLE:
        return None
    return RiskFinding(
        level=RiskLevel.MEDIUM,
        category="Device Fingerprinting",
        description="Camera make and model reveals device information for fingerprinting.",
        data=f"{exif.make} {exif.model}",
    )


def _timestamp_analysis(md: Metadata) -> RiskFinding | None:
    exif = md.exif
    if exif is None or exif.date_time == NOT_AVAILABLE:
        return None
    return RiskFinding(
        level=RiskLevel.MEDIUM,
        category="Timestamp Analysis",
        description="Photo timestamp reveals when the image was taken.",
        data=exif.date_time,
    )


def _platform_information(md: Metadata) -> RiskFinding | None:
    dev = md.device_info
    if dev is None:
        return None
    return RiskFinding(
        level=RiskLevel.LOW,
        category="Platform Information",
        description="Device platform and OS version collected.",
        data=f"{dev.platform} {dev.version}",
    )


# Order is part of the output contract.
DEFAULT_RULES: tuple[Rule, ...] = (
    _location_tracking,
    _address_exposure,
    _photo_location,
    _device_fingerprinting,
    _timestamp_analysis,
    _platform_information,
)


class RiskEngine:
    """Evaluates an ordered rule table; every rule is checked independently."""

    def __init__(self, rules: tuple[Rule, ...] = DEFAULT_RULES) -> None:
        self._rules = rules

    def assess(self, metadata: Metadata) -> tuple[RiskFinding, ...]:
        """Return findings in rule order, skipping rules whose condition is false."""
        findings: list[RiskFinding] = []
        for rule in self._rules:
            finding = rule(metadata)
            if finding is not None:
                findings.append(finding)
        return tuple(findings)
