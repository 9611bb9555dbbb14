"""
View constants centralized for reuse across view modules.

Risk colours and banner texts shown on the reveal view.
"""

from __future__ import annotations

from core.models import RiskLevel

RISK_COLORS: dict[RiskLevel, str] = {
    RiskLevel.CRITICAL: "#ef4444",
    RiskLevel.HIGH: "#f97316",
    RiskLevel.MEDIUM: "#eab308",
    RiskLevel.LOW: "#22c55e",
}
DEFAULT_RISK_COLOR: str = "#8b8ba7"

WARNING_TITLE: str = "SECURITY DEMONSTRATION"
WARNING_TEXT: str = (
    "This screen shows what data a malicious app could harvest from your photos "
    "without your knowledge. This is for educational purposes only."
)

STATISTICS_LABELS: list[tuple[str, str]] = [
    ("total_images", "Images Processed"),
    ("images_with_location", "With Location"),
    ("images_with_exif", "With EXIF"),
    ("unique_devices", "Unique Devices"),
    ("critical_risks", "Critical Risks"),
    ("high_risks", "High Risks"),
]
