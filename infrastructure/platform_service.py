"""Local platform collaborators: filesystem, device descriptor and location.

Location is simulated from settings since a desktop host has no GPS; the
provider behaves like a mobile geolocation API (permission, one reading,
reverse geocode).
"""

from __future__ import annotations

import platform
import time
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlparse

from loguru import logger

from core.models import DeviceInfo
from core.services.interfaces import GeocodeResult, GeoReading, RawFileInfo


def uri_to_path(uri: str) -> Path:
    """Map a `file://` URI or plain path to a filesystem path."""
    if uri.startswith("file://"):
        return Path(unquote(urlparse(uri).path))
    return Path(uri)


class LocalFileInfoProvider:
    def get_info(self, uri: str) -> RawFileInfo:
        """Stat `uri`; a missing file is reported, not raised."""
        path = uri_to_path(uri)
        if not path.exists():
            return RawFileInfo(exists=False)
        st = path.stat()
        return RawFileInfo(exists=True, is_directory=path.is_dir(), size=int(st.st_size))


class PlatformDeviceInfoProvider:
    """Describe the running host; settings may override each field."""

    def __init__(self, settings: Any | None = None) -> None:
        self._settings = settings

    def describe(self) -> DeviceInfo:
        get = self._settings.get if self._settings is not None else (lambda _k, d=None: d)
        return DeviceInfo(
            platform=str(get("device.platform", None) or platform.system().lower() or "unknown"),
            version=get("device.version", None) or platform.release(),
            is_tv=bool(get("device.is_tv", False)),
        )


class DeniedLocationProvider:
    """Location service whose permission prompt is always declined."""

    def request_permission(self) -> bool:
        return False

    def current_position(self) -> GeoReading:
        raise PermissionError("Location permission not granted")

    def reverse_geocode(self, latitude: float, longitude: float) -> list[GeocodeResult]:
        return []


class SettingsLocationProvider:
    """Simulated device GPS configured under the `location.*` settings keys."""

    def __init__(self, settings: Any) -> None:
        self._settings = settings

    def request_permission(self) -> bool:
        granted = bool(self._settings.get("location.enabled", False))
        logger.debug("Location permission {}", "granted" if granted else "denied")
        return granted

    def current_position(self) -> GeoReading:
        lat = self._settings.get("location.latitude")
        lon = self._settings.get("location.longitude")
        if lat is None or lon is None:
            raise RuntimeError("No position fix available")
        return GeoReading(
            latitude=float(lat),
            longitude=float(lon),
            altitude=self._settings.get("location.altitude"),
            accuracy=self._settings.get("location.accuracy"),
            timestamp_ms=time.time() * 1000.0,
        )

    def reverse_geocode(self, latitude: float, longitude: float) -> list[GeocodeResult]:
        address = self._settings.get("location.address")
        if not isinstance(address, dict) or not address:
            return []
        return [GeocodeResult.from_dict(address)]
