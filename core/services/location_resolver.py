"""Opportunistic device location collection.

Both steps (position read and reverse geocode) are single attempts. Failures
are expected and never raised; they surface as `StepResult` statuses.
"""

from __future__ import annotations

from datetime import datetime, timezone

from loguru import logger

from core.models import Address, LocationData
from core.services.interfaces import GeoReading, LocationProvider, StepResult


def iso_utc(dt: datetime) -> str:
    """Format `dt` as an ISO-8601 UTC string with milliseconds and a `Z` suffix."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def iso_from_epoch_ms(timestamp_ms: float) -> str:
    return iso_utc(datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc))


class LocationResolver:
    """Resolve the current device location, with an address when available."""

    def __init__(self, provider: LocationProvider | None) -> None:
        self._provider = provider

    def resolve(self) -> StepResult[LocationData]:
        """Read one position and attempt one reverse geocode.

        Returns UNAVAILABLE without a provider or when permission is denied,
        FAILED when the permission prompt or position read raises.
        """
        if self._provider is None:
            return StepResult.unavailable("No location provider")
        try:
            if not self._provider.request_permission():
                logger.info("Location permission denied")
                return StepResult.unavailable("Location permission denied")
            reading = self._provider.current_position()
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.warning("Location access failed: {}", ex)
            return StepResult.failed(f"Location access failed: {ex}")

        address = self.resolve_address(reading)
        return StepResult.ok(
            LocationData(
                latitude=reading.latitude,
                longitude=reading.longitude,
                altitude=reading.altitude,
                accuracy=reading.accuracy,
                timestamp=iso_from_epoch_ms(reading.timestamp_ms),
                address=address.value,
            )
        )

    def resolve_address(self, reading: GeoReading) -> StepResult[Address]:
        """Reverse geocode `reading`; an empty result is UNAVAILABLE."""
        if self._provider is None:
            return StepResult.unavailable("No location provider")
        try:
            matches = self._provider.reverse_geocode(reading.latitude, reading.longitude)
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.warning("Reverse geocoding failed: {}", ex)
            return StepResult.failed(f"Reverse geocoding failed: {ex}")
        if not matches:
            return StepResult.unavailable("No address for coordinates")
        best = matches[0]
        return StepResult.ok(
            Address(
                street=best.street,
                city=best.city,
                region=best.region,
                country=best.country,
                postal_code=best.postal_code,
            )
        )
