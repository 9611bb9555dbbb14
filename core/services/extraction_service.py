"""Orchestrates metadata collection for one selected image.

Collection order is fixed: file info, picker data, device info, location, then
risk assessment once every other field holds a value or its fallback. Nothing
here raises for a collaborator failure; the record degrades instead.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
import json

from loguru import logger

from core.models import DeviceInfo, ExtractedData, FileInfo, Metadata
from core.rules.engine import RiskEngine
from core.services.capture_normalizer import (
    missing_file_info,
    normalize_file_info,
    normalize_selection,
)
from core.services.interfaces import (
    DeviceInfoProvider,
    FileInfoProvider,
    LocationProvider,
    SelectionResult,
    StepResult,
    StepStatus,
)
from core.services.location_resolver import LocationResolver, iso_utc


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MetadataExtractor:
    """Builds a `Metadata` record from platform collaborators."""

    def __init__(
        self,
        file_info_provider: FileInfoProvider,
        device_info_provider: DeviceInfoProvider,
        location_provider: LocationProvider | None = None,
        risk_engine: RiskEngine | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Create an extractor.

        Args:
            file_info_provider: Filesystem lookup for image URIs.
            device_info_provider: Source of the device descriptor.
            location_provider: Optional geolocation service; None disables it.
            risk_engine: Rule engine (defaults to `RiskEngine`).
            clock: Returns the capture time (defaults to UTC now).
        """
        self._files = file_info_provider
        self._device = device_info_provider
        self._location = LocationResolver(location_provider)
        self._engine = risk_engine or RiskEngine()
        self._clock = clock or _utc_now

    def read_file_info(self, uri: str) -> StepResult[FileInfo]:
        try:
            raw = self._files.get_info(uri)
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.warning("File info lookup failed for {}: {}", uri, ex)
            return StepResult.failed(f"File info lookup failed: {ex}")
        return StepResult.ok(normalize_file_info(uri, raw))

    def read_selection(self, selection: SelectionResult | None) -> StepResult[ExtractedData]:
        """Normalize the picker result; a malformed payload degrades to no data."""
        if selection is None:
            return StepResult.unavailable("No image selection")
        try:
            return StepResult.ok(normalize_selection(selection))
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.warning("Selection normalization failed for {}: {}", selection.uri, ex)
            return StepResult.failed(f"Selection normalization failed: {ex}")

    def read_device_info(self) -> StepResult[DeviceInfo]:
        try:
            return StepResult.ok(self._device.describe())
        except Exception as ex:  # pylint: disable=broad-exception-caught
            logger.warning("Device info lookup failed: {}", ex)
            return StepResult.failed(f"Device info lookup failed: {ex}")

    def extract(self, uri: str, selection: SelectionResult | None) -> Metadata:
        """Collect, normalize and assess metadata for the image at `uri`."""
        errors: list[str] = []
        timestamp = iso_utc(self._clock())

        file_step = self.read_file_info(uri)
        if not file_step.is_ok and file_step.reason:
            errors.append(file_step.reason)
        file_info = file_step.value or missing_file_info(uri)

        extract_step = self.read_selection(selection)
        if extract_step.status is StepStatus.FAILED and extract_step.reason:
            errors.append(extract_step.reason)

        device_step = self.read_device_info()
        if not device_step.is_ok and device_step.reason:
            errors.append(device_step.reason)

        location_step = self._location.resolve()
        logger.debug("Location step: {} ({})", location_step.status.value, location_step.reason)

        draft = Metadata(
            timestamp=timestamp,
            file_info=file_info,
            extracted_data=extract_step.value,
            device_info=device_step.value,
            location_data=location_step.value,
            error="; ".join(errors) or None,
        )
        metadata = replace(draft, risk_assessment=self._engine.assess(draft))
        logger.info("Metadata harvested: {}", json.dumps(metadata.to_dict(), default=str))
        return metadata
