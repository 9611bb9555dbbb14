"""Session-scoped store of harvested metadata and the current selection."""

from __future__ import annotations

import itertools
import threading

from loguru import logger

from core.models import NOT_AVAILABLE, Metadata, RiskLevel, SessionEntry, SessionStatistics


class SessionVM:
    """In-memory, append-only history for one running session.

    Construct one per session and pass it to the view-models that read or
    mutate it. Appends and clears are atomic with respect to each other.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._entries: list[SessionEntry] = []
        self.current_image: str | None = None
        self.current_metadata: Metadata | None = None
        self.processed_image: str | None = None

    @property
    def entries(self) -> list[SessionEntry]:
        """Snapshot of the history in arrival order."""
        with self._lock:
            return list(self._entries)

    def append(self, metadata: Metadata) -> SessionEntry:
        """Assign the next identifier to `metadata` and append it."""
        return self._push(metadata, make_current=False)

    def record(self, metadata: Metadata) -> SessionEntry:
        """Make `metadata` current and append it to the history together."""
        return self._push(metadata, make_current=True)

    def _push(self, metadata: Metadata, make_current: bool) -> SessionEntry:
        with self._lock:
            entry = SessionEntry(id=next(self._ids), metadata=metadata)
            self._entries.append(entry)
            if make_current:
                self.current_metadata = metadata
            total = len(self._entries)
        logger.info("Harvested entry {} (total {})", entry.id, total)
        return entry

    def set_current_image(self, uri: str | None) -> None:
        """Select a new current image; any processed result is discarded."""
        with self._lock:
            self.current_image = uri
            self.processed_image = None

    def set_processed_image(self, uri: str | None) -> None:
        with self._lock:
            self.processed_image = uri

    def clear(self) -> None:
        """Drop all history and reset the current image/metadata pointers."""
        with self._lock:
            removed = len(self._entries)
            self._entries = []
            self.current_image = None
            self.current_metadata = None
            self.processed_image = None
        logger.info("Cleared {} harvested entries", removed)

    def statistics(self) -> SessionStatistics:
        """Recompute aggregate counts over the current history."""
        records = [e.metadata for e in self.entries]
        devices: set[tuple[str, str]] = set()
        for md in records:
            exif = md.exif
            if exif is None or NOT_AVAILABLE in (exif.make, exif.model):
                continue
            devices.add((exif.make, exif.model))
        return SessionStatistics(
            total_images=len(records),
            images_with_location=sum(1 for md in records if md.location_data is not None),
            images_with_exif=sum(1 for md in records if md.exif is not None),
            unique_devices=len(devices),
            critical_risks=_count_level(records, RiskLevel.CRITICAL),
            high_risks=_count_level(records, RiskLevel.HIGH),
        )

    @property
    def entry_count(self) -> int:
        """Number of harvested entries."""
        with self._lock:
            return len(self._entries)


def _count_level(records: list[Metadata], level: RiskLevel) -> int:
    return sum(1 for md in records for f in md.risk_assessment if f.level is level)
