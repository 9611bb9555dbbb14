"""ViewModel for the reveal view: current findings and session statistics."""

from __future__ import annotations

from app.viewmodels.session_vm import SessionVM
from app.views.constants import DEFAULT_RISK_COLOR, RISK_COLORS
from core.models import DisplaySection, RiskFinding, SessionStatistics
from core.services.display_service import project_metadata


class RevealVM:
    def __init__(self, session: SessionVM) -> None:
        self._session = session

    def sections(self) -> list[DisplaySection]:
        """Display sections for the current metadata; empty when none is set."""
        current = self._session.current_metadata
        return project_metadata(current) if current is not None else []

    def findings(self) -> list[tuple[RiskFinding, str]]:
        """Current risk findings paired with their display colour."""
        current = self._session.current_metadata
        if current is None:
            return []
        return [(f, RISK_COLORS.get(f.level, DEFAULT_RISK_COLOR)) for f in current.risk_assessment]

    def statistics(self) -> SessionStatistics:
        return self._session.statistics()

    def clear(self) -> None:
        """Delete all collected metadata for the session."""
        self._session.clear()
