from __future__ import annotations

from fastapi import Depends

from scandalscope.agents.orchestrator import ScandalOrchestrator
from scandalscope.config import Settings, get_settings


def get_orchestrator(settings: Settings = Depends(get_settings)) -> ScandalOrchestrator:
    """One orchestrator per request, built from the shared settings."""
    return ScandalOrchestrator(settings)
