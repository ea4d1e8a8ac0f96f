from __future__ import annotations

import time
from typing import AsyncGenerator

from loguru import logger

from scandalscope.agents.synthesis_agent import SynthesisAgent
from scandalscope.config import Settings
from scandalscope.errors import InvalidRequestError
from scandalscope.llm_client import CompletionClient
from scandalscope.models.events import SSEEvent
from scandalscope.models.report import ScandalReport
from scandalscope.services import logger as log_service
from scandalscope.services import streaming
from scandalscope.services.evidence_collector import run_searches
from scandalscope.services.query_expander import expand_queries
from scandalscope.services.report_parser import extract_report


class ScandalOrchestrator:
    """Runs one scan: expand queries, collect evidence, synthesize, extract.

    Search failures degrade to fewer results. Synthesis and extraction
    failures abort the scan; no partial report is produced.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        llm: CompletionClient | None = None,
        model: str | None = None,
    ):
        self.settings = settings
        self.synthesis = SynthesisAgent(settings, client=llm, model=model)

    @staticmethod
    def _normalize_name(subject_name: str | None) -> str:
        name = " ".join((subject_name or "").split())
        if not name:
            raise InvalidRequestError("influencerName is required")
        return name

    async def scan(self, subject_name: str) -> AsyncGenerator[SSEEvent, None]:
        """Run a scan, yielding progress events and a final report event.

        Fatal errors propagate after being logged.
        """
        name = self._normalize_name(subject_name)
        start = time.monotonic()
        log_service.log_event("scan_started", "Scan started", influencer_name=name)

        queries = expand_queries(name)
        yield streaming.scan_started(name, queries)

        evidence, search_events = await run_searches(queries, settings=self.settings)
        for event in search_events:
            yield event
        logger.info(f"Collected {len(evidence)} evidence records from {len(queries)} queries")

        yield streaming.synthesis_started(len(evidence), self.synthesis.model)
        raw_text = await self.synthesis.synthesize(name, evidence)
        report = extract_report(raw_text)

        runtime_ms = int((time.monotonic() - start) * 1000)
        log_service.log_event(
            "scan_complete",
            "Scan complete",
            influencer_name=name,
            incidents=len(report.incidents),
            risk_score=report.max_risk_score,
            runtime_ms=runtime_ms,
        )
        yield streaming.scan_complete(report, runtime_ms)

    async def run(self, subject_name: str) -> ScandalReport:
        name = self._normalize_name(subject_name)
        queries = expand_queries(name)
        evidence, _ = await run_searches(queries, settings=self.settings)
        raw_text = await self.synthesis.synthesize(name, evidence)
        return extract_report(raw_text)
