from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EventType(str, Enum):
    SCAN_STARTED = "scan_started"
    SEARCH_STARTED = "search_started"
    SEARCH_RESULT = "search_result"
    SEARCH_FAILED = "search_failed"
    SYNTHESIS_STARTED = "synthesis_started"
    SCAN_COMPLETE = "scan_complete"
    ERROR = "error"


@dataclass
class SSEEvent:
    event: EventType
    data: dict[str, Any] = field(default_factory=dict)

    def format(self) -> str:
        return f"event: {self.event.value}\ndata: {json.dumps(self.data, ensure_ascii=False)}\n\n"
