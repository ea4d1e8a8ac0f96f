from __future__ import annotations

import json

from pydantic import ValidationError

from scandalscope.errors import MalformedResponseError
from scandalscope.models.report import ScandalReport


def _format_errors(exc: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    ]


def extract_report(raw_text: str) -> ScandalReport:
    """Parse an incident report out of raw completion text.

    Leading prose before the first ``{`` is discarded and everything from that
    brace to the end is parsed as one JSON document.
    """
    start = raw_text.find("{")
    if start == -1:
        raise MalformedResponseError("Completion response contains no JSON object")

    try:
        payload = json.loads(raw_text[start:])
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"Completion response is not valid JSON ({e.msg} at position {e.pos})") from e

    try:
        report = ScandalReport.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError("Completion response does not match the report schema", _format_errors(e)) from e

    if not report.incidents:
        raise MalformedResponseError("Completion response contains no incidents")
    return report
