"""ScandalScope - controversy history search

Simple CLI for scanning one person's controversy history.
"""

import argparse
import asyncio
import json
import sys

from scandalscope.agents.orchestrator import ScandalOrchestrator
from scandalscope.config import get_settings
from scandalscope.errors import ScandalScopeError
from scandalscope.services.logger import configure_logging


def print_report(data: dict) -> None:
    incidents = data.get("incidents", [])
    print(f"\n[*] {len(incidents)} incident(s)")
    for i, incident in enumerate(incidents, 1):
        print(f"\n{i}. {incident.get('onset', '?')} -> {incident.get('resolution', '?')}  [{incident.get('category', '')}]")
        print(f"   {incident.get('description', '')}")
        print(f"   Risk score: {incident.get('riskScore') or 'n/a'} / 100")
        print(f"   Sentiment: negative {incident.get('negativeRate', '?')} / positive {incident.get('positiveRate', '?')}")
        print(f"   Impact: {incident.get('impact', '')}")
        for reaction in incident.get("socialReactions", []):
            source = f" ({reaction['sourceUrl']})" if reaction.get("sourceUrl") else ""
            print(f"     - \"{reaction.get('comment', '')}\"{source}")


async def run_scan(name: str, model: str | None = None, as_json: bool = False) -> int:
    """Run a scan on the given name and print progress."""
    settings = get_settings()
    configure_logging(settings, log_to_file=False)

    print(f"Scanning: {name}")
    print("-" * 50)

    orchestrator = ScandalOrchestrator(settings, model=model)
    try:
        async for event in orchestrator.scan(name):
            event_type = event.event.value
            data = event.data

            if event_type == "scan_started":
                print(f"\n[*] Searching {data.get('total')} queries...")

            elif event_type == "search_result":
                print(".", end="", flush=True)

            elif event_type == "search_failed":
                print("x", end="", flush=True)

            elif event_type == "synthesis_started":
                print(f"\n\n[+] Analysing {data.get('evidence_count')} articles with {data.get('model')}...")

            elif event_type == "scan_complete":
                print(f"\n[*] Scan complete in {data.get('runtime_ms')}ms")
                print(f"   Highest risk score: {data.get('risk_score')}")
                if as_json:
                    print(json.dumps(data["data"], ensure_ascii=False, indent=2))
                else:
                    print_report(data["data"])
    except (ScandalScopeError, RuntimeError, ValueError) as e:
        print(f"\n[!] Error: {e}", file=sys.stderr)
        return 1
    return 0


def main():
    parser = argparse.ArgumentParser(description="ScandalScope controversy history search")
    parser.add_argument("--name", "-n", required=True, help="Name of the person to scan")
    parser.add_argument("--model", "-m", help="Model to use (default: from config)")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")

    args = parser.parse_args()

    sys.exit(asyncio.run(run_scan(args.name, args.model, args.json)))


if __name__ == "__main__":
    main()
