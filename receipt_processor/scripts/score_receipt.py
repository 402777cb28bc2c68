"""Score receipt JSON files without running the API.

Usage:
  receipt-score samples/target.json [more.json ...] [--breakdown] [--json]
  cat receipt.json | receipt-score -

Each file must hold one receipt in the same JSON shape the API accepts.
Invalid files are reported on stderr and make the exit status 1; the
remaining files are still scored.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from receipt_processor.core.observability import configure_logging
from receipt_processor.models.schemas import Receipt
from receipt_processor.services.points_engine import score_breakdown

logger = logging.getLogger(__name__)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def score_source(source: str) -> Dict[str, Any]:
    """Load one receipt and return ``{"source", "points", "rules"}``."""
    receipt = Receipt.model_validate_json(_read_source(source))
    rules = score_breakdown(receipt)
    return {"source": source, "points": sum(rules.values()), "rules": rules}


def _print_text(result: Dict[str, Any], breakdown: bool) -> None:
    print(f"{result['source']}: {result['points']} points")
    if breakdown:
        for name, points in result["rules"].items():
            print(f"  {name:<24}{points:>6}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute reward points for receipt JSON files.")
    parser.add_argument("files", nargs="+", help="receipt JSON files, or - for stdin")
    parser.add_argument("--breakdown", action="store_true", help="show the points awarded by each rule")
    parser.add_argument("--json", action="store_true", help="emit results as a JSON array")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("WARNING")
    results: List[Dict[str, Any]] = []
    failed = False
    for source in args.files:
        try:
            result = score_source(source)
        except (OSError, ValidationError) as exc:
            failed = True
            logger.debug("[score] failed source=%s", source, exc_info=exc)
            print(f"{source}: invalid receipt: {exc}", file=sys.stderr)
            continue
        results.append(result)
        if not args.json:
            _print_text(result, args.breakdown)
    if args.json:
        if not args.breakdown:
            results = [{"source": r["source"], "points": r["points"]} for r in results]
        print(json.dumps(results, indent=2))
    return 1 if failed else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
