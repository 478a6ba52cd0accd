"""
Score ad-hoc queries from the command line.

Run from backend with:
  python scripts/run_queries.py "best sunglasses 2025"
  python scripts/run_queries.py "best sunglasses 2025" "what is the capital of France"
  python scripts/run_queries.py --csv out.csv "query one" "query two"

One query uses the single-query path; 2-5 queries use the batch runner.
Requires OPENAI_API_KEY in env (or .env).
"""

import argparse
import sys
from pathlib import Path
from textwrap import shorten

from dotenv import load_dotenv

from ckr.config import Settings
from ckr.errors import ConfigurationError, JudgmentSourceError, QueryValidationError
from ckr.judgment import JudgmentSource
from ckr.logging_config import configure_logging
from ckr.report import build_csv, report_date
from ckr.scoring import run_batch, score_single


def _trunc(s: str, max_len: int = 72) -> str:
    return shorten(s, width=max_len, placeholder="…") if s else ""


def _section(title: str) -> None:
    print()
    print("=" * 80)
    print(f"  {title}")
    print("=" * 80)


def _sub(title: str) -> None:
    print(f"\n--- {title} ---")


def _run_single(query: str, source: JudgmentSource) -> int:
    _section("Single query")
    try:
        result = score_single(query, source)
    except (QueryValidationError, JudgmentSourceError) as e:
        print(f"Error: {e}")
        return 1
    print(f"Query: {result.query}")
    print(f"Needs search: {result.needs_search}")
    print(f"CCP: {result.ccp}%")
    for title, items in (
        ("Fanout queries", result.fanout_queries),
        ("Snippets", result.snippets),
        ("URLs", result.urls),
    ):
        _sub(f"{title} ({len(items)})")
        for i, item in enumerate(items, 1):
            print(f"  {i}. {_trunc(item, 70)}")
    return 0


def _run_batch(queries: list[str], source: JudgmentSource, settings: Settings, csv_path: str | None) -> int:
    _section(f"Batch of {len(queries)}")
    try:
        rows = run_batch(queries, source)
    except QueryValidationError as e:
        print(f"Error: {e}")
        return 1
    print(f"{'#':>3}  {'ccp':>4}  {'depth':>5}  {'query':<40}  error")
    print("-" * 80)
    for r in rows:
        ccp = "" if r.ccp is None else r.ccp
        depth = "" if r.search_depth is None else r.search_depth
        print(f"{r.index:>3}  {ccp:>4}  {depth:>5}  {_trunc(r.query, 40):<40}  {r.error}")

    if csv_path:
        csv_text = build_csv(rows, report_date(settings.report_timezone), generated_by=settings.report_generated_by)
        Path(csv_path).write_text(csv_text, encoding="utf-8")
        print(f"\nWrote {csv_path}")
    return 0


def main() -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Estimate web-search trigger likelihood (CCP) for queries.")
    parser.add_argument("queries", nargs="+", help="One query, or 2-5 queries for a batch")
    parser.add_argument("--csv", dest="csv_path", help="Write the batch report to this file")
    args = parser.parse_args()

    settings = Settings()
    configure_logging(settings.log_level)
    try:
        source = JudgmentSource.from_settings(settings)
    except ConfigurationError as e:
        print(f"Missing configuration: {e}")
        sys.exit(1)

    if len(args.queries) == 1:
        sys.exit(_run_single(args.queries[0], source))
    sys.exit(_run_batch(args.queries, source, settings, args.csv_path))


if __name__ == "__main__":
    main()
