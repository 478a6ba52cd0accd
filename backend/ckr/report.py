"""
Report Builder: turn batch rows into the downloadable CSV.

Layout: header row, one row per query, a blank line, then legend rows and
the generation date in the second column.
"""

import csv
import io
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ckr.scoring.schemas import BatchRow

HEADER = [
    "#",
    "Input_Query",
    "CCP (%)",
    "ChatGPT_Queries",
    "ChatGPT_Snippets",
    "ChatGPT_URLs",
    "Search_Depth",
    "Error (if any)",
]

CCP_LEGEND = "CCP = Likelihood a query triggers ChatGPT web-search reasoning"
DEPTH_LEGEND = "Search Depth = Number of ChatGPT Queries+Snippets+URLs"


def report_date(timezone: str = "Asia/Kolkata", now: Optional[datetime] = None) -> str:
    """Today's date as dd-mm-yyyy in the given timezone."""
    moment = now.astimezone(ZoneInfo(timezone)) if now else datetime.now(ZoneInfo(timezone))
    return moment.strftime("%d-%m-%Y")


def report_filename(prefix: str, date_str: str) -> str:
    return f"{prefix}_{date_str}.csv"


def _legend_row(text: str) -> list[str]:
    row = [""] * len(HEADER)
    row[1] = text
    return row


def build_csv(rows: list[BatchRow], date_str: str, generated_by: str = "ChatGPTKeyword.com") -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(HEADER)
    for r in rows:
        writer.writerow(
            [r.index, r.query, r.ccp, r.fanouts, r.snippets, r.urls, r.search_depth, r.error]
        )
    writer.writerow([])
    writer.writerow(_legend_row(CCP_LEGEND))
    writer.writerow(_legend_row(DEPTH_LEGEND))
    writer.writerow(_legend_row(f"Generated with ♡ by {generated_by} on {date_str}"))
    return buf.getvalue()
