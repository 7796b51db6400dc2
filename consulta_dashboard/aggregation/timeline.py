"""
Daily contribution timeline within the consultation window.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Set
from zoneinfo import ZoneInfo

import pandas as pd

from consulta_dashboard.config import CONSULTATION_WINDOW, DEFAULT_TIMEZONE, DateWindow
from consulta_dashboard.data.records import (
    classify_date_value,
    format_date_key,
    is_record,
    normalize_author,
    normalize_date,
    resolve_raw,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimelineSeries:
    dates: List[str]
    contributions: List[int]
    contributors: List[int]
    skipped: Dict[str, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.dates)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "date": pd.to_datetime(self.dates, format="%d/%m/%Y"),
                "date_key": self.dates,
                "contributions": self.contributions,
                "contributors": self.contributors,
            },
            columns=["date", "date_key", "contributions", "contributors"],
        )


def process_timeline(
    records: Sequence[Any],
    window: DateWindow = CONSULTATION_WINDOW,
    timezone: str = DEFAULT_TIMEZONE,
) -> TimelineSeries:
    """Bucket records by calendar day.

    Dates may be epoch milliseconds, ISO-like strings or ``dd/mm/yyyy``
    strings. Records whose date is missing, unparseable or outside ``window``
    (inclusive) are skipped and tallied in ``skipped`` by reason.
    """
    tz = ZoneInfo(timezone)
    counts: Dict[dt.date, int] = {}
    authors_by_day: Dict[dt.date, Set[str]] = {}
    skipped: Counter = Counter()

    for index, record in enumerate(records):
        if not is_record(record):
            skipped["not_a_record"] += 1
            continue
        raw = resolve_raw(record, "date")
        if raw is None:
            skipped["missing"] += 1
            continue
        tagged = classify_date_value(raw)
        if tagged is None:
            skipped["unsupported_type"] += 1
            logger.debug("Record %d: unsupported date value %r", index, raw)
            continue
        day = normalize_date(tagged, tz)
        if day is None:
            skipped["unparsed"] += 1
            logger.warning("Record %d: could not parse date %r", index, raw)
            continue
        if not window.contains(day):
            skipped["out_of_window"] += 1
            continue

        counts[day] = counts.get(day, 0) + 1
        day_authors = authors_by_day.setdefault(day, set())
        author = normalize_author(record)
        if author:
            day_authors.add(author)

    ordered = sorted(counts)
    series = TimelineSeries(
        dates=[format_date_key(day) for day in ordered],
        contributions=[counts[day] for day in ordered],
        contributors=[len(authors_by_day.get(day, ())) for day in ordered],
        skipped=dict(skipped),
    )
    if skipped:
        logger.info("Timeline skipped records: %s", dict(skipped))
    return series
