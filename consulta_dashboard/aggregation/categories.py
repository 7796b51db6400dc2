"""
Content analysis: ranked chapters, sections, missions, goals and actions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence

import pandas as pd

from consulta_dashboard.config import (
    CATEGORY_FIELDS,
    CATEGORY_SENTINELS,
    MISSION_PLACEHOLDER,
    CategoryField,
)
from consulta_dashboard.data.records import is_record, resolve_text

logger = logging.getLogger(__name__)

ACTION_FIELD = "action"
MISSION_FIELD = "mission"


@dataclass(frozen=True)
class CategoryCount:
    value: str
    count: int
    mission: Optional[str] = None


@dataclass(frozen=True)
class CategoryRanking:
    field: CategoryField
    items: List[CategoryCount]
    distinct_values: int

    def __len__(self) -> int:
        return len(self.items)

    def to_frame(self) -> pd.DataFrame:
        columns = ["rank", "value", "count"]
        if self.field.key == ACTION_FIELD:
            columns.append("mission")
        rows = []
        for rank, item in enumerate(self.items, start=1):
            row = {"rank": rank, "value": item.value, "count": item.count}
            if self.field.key == ACTION_FIELD:
                row["mission"] = item.mission
            rows.append(row)
        return pd.DataFrame(rows, columns=columns)


def clean_category_value(
    raw: Optional[str],
    sentinels: FrozenSet[str] = CATEGORY_SENTINELS,
) -> Optional[str]:
    """Trim a category value; None for missing or sentinel placeholders."""
    if raw is None:
        return None
    value = raw.strip()
    if value.casefold() in sentinels:
        return None
    return value


def rank_counts(counts: Dict[str, int], limit: Optional[int] = None) -> List[tuple]:
    """Sort (key, count) pairs by count descending; ties keep insertion order."""
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return ranked if limit is None else ranked[:limit]


def process_content_analysis(
    records: Sequence[Any],
    fields: Iterable[CategoryField] = CATEGORY_FIELDS,
    sentinels: FrozenSet[str] = CATEGORY_SENTINELS,
    mission_placeholder: str = MISSION_PLACEHOLDER,
) -> Dict[str, CategoryRanking]:
    """Count each configured category field and keep its top-N values.

    Actions remember the mission seen the first time the action appears;
    later occurrences with a different mission do not replace it.
    """
    fields = list(fields)
    counters: Dict[str, Dict[str, int]] = {f.key: {} for f in fields}
    action_missions: Dict[str, str] = {}

    for index, record in enumerate(records):
        if not is_record(record):
            logger.warning("Record %d is not an object; skipped in content analysis", index)
            continue
        try:
            mission = clean_category_value(resolve_text(record, MISSION_FIELD), sentinels)
            for category in fields:
                value = clean_category_value(resolve_text(record, category.key), sentinels)
                if value is None:
                    continue
                counter = counters[category.key]
                if category.key == ACTION_FIELD and value not in counter:
                    action_missions[value] = mission or mission_placeholder
                counter[value] = counter.get(value, 0) + 1
        except (AttributeError, TypeError, ValueError) as exc:
            logger.error("Error processing record %d: %s", index, exc)

    rankings: Dict[str, CategoryRanking] = {}
    for category in fields:
        counter = counters[category.key]
        items = [
            CategoryCount(
                value=value,
                count=count,
                mission=action_missions.get(value) if category.key == ACTION_FIELD else None,
            )
            for value, count in rank_counts(counter, category.top_n)
        ]
        rankings[category.key] = CategoryRanking(
            field=category,
            items=items,
            distinct_values=len(counter),
        )

    logger.info(
        "Content analysis: %s",
        {key: ranking.distinct_values for key, ranking in rankings.items()},
    )
    return rankings
