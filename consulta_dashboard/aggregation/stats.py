"""
Headline counters for the overview tab.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import pandas as pd

from consulta_dashboard.config import STATS_CONSTANTS, StatsConstants
from consulta_dashboard.data.records import is_record, normalize_author

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContributionStats:
    total_contributions: int
    distinct_authors: int
    individual_contributors: int
    institutions: int
    dialogue_groups: int
    considered_contributions: int
    implementation_contributions: int

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {"metric": "total_contributions", "value": self.total_contributions},
                {"metric": "distinct_authors", "value": self.distinct_authors},
                {"metric": "individual_contributors", "value": self.individual_contributors},
                {"metric": "institutions", "value": self.institutions},
                {"metric": "dialogue_groups", "value": self.dialogue_groups},
            ]
        )


def calculate_stats(
    records: Sequence[Any],
    constants: StatsConstants = STATS_CONSTANTS,
) -> ContributionStats:
    """Count contributions and distinct authors.

    Institution, individual and dialogue-group totals are not derivable from
    the records (no contributor-type column), so they are copied from
    ``constants`` unchanged.
    """
    authors = set()
    for record in records:
        if not is_record(record):
            continue
        author = normalize_author(record)
        if author:
            authors.add(author)

    stats = ContributionStats(
        total_contributions=len(records),
        distinct_authors=len(authors),
        individual_contributors=constants.individual_contributors,
        institutions=constants.institutions,
        dialogue_groups=constants.dialogue_groups,
        considered_contributions=constants.considered_contributions,
        implementation_contributions=constants.implementation_contributions,
    )
    logger.info(
        "Stats: %d contributions, %d distinct authors",
        stats.total_contributions,
        stats.distinct_authors,
    )
    return stats
