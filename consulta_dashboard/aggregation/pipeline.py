"""
Runs every aggregator over one loaded dataset.

The aggregators share no state, so this module only bundles their outputs
(and the diagnostics the data-quality tab shows) into one object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

from consulta_dashboard.aggregation.categories import CategoryRanking, process_content_analysis
from consulta_dashboard.aggregation.institutions import InstitutionRanking, process_institutions
from consulta_dashboard.aggregation.stats import ContributionStats, calculate_stats
from consulta_dashboard.aggregation.timeline import TimelineSeries, process_timeline
from consulta_dashboard.aggregation.words import WordCloudResult, build_word_cloud
from consulta_dashboard.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardData:
    stats: ContributionStats
    timeline: TimelineSeries
    content: Dict[str, CategoryRanking]
    words: WordCloudResult
    institutions: InstitutionRanking

    @property
    def diagnostics(self) -> Dict[str, Any]:
        return {
            "total_contributions": self.stats.total_contributions,
            "distinct_authors": self.stats.distinct_authors,
            "timeline_days": len(self.timeline),
            "timeline_skipped": dict(self.timeline.skipped),
            "category_distinct_values": {
                key: ranking.distinct_values for key, ranking in self.content.items()
            },
            "texts_found": f"{self.words.texts_found}/{self.words.records_seen}",
            "institutions": len(self.institutions.items),
        }


def build_dashboard_data(
    records: Sequence[Any],
    institutions: Mapping[str, int],
    settings: Settings,
) -> DashboardData:
    data = DashboardData(
        stats=calculate_stats(records, settings.stats_constants),
        timeline=process_timeline(records, settings.window, settings.timezone),
        content=process_content_analysis(records, settings.category_fields),
        words=build_word_cloud(records),
        institutions=process_institutions(institutions),
    )
    logger.debug("Dashboard diagnostics: %s", data.diagnostics)
    return data
