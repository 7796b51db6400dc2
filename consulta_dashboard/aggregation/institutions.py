"""
Institution breakdown for the donut chart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Tuple

import pandas as pd

from consulta_dashboard.aggregation.categories import rank_counts


@dataclass(frozen=True)
class InstitutionRanking:
    items: List[Tuple[str, int]]

    @property
    def labels(self) -> List[str]:
        return [name for name, _ in self.items]

    @property
    def counts(self) -> List[int]:
        return [count for _, count in self.items]

    @property
    def total(self) -> int:
        return sum(self.counts)

    def to_frame(self) -> pd.DataFrame:
        frame = pd.DataFrame(self.items, columns=["institution", "contributions"])
        total = self.total
        frame["share"] = frame["contributions"] / total * 100 if total else 0.0
        return frame


def process_institutions(mapping: Mapping[str, int]) -> InstitutionRanking:
    """Rank institutions by contribution count; ties keep the mapping's order."""
    return InstitutionRanking(items=rank_counts(dict(mapping)))
