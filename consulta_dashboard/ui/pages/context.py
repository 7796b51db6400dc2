from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from consulta_dashboard.aggregation.pipeline import DashboardData
from consulta_dashboard.config import Settings


@dataclass
class PageContext:
    data: DashboardData
    settings: Settings
    load_diagnostics: Dict[str, Any] = field(default_factory=dict)
