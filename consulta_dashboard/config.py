"""
Application-wide configuration constants and helper utilities.

Everything the aggregation pipeline needs that cannot be derived from the
dataset itself lives here: the consultation window, category limits, the
stopword list and the fixed totals published by the consultation team.
"""

from __future__ import annotations

import datetime as dt
import logging
import os
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Ensure .env loaded for local dev (non-override)
load_dotenv()


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("overview", "Visão geral"),
    TabConfig("content_analysis", "Análise de conteúdo"),
    TabConfig("words", "Nuvem de palavras"),
    TabConfig("data_quality", "Qualidade dos dados"),
]


@dataclass(frozen=True)
class DateWindow:
    """Inclusive calendar window; dates outside it are dropped from the timeline."""

    start: dt.date
    end: dt.date

    def contains(self, day: dt.date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class CategoryField:
    key: str
    label: str
    top_n: int


@dataclass(frozen=True)
class SizeScale:
    scale_factor: int
    base_offset: int
    min_size: int
    max_size: int


@dataclass(frozen=True)
class StatsConstants:
    # The dataset carries no contributor-type column, so these figures come
    # from the consultation team's manual count.
    individual_contributors: int = 75
    institutions: int = 16
    dialogue_groups: int = 4
    considered_contributions: int = 95
    implementation_contributions: int = 120


CONSULTATION_WINDOW = DateWindow(start=dt.date(2025, 9, 4), end=dt.date(2025, 10, 4))
DEFAULT_TIMEZONE = "America/Sao_Paulo"

CATEGORY_FIELDS: List[CategoryField] = [
    CategoryField("chapter", "Capítulos", 5),
    CategoryField("section", "Seções", 10),
    CategoryField("mission", "Missões", 8),
    CategoryField("goal", "Metas", 15),
    CategoryField("action", "Ações Estratégicas", 15),
]

# "NDA" = não se aplica; compared after trim, case-insensitively
CATEGORY_SENTINELS: FrozenSet[str] = frozenset({"", "nda", "não identificado"})
MISSION_PLACEHOLDER = "Não especificada"

TEXT_FIELDS: Tuple[str, ...] = (
    "contribution_text",
    "action",
    "goal",
    "mission",
    "chapter",
    "section",
    "comment",
    "contribution",
)
WORD_TOP_N = 80
WORD_MIN_LENGTH = 3
TEXT_FOUND_MIN_LENGTH = 3

CLOUD_SCALE = SizeScale(scale_factor=48, base_offset=12, min_size=14, max_size=56)
SPAN_SCALE = SizeScale(scale_factor=7, base_offset=1, min_size=1, max_size=8)

STOPWORDS: FrozenSet[str] = frozenset(
    """
    e de da do que a o para com em na no se por é um uma os as dos das mais ou
    ao aos pela pelo sua seu seus suas são ser ter como sobre pode podem deve
    devem foi foram será serão está estão este esta estes estas esse essa esses
    essas aquele aquela aqueles aquelas isso isto já quando muito muitos muitas
    bem só também ainda mas não sim nos nas num numa pelos pelas onde qual
    quais quem porque então assim desde até durante depois antes entre sem sob
    contra através mediante segundo conforme além dentro fora junto longe perto
    acima abaixo atrás diante vez vezes tanto tanta tantos tantas todo toda
    todos todas cada outro outra outros outras mesmo mesma mesmos mesmas
    próprio própria próprios próprias tal tais qualquer quaisquer algum alguma
    alguns algumas nenhum nenhuma nenhuns nenhumas certo certa certos certas
    vários várias pouco pouca poucos poucas bastante bastantes demasiado
    demasiada demasiados demasiadas meio meia meios meias
    """.split()
)

STATS_CONSTANTS = StatsConstants()

# Used when colaboracoes_coletivas.json cannot be loaded
DEFAULT_INSTITUTIONS: Dict[str, int] = {
    "COALIZÃO BRASIL, CLIMA, FLORESTAS E AGRICULTURA": 74,
    "Diálogos Regionais": 61,
    "Ibá - Indústria Brasileira de Árvores": 56,
    "Instituto de Engenharia": 51,
    "DECEIIS/SECTICS/Ministério da Saúde": 37,
    "ASSOBIO": 30,
    "Iniciativa Amazônia+10": 28,
    "CNI - Confederação Nacional da Indústria": 16,
    "SocioBio": 16,
    "ABIHV – Associação Brasileira da Indústria do Hidrogênio Verde": 13,
}

CHART_COLORS = [
    "#2d5016", "#8b5a2b", "#1a4731", "#0d9488", "#059669", "#6b8e23",
    "#2d3748", "#16a085", "#27ae60", "#f39c12", "#e74c3c", "#4a5568",
    "#95a5a6", "#3498db", "#9b59b6", "#e67e22", "#34495e",
]
WORD_COLORS = ["#2d5016", "#0d9488", "#6B5B47", "#8B7355"]
TIMELINE_COLOR = "#0b6d65"

SHOW_MORE_INITIAL = 5
CACHE_TTL_SECONDS = 300


@dataclass(frozen=True)
class Settings:
    data_source: str = "consulta_pndbio_data.json"
    institutions_source: str = "colaboracoes_coletivas.json"
    timezone: str = DEFAULT_TIMEZONE
    word_cloud_mode: str = "image"
    log_level: str = "INFO"
    window: DateWindow = CONSULTATION_WINDOW
    category_fields: Tuple[CategoryField, ...] = tuple(CATEGORY_FIELDS)
    stats_constants: StatsConstants = STATS_CONSTANTS


def _get_secret(name: str) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        import streamlit as st

        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else None
    except Exception:
        # st.secrets raises outside the Streamlit runtime when no secrets.toml exists
        return None
    return None


def _env(name: str, default: str, lookup: Optional[Dict[str, str]] = None) -> str:
    value = _get_secret(name) if lookup is None else lookup.get(name)
    if value is None or not str(value).strip():
        return default
    return str(value).strip()


def _valid_timezone(name: str) -> str:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.warning("Unknown timezone %r (%s); using %s", name, exc, DEFAULT_TIMEZONE)
        return DEFAULT_TIMEZONE
    return name


def load_settings(lookup: Optional[Dict[str, str]] = None) -> Settings:
    """Build runtime settings from env/secrets, or from an explicit mapping in tests."""
    mode = _env("CONSULTA_WORD_CLOUD_MODE", "image", lookup).lower()
    if mode not in {"image", "spans"}:
        mode = "image"
    return Settings(
        data_source=_env("CONSULTA_DATA_SOURCE", Settings.data_source, lookup),
        institutions_source=_env("CONSULTA_INSTITUTIONS_SOURCE", Settings.institutions_source, lookup),
        timezone=_valid_timezone(_env("CONSULTA_TIMEZONE", DEFAULT_TIMEZONE, lookup)),
        word_cloud_mode=mode,
        log_level=_env("LOG_LEVEL", "INFO", lookup).upper(),
    )
