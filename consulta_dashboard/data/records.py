"""
Tolerant access to contribution records.

Records arrive as loosely-typed JSON objects whose keys vary in casing and
accents across exports. Logical fields are resolved through ``FIELD_ALIASES``
(first match wins, exact before case-insensitive), and values that are not
strings or numbers are treated as missing.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from zoneinfo import ZoneInfo

import pandas as pd

FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "author": ("Autor", "autor", "AUTOR"),
    "date": ("Data", "data", "DATE", "date"),
    "chapter": ("Capítulo", "capitulo"),
    "section": ("Seção", "secao"),
    "mission": ("Missão", "missao"),
    "goal": ("Meta", "meta"),
    "action": ("Ação", "acao"),
    "contribution_text": ("Texto da Contribuição", "texto_contribuicao"),
    "comment": ("Comentário", "comentario"),
    "contribution": ("contribuicao", "Contribuição"),
}


def is_record(obj: Any) -> bool:
    return isinstance(obj, Mapping)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def resolve_raw(record: Mapping[str, Any], field: str) -> Any:
    """Return the raw value stored under the first matching alias, or None."""
    aliases = FIELD_ALIASES.get(field, (field,))
    for alias in aliases:
        value = record.get(alias)
        if value is not None and value != "":
            return value
    folded = {alias.casefold() for alias in aliases}
    for key, value in record.items():
        if isinstance(key, str) and key.casefold() in folded and value not in (None, ""):
            return value
    return None


def resolve_text(record: Mapping[str, Any], field: str) -> Optional[str]:
    """Resolve a field as text: strings as-is, numbers stringified, anything else None."""
    value = resolve_raw(record, field)
    if isinstance(value, str):
        return value
    if _is_number(value):
        if isinstance(value, float):
            if not math.isfinite(value):
                return None
            if value.is_integer():
                return str(int(value))
        return str(value)
    return None


def normalize_author(record: Mapping[str, Any]) -> Optional[str]:
    """Trimmed, case-folded author identity; only string values count."""
    value = resolve_raw(record, "author")
    if not isinstance(value, str):
        return None
    identity = value.strip().casefold()
    return identity or None


# Tagged date representations found in the dataset


@dataclass(frozen=True)
class EpochValue:
    millis: float


@dataclass(frozen=True)
class IsoText:
    text: str


@dataclass(frozen=True)
class LocalText:
    text: str


DateValue = Union[EpochValue, IsoText, LocalText]


def classify_date_value(value: Any) -> Optional[DateValue]:
    """Map a raw date field to its tagged form; None when the type is unsupported."""
    if _is_number(value):
        return EpochValue(float(value))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if "T" in text or "-" in text:
            return IsoText(text)
        return LocalText(text)
    return None


def _parse_epoch(millis: float, tz: ZoneInfo) -> Optional[dt.date]:
    if not math.isfinite(millis):
        return None
    try:
        return dt.datetime.fromtimestamp(millis / 1000, tz=tz).date()
    except (OverflowError, OSError, ValueError):
        return None


def _parse_iso(text: str, tz: ZoneInfo) -> Optional[dt.date]:
    try:
        parsed = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if parsed is None or pd.isna(parsed):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.tz_convert(tz)
    return parsed.date()


def _parse_local(text: str) -> Optional[dt.date]:
    date_part = text.split()[0]
    pieces = date_part.split("/")
    if len(pieces) != 3:
        return None
    try:
        return dt.datetime.strptime(date_part, "%d/%m/%Y").date()
    except ValueError:
        return None


def normalize_date(value: DateValue, tz: ZoneInfo) -> Optional[dt.date]:
    """Turn a tagged date value into a calendar date, or None when it does not parse."""
    if isinstance(value, EpochValue):
        return _parse_epoch(value.millis, tz)
    if isinstance(value, IsoText):
        return _parse_iso(value.text, tz)
    return _parse_local(value.text)


def format_date_key(day: dt.date) -> str:
    return day.strftime("%d/%m/%Y")
