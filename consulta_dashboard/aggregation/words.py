"""
Word-frequency analysis feeding the word cloud.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd

from consulta_dashboard.aggregation.categories import clean_category_value, rank_counts
from consulta_dashboard.config import (
    CATEGORY_FIELDS,
    CLOUD_SCALE,
    STOPWORDS,
    TEXT_FIELDS,
    TEXT_FOUND_MIN_LENGTH,
    WORD_MIN_LENGTH,
    WORD_TOP_N,
    SizeScale,
)
from consulta_dashboard.data.records import is_record, resolve_text

logger = logging.getLogger(__name__)

TOKEN_REGEX = re.compile(r"[a-záàâãéèêíìîóòôõúùûç]+")
CATEGORY_KEYS = frozenset(f.key for f in CATEGORY_FIELDS)


@dataclass(frozen=True)
class WordFrequency:
    token: str
    count: int


@dataclass(frozen=True)
class WordCloudResult:
    frequencies: List[WordFrequency]
    sized: List[Tuple[str, int]]
    texts_found: int
    records_seen: int

    @property
    def empty(self) -> bool:
        return not self.frequencies

    def to_frame(self) -> pd.DataFrame:
        sizes = dict(self.sized)
        return pd.DataFrame(
            [
                {"word": wf.token, "count": wf.count, "size": sizes.get(wf.token)}
                for wf in self.frequencies
            ],
            columns=["word", "count", "size"],
        )


def tokenize(text: str, stopwords: FrozenSet[str] = STOPWORDS, min_length: int = WORD_MIN_LENGTH) -> List[str]:
    """Lowercase alphabetic runs (Portuguese accents included), minus stopwords."""
    return [
        token
        for token in TOKEN_REGEX.findall(text.lower())
        if len(token) >= min_length and token not in stopwords
    ]


def _field_text(record: Dict[str, Any], field: str) -> str:
    text = resolve_text(record, field)
    if field in CATEGORY_KEYS:
        # "NDA" and similar placeholders are not words
        return clean_category_value(text) or ""
    return text or ""


def count_words(
    records: Sequence[Any],
    text_fields: Iterable[str] = TEXT_FIELDS,
    stopwords: FrozenSet[str] = STOPWORDS,
) -> Tuple[Dict[str, int], int]:
    """Return token counts across all text fields, plus how many records had text."""
    text_fields = tuple(text_fields)
    counts: Dict[str, int] = {}
    texts_found = 0
    for record in records:
        if not is_record(record):
            continue
        texts = [text for text in (_field_text(record, f) for f in text_fields) if text]
        if any(len(text) > TEXT_FOUND_MIN_LENGTH for text in texts):
            texts_found += 1
        for text in texts:
            for token in tokenize(text, stopwords):
                counts[token] = counts.get(token, 0) + 1
    return counts, texts_found


def size_words(frequencies: Sequence[WordFrequency], scale: SizeScale = CLOUD_SCALE) -> List[Tuple[str, int]]:
    """Map counts linearly onto ``scale``; equal counts all get the base size."""
    if not frequencies:
        return []
    counts = [wf.count for wf in frequencies]
    max_count, min_count = max(counts), min(counts)
    spread = max_count - min_count
    sized = []
    for wf in frequencies:
        normalized = (wf.count - min_count) / spread if spread else 0.0
        raw = math.ceil(normalized * scale.scale_factor) + scale.base_offset
        sized.append((wf.token, int(np.clip(raw, scale.min_size, scale.max_size))))
    return sized


def build_word_cloud(
    records: Sequence[Any],
    top_n: int = WORD_TOP_N,
    scale: SizeScale = CLOUD_SCALE,
    text_fields: Iterable[str] = TEXT_FIELDS,
    stopwords: FrozenSet[str] = STOPWORDS,
) -> WordCloudResult:
    counts, texts_found = count_words(records, text_fields, stopwords)
    frequencies = [WordFrequency(token, count) for token, count in rank_counts(counts, top_n)]
    logger.info(
        "Word cloud: texts found in %d/%d records, %d distinct words",
        texts_found,
        len(records),
        len(counts),
    )
    return WordCloudResult(
        frequencies=frequencies,
        sized=size_words(frequencies, scale),
        texts_found=texts_found,
        records_seen=len(records),
    )
