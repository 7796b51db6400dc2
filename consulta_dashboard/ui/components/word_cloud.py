"""
Word cloud rendering: an image from the ``wordcloud`` package, or a flat list
of differently-sized spans when image mode is off or drawing fails.
"""

from __future__ import annotations

import html
import logging
import random
from typing import Sequence, Tuple

import streamlit as st
from wordcloud import WordCloud

from consulta_dashboard.aggregation.words import WordCloudResult, WordFrequency, size_words
from consulta_dashboard.config import SPAN_SCALE, WORD_COLORS

logger = logging.getLogger(__name__)

SPAN_FONT_PX = {1: 12, 2: 14, 3: 17, 4: 20, 5: 24, 6: 28, 7: 33, 8: 38}


def _color_func(word, font_size, position, orientation, random_state=None, **kwargs) -> str:
    return (random_state or random).choice(WORD_COLORS)


def cloud_image(sized: Sequence[Tuple[str, int]], width: int = 900, height: int = 420):
    """Draw the cloud with each word weighted by its display size."""
    cloud = WordCloud(
        width=width,
        height=height,
        mode="RGBA",
        background_color=None,
        color_func=_color_func,
        prefer_horizontal=0.8,
        min_font_size=12,
        relative_scaling=1.0,
        random_state=42,
    )
    cloud.generate_from_frequencies(dict(sized))
    return cloud.to_array()


def spans_html(frequencies: Sequence[WordFrequency]) -> str:
    spans = []
    for wf, (token, size) in zip(frequencies, size_words(frequencies, SPAN_SCALE)):
        spans.append(
            f'<span title="{wf.count} ocorrências" '
            f'style="font-size:{SPAN_FONT_PX[size]}px;margin:0 8px;color:{WORD_COLORS[size % len(WORD_COLORS)]}">'
            f"{html.escape(token)}</span>"
        )
    return '<div style="line-height:2.2;text-align:center">' + " ".join(spans) + "</div>"


def render_word_cloud(result: WordCloudResult, mode: str = "image") -> None:
    if result.empty:
        st.info("Nenhuma palavra encontrada nos comentários.")
        return

    if mode == "image":
        try:
            st.image(cloud_image(result.sized), use_container_width=True)
            return
        except (ValueError, OSError) as exc:
            logger.warning("Word cloud image failed, using span list: %s", exc)

    st.markdown(spans_html(result.frequencies), unsafe_allow_html=True)
