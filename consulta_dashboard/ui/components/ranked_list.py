"""
Numbered ranking lists with a "show more / show less" control.

View state is explicit: callers pass a ``SectionView`` into the pure helpers
and Streamlit keeps one per section in ``st.session_state``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence, TypeVar

import streamlit as st

from consulta_dashboard.aggregation.categories import CategoryRanking
from consulta_dashboard.config import SHOW_MORE_INITIAL

T = TypeVar("T")


@dataclass(frozen=True)
class SectionView:
    expanded: bool = False

    def toggled(self) -> "SectionView":
        return replace(self, expanded=not self.expanded)


def visible_items(items: Sequence[T], view: SectionView, initial: int = SHOW_MORE_INITIAL) -> List[T]:
    return list(items) if view.expanded else list(items[:initial])


def toggle_label(total: int, view: SectionView, initial: int = SHOW_MORE_INITIAL) -> str:
    """Button text, or an empty string when everything already fits."""
    if total <= initial:
        return ""
    if view.expanded:
        return "Ver menos"
    return f"Ver mais ({total - initial} restantes)"


def _state_key(section: str) -> str:
    return f"ranked_list_{section}_expanded"


def render_ranked_list(ranking: CategoryRanking, initial: int = SHOW_MORE_INITIAL) -> None:
    section = ranking.field.key
    if not ranking.items:
        st.info(f"Nenhum dado encontrado para {ranking.field.label}")
        return

    view = SectionView(expanded=st.session_state.get(_state_key(section), False))
    lines = []
    for rank, item in enumerate(visible_items(ranking.items, view, initial), start=1):
        line = f"{rank}. {item.value} · **{item.count}**"
        if item.mission:
            line += f"  \n   _Missão: {item.mission}_"
        lines.append(line)
    st.markdown("\n".join(lines))

    label = toggle_label(len(ranking.items), view, initial)
    if label and st.button(label, key=f"toggle_{section}"):
        st.session_state[_state_key(section)] = view.toggled().expanded
        st.rerun()
