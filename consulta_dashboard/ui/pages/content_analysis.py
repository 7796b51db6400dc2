from __future__ import annotations

import streamlit as st

from consulta_dashboard.ui.components.ranked_list import render_ranked_list
from consulta_dashboard.ui.components.tables import render_table
from consulta_dashboard.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    st.subheader("Análise de conteúdo")
    content = context.data.content
    keys = [f.key for f in context.settings.category_fields]

    for row_start in range(0, len(keys), 2):
        cols = st.columns(2)
        for col, key in zip(cols, keys[row_start: row_start + 2]):
            ranking = content[key]
            with col:
                st.markdown(f"#### {ranking.field.label}")
                render_ranked_list(ranking)
                if ranking.items:
                    with st.expander(f"Tabela: {ranking.field.label}"):
                        render_table(
                            ranking.to_frame(),
                            column_config={"count": {"type": "number"}},
                            export_file_name=f"ranking_{key}.csv",
                        )
