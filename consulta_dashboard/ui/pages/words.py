from __future__ import annotations

import streamlit as st

from consulta_dashboard.ui.components.tables import render_table
from consulta_dashboard.ui.components.word_cloud import render_word_cloud
from consulta_dashboard.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    st.subheader("Nuvem de palavras")
    words = context.data.words
    render_word_cloud(words, mode=context.settings.word_cloud_mode)
    st.caption(f"Textos processados: {words.texts_found}/{words.records_seen} registros.")

    if not words.empty:
        with st.expander("Frequência das palavras"):
            render_table(words.to_frame(), column_config={"count": {"type": "number"}}, export_file_name="palavras.csv")
