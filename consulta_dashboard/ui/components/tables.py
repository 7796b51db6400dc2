"""
Table rendering for the aggregate frames, with a CSV export of the raw values.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from consulta_dashboard.ui.components.formatting import format_number, format_percent


def format_table(df: pd.DataFrame, column_config: Optional[Dict[str, Dict[str, str]]] = None) -> pd.DataFrame:
    """Copy of ``df`` with ``number``/``percent`` columns rendered as pt-BR text."""
    formatted_df = df.copy()
    for column, config in (column_config or {}).items():
        if column not in formatted_df.columns:
            continue
        fmt_type = config.get("type")
        if fmt_type == "percent":
            decimals = int(config.get("decimals", 1))
            formatted_df[column] = formatted_df[column].apply(lambda v: format_percent(v, decimals=decimals))
        elif fmt_type == "number":
            decimals = int(config.get("decimals", 0))
            formatted_df[column] = formatted_df[column].apply(lambda v: format_number(v, decimals=decimals))
    return formatted_df


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    export_file_name: Optional[str] = None,
    height: Optional[int] = None,
) -> None:
    if df.empty:
        st.info("Sem dados para exibir.")
        return

    kwargs = {"height": height} if height else {}
    st.dataframe(format_table(df, column_config), use_container_width=True, hide_index=True, **kwargs)

    if export_file_name:
        st.download_button(
            "Baixar CSV",
            data=df.to_csv(index=False).encode("utf-8"),
            file_name=export_file_name,
            mime="text/csv",
            key=f"download_{export_file_name}",
        )
