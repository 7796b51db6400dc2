"""
Layout helpers for the Streamlit application (page setup and sidebar).
"""

from __future__ import annotations

import streamlit as st

from consulta_dashboard.config import Settings


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Consulta Pública PNDBio",
        layout="wide",
        page_icon=":seedling:",
    )


def sidebar_ui(settings: Settings) -> bool:
    """Render the sidebar; returns True when the user asked for fresh data."""
    st.sidebar.header("Dados")
    refresh = st.sidebar.button("🔄 Atualizar dados")
    st.sidebar.caption(f"Contribuições: `{settings.data_source}`")
    st.sidebar.caption(f"Instituições: `{settings.institutions_source}`")
    st.sidebar.caption("Os dados são recarregados automaticamente a cada 5 minutos.")
    return refresh
