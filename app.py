import logging

import streamlit as st

from consulta_dashboard.aggregation.pipeline import build_dashboard_data
from consulta_dashboard.config import TABS, load_settings
from consulta_dashboard.data.loader import DatasetLoadError, clear_cache, load_institutions, load_records
from consulta_dashboard.ui.layout import setup_page, sidebar_ui
from consulta_dashboard.ui.pages import (
    content_analysis,
    data_quality,
    overview,
    words,
)
from consulta_dashboard.ui.pages.context import PageContext


PAGE_RENDERERS = {
    "overview": overview.render,
    "content_analysis": content_analysis.render,
    "words": words.render,
    "data_quality": data_quality.render,
}


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    setup_page()
    st.title("Consulta Pública do PNDBio")

    if sidebar_ui(settings):
        clear_cache()

    try:
        records = load_records(settings.data_source)
    except DatasetLoadError as exc:
        logging.getLogger(__name__).error("Dashboard load failed: %s", exc)
        st.error(f"Erro no dashboard: {exc}")
        st.stop()

    if not records:
        st.warning("Conjunto de dados vazio.")

    data = build_dashboard_data(records, load_institutions(settings.institutions_source), settings)
    context = PageContext(
        data=data,
        settings=settings,
        load_diagnostics=st.session_state.get("data_diagnostics", {}),
    )

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
