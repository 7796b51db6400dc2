from __future__ import annotations

from typing import List

import streamlit as st

from consulta_dashboard.aggregation.stats import ContributionStats
from consulta_dashboard.ui.components.charts import institution_donut, render_plotly, timeline_chart
from consulta_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from consulta_dashboard.ui.components.tables import render_table
from consulta_dashboard.ui.pages.context import PageContext


def _stats_cards(stats: ContributionStats) -> List[KpiCard]:
    return [
        KpiCard(label="Contribuições", value=stats.total_contributions),
        KpiCard(
            label="Pessoas individuais",
            value=stats.individual_contributors,
            help_text=f"Contagem oficial da consulta; {stats.distinct_authors} autores distintos no conjunto de dados.",
        ),
        KpiCard(label="Instituições", value=stats.institutions, help_text="Contagem oficial da consulta."),
        KpiCard(label="Grupos de diálogos regionais", value=stats.dialogue_groups),
    ]


def _analysis_cards(stats: ContributionStats) -> List[KpiCard]:
    return [
        KpiCard(label="Contribuições consideradas", value=stats.considered_contributions),
        KpiCard(label="Contribuições para implementação", value=stats.implementation_contributions),
    ]


def render(context: PageContext) -> None:
    data = context.data
    st.subheader("Visão geral")
    render_kpi_cards(_stats_cards(data.stats), columns=4)
    render_kpi_cards(_analysis_cards(data.stats), columns=2)

    st.markdown("### Contribuições por dia")
    if not len(data.timeline):
        st.info("Nenhuma contribuição datada no período da consulta.")
    else:
        render_plotly(timeline_chart(data.timeline))
        window = context.settings.window
        st.caption(
            f"Período da consulta: {window.start:%d/%m/%Y} a {window.end:%d/%m/%Y}."
        )

    st.markdown("### Colaborações coletivas")
    if not data.institutions.items:
        st.info("Sem dados de instituições.")
    else:
        render_plotly(institution_donut(data.institutions))
        st.caption(f"Total: {data.institutions.total} contribuições de {len(data.institutions.items)} instituições.")
        with st.expander("Tabela de instituições"):
            render_table(
                data.institutions.to_frame(),
                column_config={"contributions": {"type": "number"}, "share": {"type": "percent"}},
                export_file_name="colaboracoes_coletivas.csv",
            )
