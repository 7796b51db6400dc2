from __future__ import annotations

from typing import List, Optional

import streamlit as st

from consulta_dashboard.aggregation.pipeline import DashboardData
from consulta_dashboard.ui.components.formatting import format_percent
from consulta_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from consulta_dashboard.ui.components.tables import render_table
from consulta_dashboard.ui.pages.context import PageContext

SKIP_REASONS = {
    "missing": "Sem data",
    "unsupported_type": "Tipo de data não suportado",
    "unparsed": "Data inválida",
    "out_of_window": "Fora do período",
    "not_a_record": "Registro inválido",
}


def timeline_coverage(data: DashboardData) -> Optional[float]:
    """Percentage of records that landed in a timeline bucket, None for no records."""
    total = data.stats.total_contributions
    if not total:
        return None
    return sum(data.timeline.contributions) / total * 100


def _quality_cards(data: DashboardData) -> List[KpiCard]:
    return [
        KpiCard(label="Registros", value=data.stats.total_contributions),
        KpiCard(label="Autores distintos", value=data.stats.distinct_authors),
        KpiCard(label="Dias com contribuições", value=len(data.timeline)),
        KpiCard(label="Fora da linha do tempo", value=sum(data.timeline.skipped.values())),
        KpiCard(
            label="Cobertura da linha do tempo",
            value_display=format_percent(timeline_coverage(data)),
            help_text="Registros com data válida dentro do período da consulta.",
        ),
    ]


def render(context: PageContext) -> None:
    st.subheader("Qualidade dos dados")
    data = context.data
    skipped = data.timeline.skipped

    render_kpi_cards(_quality_cards(data), columns=5)

    st.markdown("#### Registros fora da linha do tempo")
    if skipped:
        for reason, count in skipped.items():
            st.write(f"- **{SKIP_REASONS.get(reason, reason)}**: {count}")
    else:
        st.info("Todos os registros entraram na linha do tempo.")

    with st.expander("Série diária"):
        render_table(
            data.timeline.to_frame(),
            column_config={"contributions": {"type": "number"}, "contributors": {"type": "number"}},
            export_file_name="serie_diaria.csv",
        )

    with st.expander("Totais"):
        render_table(data.stats.to_frame(), column_config={"value": {"type": "number"}})

    st.markdown("#### Diagnóstico")
    diagnostics = {**context.load_diagnostics, **data.diagnostics}
    for key, value in diagnostics.items():
        st.write(f"- **{key.replace('_', ' ').title()}**: {value}")

    st.markdown("#### Limitações conhecidas")
    st.write(
        """
        - Pessoas individuais, instituições e grupos de diálogo são totais oficiais
          fixos: o conjunto de dados não traz o tipo de contribuinte.
        - O gráfico de instituições usa `colaboracoes_coletivas.json`, não os registros.
        - Valores "NDA" e "NÃO IDENTIFICADO" são ignorados na análise de conteúdo
          e na nuvem de palavras.
        """
    )
