"""
Tests for the pure presentation helpers (no Streamlit runtime needed).
"""

from consulta_dashboard.aggregation.institutions import process_institutions
from consulta_dashboard.aggregation.pipeline import build_dashboard_data
from consulta_dashboard.aggregation.timeline import TimelineSeries
from consulta_dashboard.aggregation.words import WordFrequency
from consulta_dashboard.config import Settings
from consulta_dashboard.ui.components.charts import legend_entries, timeline_chart_frame
from consulta_dashboard.ui.components.formatting import format_number, format_percent, shorten_label
from consulta_dashboard.ui.components.kpi import KpiCard, _format_value
from consulta_dashboard.ui.components.ranked_list import SectionView, toggle_label, visible_items
from consulta_dashboard.ui.components.tables import format_table
from consulta_dashboard.ui.components.word_cloud import spans_html
from consulta_dashboard.ui.pages.data_quality import timeline_coverage


class TestFormatting:
    """Tests for formatting helpers"""

    def test_pt_br_number(self):
        assert format_number(1234) == "1.234"
        assert format_number(1234567.5, 1) == "1.234.567,5"
        assert format_number(None) == "–"

    def test_percent(self):
        assert format_percent(66.666) == "66.7%"

    def test_shorten_label(self):
        exact = "x" * 35
        assert shorten_label(exact) == exact
        long_name = "ABIHV – Associação Brasileira da Indústria do Hidrogênio Verde"
        assert shorten_label(long_name) == long_name[:32] + "..."
        assert len(shorten_label(long_name)) == 35


class TestRankedListView:
    """Tests for SectionView helpers"""

    def test_collapsed_shows_first_five(self):
        items = list(range(8))
        assert visible_items(items, SectionView()) == [0, 1, 2, 3, 4]
        assert toggle_label(8, SectionView()) == "Ver mais (3 restantes)"

    def test_expanded_shows_all(self):
        view = SectionView().toggled()
        assert view.expanded
        assert visible_items(list(range(8)), view) == list(range(8))
        assert toggle_label(8, view) == "Ver menos"

    def test_no_toggle_when_short(self):
        assert toggle_label(5, SectionView()) == ""


class TestChartHelpers:
    """Tests for chart data helpers"""

    def test_timeline_frame_labels_and_authors(self):
        series = TimelineSeries(
            dates=["08/09/2025", "01/10/2025"],
            contributions=[10, 3],
            contributors=[4, 3],
        )
        frame = timeline_chart_frame(series)
        assert list(frame["label"]) == ["08/09", "01/10"]
        assert list(frame["authors"]) == [4, 3]

    def test_legend_entries(self):
        ranking = process_institutions({"A": 5, "B": 20, "C": 5})
        assert legend_entries(ranking) == ["B (20 - 66.7%)", "A (5 - 16.7%)", "C (5 - 16.7%)"]


class TestSpanFallback:
    """Tests for spans_html()"""

    def test_sizes_and_escaping(self):
        html = spans_html([WordFrequency("floresta", 10), WordFrequency("<rio>", 1)])
        assert 'title="10 ocorrências"' in html
        assert "font-size:38px" in html
        assert "font-size:12px" in html
        assert "&lt;rio&gt;" in html


class TestTables:
    """Tests for format_table()"""

    def test_institution_share_as_percent(self):
        frame = process_institutions({"A": 1, "B": 3}).to_frame()
        formatted = format_table(
            frame,
            column_config={"contributions": {"type": "number"}, "share": {"type": "percent"}},
        )
        assert formatted["institution"].tolist() == ["B", "A"]
        assert formatted["share"].tolist() == ["75.0%", "25.0%"]
        assert formatted["contributions"].tolist() == ["3", "1"]
        # the source frame keeps raw numbers for CSV export
        assert frame["share"].tolist() == [75.0, 25.0]

    def test_unknown_columns_ignored(self):
        frame = process_institutions({"A": 1}).to_frame()
        assert format_table(frame, {"missing": {"type": "number"}}).equals(frame)


class TestKpiValues:
    """Tests for KPI value text"""

    def test_number(self):
        assert _format_value(KpiCard(label="Registros", value=1234)) == "1.234"

    def test_display_text_wins(self):
        card = KpiCard(label="Cobertura", value=0.5, value_display="50.0%")
        assert _format_value(card) == "50.0%"

    def test_timeline_coverage(self, sample_records):
        data = build_dashboard_data(sample_records, {}, Settings())
        # three of the five records are dated inside the window
        assert format_percent(timeline_coverage(data)) == "60.0%"

    def test_timeline_coverage_without_records(self):
        assert timeline_coverage(build_dashboard_data([], {}, Settings())) is None
        assert format_percent(None) == "–"
