"""
Tests for aggregation/pipeline.py and config.load_settings()
"""

from consulta_dashboard.aggregation.pipeline import build_dashboard_data
from consulta_dashboard.config import Settings, load_settings


class TestBuildDashboardData:
    """Tests for build_dashboard_data()"""

    def test_all_sections(self, sample_records):
        data = build_dashboard_data(sample_records, {"A": 5, "B": 20, "C": 5}, Settings())
        assert data.stats.total_contributions == 5
        assert data.timeline.dates == ["08/09/2025", "29/09/2025"]
        assert data.content["action"].items[0].mission == "M1"
        # category fields feed the cloud too, so "ação" and "capítulo" lead
        assert [(wf.token, wf.count) for wf in data.words.frequencies[:2]] == [("ação", 3), ("capítulo", 3)]
        assert data.institutions.labels == ["B", "A", "C"]

    def test_counts_are_non_negative_integers(self, sample_records):
        data = build_dashboard_data(sample_records, {"A": 1}, Settings())
        counts = (
            data.timeline.contributions
            + data.timeline.contributors
            + [i.count for r in data.content.values() for i in r.items]
            + [wf.count for wf in data.words.frequencies]
            + data.institutions.counts
        )
        assert all(isinstance(c, int) and c >= 0 for c in counts)

    def test_empty_dataset(self):
        data = build_dashboard_data([], {}, Settings())
        assert data.stats.total_contributions == 0
        assert len(data.timeline) == 0
        assert data.words.empty
        assert data.diagnostics["timeline_skipped"] == {}

    def test_idempotent(self, sample_records):
        first = build_dashboard_data(sample_records, {"A": 1}, Settings())
        second = build_dashboard_data(sample_records, {"A": 1}, Settings())
        assert first == second

    def test_input_not_mutated(self, sample_records):
        snapshot = [dict(r) if isinstance(r, dict) else r for r in sample_records]
        build_dashboard_data(sample_records, {}, Settings())
        assert sample_records == snapshot


class TestLoadSettings:
    """Tests for load_settings()"""

    def test_defaults(self):
        settings = load_settings({})
        assert settings.data_source == "consulta_pndbio_data.json"
        assert settings.timezone == "America/Sao_Paulo"
        assert settings.word_cloud_mode == "image"

    def test_overrides(self):
        settings = load_settings(
            {
                "CONSULTA_DATA_SOURCE": "https://example.org/dados.json",
                "CONSULTA_WORD_CLOUD_MODE": "SPANS",
                "LOG_LEVEL": "debug",
            }
        )
        assert settings.data_source == "https://example.org/dados.json"
        assert settings.word_cloud_mode == "spans"
        assert settings.log_level == "DEBUG"

    def test_unknown_cloud_mode(self):
        assert load_settings({"CONSULTA_WORD_CLOUD_MODE": "3d"}).word_cloud_mode == "image"

    def test_unknown_timezone_falls_back(self):
        assert load_settings({"CONSULTA_TIMEZONE": "Sao Paulo"}).timezone == "America/Sao_Paulo"

    def test_valid_timezone_kept(self):
        assert load_settings({"CONSULTA_TIMEZONE": "UTC"}).timezone == "UTC"

    def test_unknown_timezone_still_builds(self):
        settings = load_settings({"CONSULTA_TIMEZONE": "Sao Paulo"})
        data = build_dashboard_data([{"Data": "08/09/2025"}], {}, settings)
        assert data.timeline.dates == ["08/09/2025"]
