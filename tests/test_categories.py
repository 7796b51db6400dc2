"""
Tests for aggregation/categories.py
"""

from consulta_dashboard.aggregation.categories import (
    CategoryCount,
    clean_category_value,
    process_content_analysis,
    rank_counts,
)
from consulta_dashboard.config import CategoryField


class TestCleanCategoryValue:
    """Tests for clean_category_value()"""

    def test_trims(self):
        assert clean_category_value("  Meta 1 ") == "Meta 1"

    def test_sentinels_excluded(self):
        assert clean_category_value("NDA") is None
        assert clean_category_value(" NÃO IDENTIFICADO ") is None
        assert clean_category_value("   ") is None
        assert clean_category_value(None) is None


class TestRankCounts:
    """Tests for rank_counts()"""

    def test_descending_and_stable(self):
        counts = {"a": 1, "b": 3, "c": 1, "d": 3}
        assert rank_counts(counts) == [("b", 3), ("d", 3), ("a", 1), ("c", 1)]

    def test_limit(self):
        assert rank_counts({"a": 1, "b": 2}, 1) == [("b", 2)]


class TestProcessContentAnalysis:
    """Tests for process_content_analysis()"""

    def test_first_seen_mission_wins(self):
        records = [
            {"Ação": "Ação X", "Missão": "M1"},
            {"Ação": "Ação X", "Missão": "M2"},
            {"Ação": "Ação Y", "Missão": "M3"},
        ]
        actions = process_content_analysis(records)["action"]
        assert actions.items == [
            CategoryCount("Ação X", 2, "M1"),
            CategoryCount("Ação Y", 1, "M3"),
        ]

    def test_sentinel_mission_gets_placeholder(self):
        records = [
            {"Ação": "Ação Z", "Missão": "NDA"},
            {"Ação": "Ação Z", "Missão": "M9"},
        ]
        actions = process_content_analysis(records)["action"]
        assert actions.items == [CategoryCount("Ação Z", 2, "Não especificada")]

    def test_all_fields_counted(self, sample_records):
        content = process_content_analysis(sample_records)
        assert set(content) == {"chapter", "section", "mission", "goal", "action"}
        assert [(i.value, i.count) for i in content["chapter"].items] == [
            ("Capítulo 1", 2),
            ("Capítulo 2", 1),
        ]
        assert [(i.value, i.count) for i in content["section"].items] == [("Seção A", 1)]
        assert [(i.value, i.count) for i in content["goal"].items] == [("Meta 1", 1)]
        assert all(i.mission is None for i in content["chapter"].items)

    def test_top_n_per_field(self):
        records = [{"Capítulo": f"C{i}", "Meta": f"G{i}"} for i in range(20)]
        content = process_content_analysis(records)
        assert len(content["chapter"]) == 5
        assert len(content["goal"]) == 15
        assert content["chapter"].distinct_values == 20

    def test_custom_fields(self):
        fields = [CategoryField("goal", "Metas", 1)]
        content = process_content_analysis([{"Meta": "A"}, {"Meta": "B"}, {"Meta": "B"}], fields)
        assert list(content) == ["goal"]
        assert content["goal"].items == [CategoryCount("B", 2)]

    def test_empty_input(self):
        content = process_content_analysis([])
        assert all(len(ranking) == 0 for ranking in content.values())

    def test_action_frame_has_mission_column(self):
        content = process_content_analysis([{"Ação": "A", "Missão": "M1"}])
        frame = content["action"].to_frame()
        assert list(frame.columns) == ["rank", "value", "count", "mission"]
        assert frame.iloc[0]["mission"] == "M1"
        assert "mission" not in content["goal"].to_frame().columns
