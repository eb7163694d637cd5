"""
Explorer Session Tests
======================

Tests for the session layer that sits between user input and the core.

AXIOMS UNDER TEST:
==================
1. Every rejected input surfaces as a typed error code
2. Missing vertices and missing paths are distinguishable
3. Highlights follow the last successful query and reset on reload
"""

import pytest

from pathgraph.config import ExplorerConfig, GraphStoreConfig, PathSearchConfig
from pathgraph.contracts.base import ErrorCode
from pathgraph.engine import GraphExplorerSession, parse_weight
from pathgraph.views import CHEAPEST_COLOR, COSTLIEST_COLOR, matrix_rows


def triangle_session() -> GraphExplorerSession:
    session = GraphExplorerSession()
    for name, x, y in (("A", 0, 0), ("B", 100, 0), ("C", 50, 80)):
        session.add_vertex(name, x, y)
    session.connect("A", "B", "1")
    session.connect("B", "C", "1")
    session.connect("A", "C", "1")
    return session


class TestParseWeight:

    @pytest.mark.parametrize("raw, expected", [
        ("1", 1), ("2.5", 2.5), (" 4 ", 4), (3, 3), (0.25, 0.25),
    ])
    def test_valid_weights(self, raw, expected):
        result = parse_weight(raw)
        assert result.is_success
        assert result.value == expected

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-3", "nan", "inf", None, True, 10 ** 400])
    def test_invalid_weights(self, raw):
        result = parse_weight(raw)
        assert result.is_failure
        assert result.error.code == ErrorCode.INVALID_WEIGHT


class TestEditing:

    def test_add_vertex_strips_name(self):
        session = GraphExplorerSession()
        assert session.add_vertex("  A ", 1, 2).is_success
        assert session.store.names == ("A",)

    def test_blank_name_rejected(self):
        session = GraphExplorerSession()
        result = session.add_vertex("   ", 1, 2)
        assert result.error.code == ErrorCode.INVALID_VERTEX_NAME

    def test_connect_reports_invalid_weight(self):
        session = triangle_session()
        result = session.connect("A", "B", "heavy")

        assert result.error.code == ErrorCode.INVALID_WEIGHT
        assert session.store.weight("A", "B") == 1

    def test_connect_reports_unknown_vertex(self):
        session = triangle_session()
        result = session.connect("A", "Z", "2")

        assert result.error.code == ErrorCode.UNKNOWN_VERTEX_REFERENCE
        assert result.error.context_value("missing") == "Z"

    def test_connect_reports_self_loop(self):
        session = triangle_session()
        result = session.connect("A", "A", "3")

        assert result.error.code == ErrorCode.SELF_LOOP_REJECTED
        assert session.store.weight("A", "A") == 0

    def test_connect_sets_weight(self):
        session = triangle_session()
        result = session.connect("C", "B", "7.5")

        assert result.is_success
        assert session.store.weight("B", "C") == 7.5


class TestPathQueries:

    def test_missing_vertex_error(self):
        session = triangle_session()
        result = session.find_paths("A", "Q")

        assert result.error.code == ErrorCode.VERTICES_NOT_FOUND
        assert result.error.context_value("missing") == "Q"

    def test_no_path_error_is_distinct(self):
        session = triangle_session()
        session.add_vertex("D", 0, 0)

        result = session.find_paths("A", "D")

        assert result.error.code == ErrorCode.NO_PATH_FOUND

    def test_query_sets_highlights(self):
        session = triangle_session()
        result = session.find_paths("A", "C")

        assert result.is_success
        assert session.highlighted_paths == (("A", "C"), ("A", "B", "C"))

        highlights = session.render_view().highlights
        assert [(h.path, h.color) for h in highlights] == [
            (("A", "C"), CHEAPEST_COLOR),
            (("A", "B", "C"), COSTLIEST_COLOR),
        ]

    def test_failed_query_keeps_highlights(self):
        session = triangle_session()
        session.find_paths("A", "C")
        session.find_paths("A", "nope")
        assert session.highlighted_paths == (("A", "C"), ("A", "B", "C"))

    def test_reload_clears_highlights(self):
        session = triangle_session()
        session.find_paths("A", "C")

        session.load_example()

        assert session.highlighted_paths == (None, None)
        assert session.render_view().highlights == ()

    def test_description_load_clears_highlights(self):
        session = triangle_session()
        session.find_paths("A", "C")

        session.load_description([("X", ["Y"])])

        assert session.last_query is None
        assert session.store.names == ("X", "Y")

    def test_example_extremes(self):
        session = GraphExplorerSession()
        session.load_example()

        query = session.find_paths("A", "F").value

        assert query.path_count == 7
        assert query.extremes.cheapest == ("A", "C", "E", "F")
        assert query.extremes.cheapest_weight == 12
        assert query.extremes.costliest == ("A", "B", "C", "E", "F")
        assert query.extremes.costliest_weight == 26
        assert query.truncated is False

    def test_origin_equals_destination(self):
        session = triangle_session()
        query = session.find_paths("B", "B").value

        assert query.paths == (("B",),)
        assert query.weights == (0,)

    def test_report_text(self):
        session = triangle_session()
        text = session.find_paths("A", "C").value.to_text()

        assert text.splitlines()[0] == "Paths from A to C:"
        assert "• A → B → C (weight: 2)" in text
        assert "Cheapest path: A → C (weight: 1)" in text
        assert "Costliest path: A → B → C (weight: 2)" in text


class TestPathCap:

    def test_cap_truncates(self):
        session = GraphExplorerSession(ExplorerConfig(search=PathSearchConfig(max_paths=2)))
        session.load_example()

        query = session.find_paths("A", "F").value

        assert query.path_count == 2
        assert query.truncated is True
        assert "search stopped after 2 paths" in query.to_text()

    def test_cap_equal_to_total_is_not_truncation(self):
        session = GraphExplorerSession(ExplorerConfig(search=PathSearchConfig(max_paths=7)))
        session.load_example()

        query = session.find_paths("A", "F").value

        assert query.path_count == 7
        assert query.truncated is False


class TestViews:

    def test_render_view_nodes_and_edges(self):
        session = triangle_session()
        view = session.render_view()

        assert [n.name for n in view.nodes] == ["A", "B", "C"]
        assert all(n.radius == 20 for n in view.nodes)
        assert len(view.edges) == 3

        ab = view.edges[0]
        assert (ab.source, ab.target, ab.weight) == ("A", "B", 1)
        assert (ab.label_x, ab.label_y) == (50, 0)

    def test_matrix_rows(self):
        session = triangle_session()
        session.connect("A", "B", "2.5")

        rows = matrix_rows(session.adjacency_view())

        assert rows[0] == ["", "A", "B", "C"]
        assert rows[1] == ["A", "0", "2.5", "1"]
        assert rows[3] == ["C", "1", "1", "0"]


class TestConfig:

    def test_from_env(self):
        config = ExplorerConfig.from_env({
            "PATHGRAPH_CAPACITY": "3",
            "PATHGRAPH_LAYOUT_RADIUS": "90",
            "PATHGRAPH_MAX_PATHS": "5",
        })

        assert config.store.capacity == 3
        assert config.layout.radius == 90
        assert config.search.max_paths == 5

    def test_from_env_defaults(self):
        config = ExplorerConfig.from_env({})

        assert config.store.capacity == 50
        assert config.layout.radius == 180
        assert config.search.max_paths is None

    def test_session_honours_capacity(self):
        session = GraphExplorerSession(ExplorerConfig(store=GraphStoreConfig(capacity=1)))
        assert session.add_vertex("A", 0, 0).is_success
        assert session.add_vertex("B", 0, 0).is_failure

    @pytest.mark.parametrize("kwargs", [{"capacity": 0}, {"default_weight": -1}])
    def test_invalid_store_config(self, kwargs):
        with pytest.raises(ValueError):
            GraphStoreConfig(**kwargs)
