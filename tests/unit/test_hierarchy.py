# ABOUTME: Unit tests for the series hierarchy builder.
# ABOUTME: Validates root selection, sorted children, and breadth-first population.

from shelfgen.catalog.types import Series
from shelfgen.core.hierarchy import build_series_tree
from shelfgen.core.resolver import build_series_nodes
from shelfgen.db.mapping import SeriesRow


def _nodes(*names: str) -> dict[str, Series]:
    _, nodes = build_series_nodes([SeriesRow(i, name) for i, name in enumerate(names, 1)])
    return nodes


class TestBuildSeriesTree:
    def test_round_trip_mythos(self) -> None:
        roots = build_series_tree(_nodes("Mythos.Book One"))

        assert [root.name for root in roots] == ["Mythos"]
        mythos = roots[0]
        assert mythos.leaf is False
        assert [child.name for child in mythos.children] == ["Book One"]
        assert mythos.children[0].leaf is True
        assert mythos.children[0].children == []

    def test_roots_sorted_case_sensitive(self) -> None:
        roots = build_series_tree(_nodes("beta", "Alpha", "Gamma"))
        # Uppercase sorts before lowercase
        assert [root.name for root in roots] == ["Alpha", "Gamma", "beta"]

    def test_children_sorted_by_name(self) -> None:
        roots = build_series_tree(_nodes("Saga.Zeta", "Saga.Alpha", "Saga.Mid"))
        assert [child.name for child in roots[0].children] == ["Alpha", "Mid", "Zeta"]

    def test_deep_chain(self) -> None:
        roots = build_series_tree(_nodes("A.B.C.D"))
        depth = 0
        node = roots[0]
        while node.children:
            assert len(node.children) == 1
            node = node.children[0]
            depth += 1
        assert depth == 3
        assert node.name == "D"
        assert node.leaf is True

    def test_shared_node_appears_once(self) -> None:
        nodes = _nodes("Mythos.Book One", "Mythos.Book Two")
        roots = build_series_tree(nodes)
        assert len(roots) == 1
        assert roots[0] is nodes["Mythos"]
        assert roots[0].children == [nodes["Book One"], nodes["Book Two"]]

    def test_empty_registry(self) -> None:
        assert build_series_tree({}) == []
