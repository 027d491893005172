"""Unit tests for the tree traversal engine."""

import pytest

from tablegraph.core.graph import DocumentGraph
from tablegraph.core.types import ElementNode, NodeData, Style, TextNode
from tablegraph.graph.builder import build_table
from tablegraph.graph.tree import (
    ExpandMode, compute_tree_state, find_ancestors, find_matches,
)


def el(node_id, tag, children=(), classes=()):
    return ElementNode(id=node_id, classes=list(classes), children=list(children), data=NodeData(tag=tag))


@pytest.fixture
def small_tree():
    """
    table
    ├── thead ── tr(h) ── th
    └── tbody ── tr(b) ── td ── "x"
    plus a detached div root
    """
    nodes = [
        el("table", "table", ["thead", "tbody"], classes=["s1"]),
        el("thead", "thead", ["trh"]),
        el("trh", "tr", ["th"]),
        el("th", "th"),
        el("tbody", "tbody", ["trb"]),
        el("trb", "tr", ["td"]),
        el("td", "td", ["t"], classes=["s2"]),
        TextNode(id="t", value="x"),
        el("other", "div"),
    ]
    styles = [Style(id="s1", name="wf-Table"), Style(id="s2", name="cell-pad")]
    return nodes, styles


class TestMatching:
    def test_empty_query_matches_nothing(self, small_tree):
        nodes, styles = small_tree
        states = compute_tree_state(nodes, styles, "   ")
        assert not any(s.is_match for s in states.values())

    def test_tag_match(self, small_tree):
        nodes, styles = small_tree
        graph = DocumentGraph(nodes)
        assert find_matches(graph, {}, "tr") == {"trh", "trb"}

    def test_class_match_case_insensitive(self, small_tree):
        nodes, styles = small_tree
        states = compute_tree_state(nodes, styles, "WF-TABLE")
        assert {i for i, s in states.items() if s.is_match} == {"table"}

    def test_query_is_trimmed(self, small_tree):
        nodes, styles = small_tree
        states = compute_tree_state(nodes, styles, "  pad ")
        assert states["td"].is_match

    def test_text_nodes_never_match_by_tag(self, small_tree):
        nodes, styles = small_tree
        states = compute_tree_state(nodes, styles, "t")
        assert not states["t"].is_match
        assert states["table"].is_match


class TestAncestors:
    def test_ancestor_chain(self, small_tree):
        nodes, _ = small_tree
        graph = DocumentGraph(nodes)
        assert find_ancestors(graph, {"td"}) == {"trb", "tbody", "table"}

    def test_shared_ancestors_added_once(self, small_tree):
        nodes, _ = small_tree
        graph = DocumentGraph(nodes)
        assert find_ancestors(graph, {"td", "th"}) == {"trb", "tbody", "trh", "thead", "table"}


class TestExpandModes:
    def test_auto_opens_matches_ancestors_and_roots(self, small_tree):
        nodes, styles = small_tree
        states = compute_tree_state(nodes, styles, "td", ExpandMode.AUTO)
        assert states["td"].open and states["td"].is_match
        for node_id in ("trb", "tbody", "table"):
            assert states[node_id].open
            assert states[node_id].is_ancestor
        # Unrelated subtree below the root stays closed.
        assert not states["thead"].open
        assert not states["trh"].open
        assert not states["th"].open
        # Roots are open at depth 0.
        assert states["other"].open
        assert states["other"].depth == 0

    def test_auto_without_query_opens_roots_only(self, small_tree):
        nodes, styles = small_tree
        states = compute_tree_state(nodes, styles, "")
        assert {i for i, s in states.items() if s.open} == {"table", "other"}

    def test_all(self, small_tree):
        nodes, styles = small_tree
        states = compute_tree_state(nodes, styles, "", "all")
        assert all(s.open for s in states.values())

    def test_collapse_closes_even_matches(self, small_tree):
        nodes, styles = small_tree
        states = compute_tree_state(nodes, styles, "td", ExpandMode.COLLAPSE)
        assert not any(s.open for s in states.values())
        assert states["td"].is_match

    def test_invalid_mode(self, small_tree):
        nodes, styles = small_tree
        with pytest.raises(ValueError):
            compute_tree_state(nodes, styles, "", "sideways")


class TestDepth:
    def test_depths(self, small_tree):
        nodes, styles = small_tree
        states = compute_tree_state(nodes, styles)
        assert states["table"].depth == 0
        assert states["tbody"].depth == 1
        assert states["t"].depth == 4

    def test_does_not_mutate_nodes(self, small_tree):
        nodes, styles = small_tree
        before = [n.model_dump() for n in nodes]
        compute_tree_state(nodes, styles, "td", ExpandMode.ALL)
        assert [n.model_dump() for n in nodes] == before


class TestBuiltGraph:
    def test_td_search_on_built_table(self):
        env = build_table([["a", "b"], ["c", "d"], ["e", "f"]], wrap_in_section=True)
        graph = DocumentGraph(env.nodes)
        states = compute_tree_state(graph, env.styles, "td")

        td_ids = [n.id for n in graph.iter_nodes() if n.element_tag == "td"]
        assert td_ids
        for td_id in td_ids:
            assert states[td_id].is_match and states[td_id].open
            for ancestor in graph.ancestors(td_id):
                assert states[ancestor].open

        thead = graph.find_first("thead")
        assert not states[thead.id].open

    def test_search_by_preset_class(self):
        env = build_table(None, wrap_in_section=True)
        states = compute_tree_state(env.nodes, env.styles, "table_component")
        matched = [i for i, s in states.items() if s.is_match]
        assert len(matched) == 1


class TestTopLevelTag:
    def test_search_matches_top_level_tag(self):
        nodes = [
            ElementNode.model_validate({"_id": "row", "tag": "tr", "children": ["a"]}),
            ElementNode.model_validate({"_id": "a", "tag": "td"}),
        ]
        states = compute_tree_state(nodes, [], "td")
        assert states["a"].is_match
        assert states["row"].is_ancestor
        assert not states["row"].is_match

    def test_node_without_any_tag_is_a_div(self):
        node = ElementNode.model_validate({"_id": "plain"})
        assert node.element_tag == "div"
