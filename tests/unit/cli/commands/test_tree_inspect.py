"""
Unit tests for the 'tree' and 'inspect' commands.
"""

import json

import pytest
from click.testing import CliRunner

from tablegraph.cli.commands.inspect import inspect
from tablegraph.cli.commands.tree import tree
from tablegraph.graph.builder import build_table


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def built(tmp_path):
    envelope = build_table([["h1", "h2"], ["a", "b"]], table_class="wf-table", wrap_in_section=True)
    path = tmp_path / "table.json"
    path.write_text(envelope.to_json())
    return envelope, path


class TestTreeCommand:
    def test_json_states(self, runner, built):
        envelope, path = built
        result = runner.invoke(tree, [str(path), "--search", "td", "--json"])

        assert result.exit_code == 0
        states = json.loads(result.output)["data"]["nodes"]
        assert set(states) == {n.id for n in envelope.nodes}

        tds = [n.id for n in envelope.nodes if n.element_tag == "td"]
        assert len(tds) == 2
        assert all(states[i]["match"] and states[i]["open"] for i in tds)

        roots = [i for i, s in states.items() if s["depth"] == 0]
        assert len(roots) == 1
        assert states[roots[0]]["ancestor"] is True

        table_id = next(n.id for n in envelope.nodes if n.element_tag == "table")
        assert states[table_id]["depth"] == 5

    def test_json_includes_graph_stats(self, runner, built):
        envelope, path = built
        result = runner.invoke(tree, [str(path), "--json"])

        assert result.exit_code == 0
        stats = json.loads(result.output)["data"]["stats"]
        assert stats["total_nodes"] == len(envelope.nodes)
        assert stats["total_links"] == len(envelope.nodes) - 1
        assert stats["roots"] == 1
        assert stats["nodes_by_tag"]["td"] == 2
        assert stats["backend"] == "rustworkx"

    def test_collapse(self, runner, built):
        _, path = built
        result = runner.invoke(tree, [str(path), "-e", "collapse", "--json"])

        assert result.exit_code == 0
        states = json.loads(result.output)["data"]["nodes"]
        assert not any(s["open"] for s in states.values())

    def test_rendered_tree(self, runner, built):
        _, path = built
        result = runner.invoke(tree, [str(path), "-e", "all"])

        assert result.exit_code == 0
        assert "<table>" in result.output
        assert "wf-table" in result.output
        assert "section_table" in result.output

    def test_invalid_expand_mode(self, runner, built):
        _, path = built
        result = runner.invoke(tree, [str(path), "-e", "sideways"])

        assert result.exit_code == 2

    def test_envelope_without_table(self, runner, tmp_path):
        path = tmp_path / "div.json"
        path.write_text(json.dumps({
            "type": "@webflow/XscpData",
            "payload": {"nodes": [{"_id": "d", "children": [], "data": {"tag": "div"}}]},
        }))

        result = runner.invoke(tree, [str(path), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["nodes"]["d"]["depth"] == 0

    def test_bad_json(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{")

        result = runner.invoke(tree, [str(path), "--json"])

        assert result.exit_code == 1
        assert json.loads(result.output)["meta"]["status"] == "error"


class TestInspectCommand:
    def test_json(self, runner, built):
        envelope, path = built
        table_id = next(n.id for n in envelope.nodes if n.element_tag == "table")

        result = runner.invoke(inspect, [str(path), table_id, "--json"])

        assert result.exit_code == 0
        details = json.loads(result.output)["data"]
        assert details["tag"] == "table"
        assert [name for name, _ in details["classes"]] == ["wf-table"]
        assert details["attributes"] == [["role", "table"]]
        assert details["child_count"] == 2

    def test_text_node(self, runner, built):
        envelope, path = built
        text_id = next(n.id for n in envelope.nodes if n.kind == "text")

        result = runner.invoke(inspect, [str(path), text_id, "--json"])

        details = json.loads(result.output)["data"]
        assert details["tag"] == "#text"
        assert details["text"] == "h1"

    def test_rendered_with_raw(self, runner, built):
        envelope, path = built
        table_id = next(n.id for n in envelope.nodes if n.element_tag == "table")

        result = runner.invoke(inspect, [str(path), table_id, "--raw"])

        assert result.exit_code == 0
        assert "wf-table" in result.output
        assert table_id in result.output

    def test_unknown_node(self, runner, built):
        _, path = built
        result = runner.invoke(inspect, [str(path), "n_missing", "--json"])

        assert result.exit_code == 1
        error = json.loads(result.output)["error"]
        assert error["type"] == "NodeNotFoundError"
        assert "n_missing" in error["message"]
