"""
Unit tests for the 'build' command.
"""

import json
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from tablegraph.cli.commands.build import build
from tablegraph.parsing.envelope import extract_table


class TestBuildCommand:
    """Tests for building envelopes from flags, config and CSV."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def mock_cwd(self, tmp_path):
        """Keep config lookup inside a temp directory."""
        with patch("pathlib.Path.cwd", return_value=tmp_path):
            yield tmp_path

    def test_build_to_stdout(self, runner, mock_cwd):
        result = runner.invoke(build, ["-c", "2", "-r", "1"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["type"] == "@webflow/XscpData"
        table = extract_table(data)
        assert table.has_header is True
        assert table.rows == [["", ""], ["", ""]]

    def test_json_summary(self, runner, mock_cwd):
        result = runner.invoke(build, ["-c", "4", "-r", "2", "--no-header", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["meta"] == {"status": "success", "command": "build"}
        assert data["data"]["columns"] == 4
        assert data["data"]["body_rows"] == 2
        assert data["data"]["from_csv"] is False
        assert data["data"]["envelope"]["type"] == "@webflow/XscpData"

    def test_build_from_csv(self, runner, mock_cwd):
        csv_file = mock_cwd / "data.csv"
        csv_file.write_text('Name,Note\nAda,"hello, world"\n')
        out = mock_cwd / "out" / "table.json"

        result = runner.invoke(build, ["--csv", str(csv_file), "-o", str(out)])

        assert result.exit_code == 0
        table = extract_table(out.read_text())
        assert table.rows == [["Name", "Note"], ["Ada", "hello, world"]]

    def test_csv_json_summary(self, runner, mock_cwd):
        csv_file = mock_cwd / "data.csv"
        csv_file.write_text("a,b,c\n1,2,3\n4,5,6\n")

        result = runner.invoke(build, ["--csv", str(csv_file), "--json"])

        assert result.exit_code == 0
        summary = json.loads(result.output)["data"]
        assert (summary["columns"], summary["body_rows"]) == (3, 2)
        assert summary["from_csv"] is True

    def test_empty_csv_fails(self, runner, mock_cwd):
        csv_file = mock_cwd / "empty.csv"
        csv_file.write_text("")

        result = runner.invoke(build, ["--csv", str(csv_file), "--json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["meta"]["status"] == "error"
        assert data["error"]["type"] == "TableGraphError"
        assert "CSV contains no data" in data["error"]["message"]

    def test_missing_csv_fails(self, runner, mock_cwd):
        result = runner.invoke(build, ["--csv", str(mock_cwd / "nope.csv"), "--json"])

        assert result.exit_code == 1
        assert json.loads(result.output)["meta"]["status"] == "error"

    def test_config_defaults_and_flag_override(self, runner, mock_cwd):
        config_dir = mock_cwd / ".tablegraph"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text(yaml.dump({
            "table": {"columns": 5, "table_class": "from-config", "cell_class": "p-2"},
        }))

        result = runner.invoke(build, ["--table-class", "from-flag", "--json"])

        assert result.exit_code == 0
        summary = json.loads(result.output)["data"]
        assert summary["columns"] == 5
        names = {s["name"] for s in summary["envelope"]["payload"]["styles"]}
        assert names == {"from-flag", "p-2"}

    def test_invalid_config_fails(self, runner, mock_cwd):
        bad = mock_cwd / "bad.yaml"
        bad.write_text("table:\n  columns: lots\n")

        result = runner.invoke(build, ["--config", str(bad), "--json"])

        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["type"] == "ConfigError"
