import json

from typer.testing import CliRunner

from gedtree.cli.app import app
from gedtree.utils import mock_file_path

runner = CliRunner()
GEDCOM = str(mock_file_path("family.ged"))


def test_parse_prints_graph_json():
    result = runner.invoke(app, ["parse", GEDCOM])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert len(data["people"]) == 6
    assert [u["id"] for u in data["unions"]] == ["F1", "F2"]
    assert data["diagnostics"][0]["kind"] == "dangling-child-ref"


def test_parse_writes_file(tmp_path):
    out = tmp_path / "graph.json"
    result = runner.invoke(app, ["parse", GEDCOM, "--out", str(out), "--pretty"])

    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding="utf-8"))["people"][0]["id"] == "I1"


def test_parse_missing_file_fails(tmp_path):
    result = runner.invoke(app, ["parse", str(tmp_path / "missing.ged")])
    assert result.exit_code != 0


def test_stats_shows_counts():
    result = runner.invoke(app, ["stats", GEDCOM, "--verbose"])

    assert result.exit_code == 0, result.output
    assert "People" in result.stdout
    assert "dangling-child-ref" in result.stdout


def test_layout_ancestor_mode():
    result = runner.invoke(
        app, ["layout", GEDCOM, "--mode", "ancestor", "--focal", "I6", "-g", "1"]
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert set(data["personPositions"]) == {"I6", "I3", "I4"}
    assert data["bounds"]["height"] > 0


def test_layout_rejects_bad_spacing():
    result = runner.invoke(app, ["layout", GEDCOM, "--h-gap", "0"])
    assert result.exit_code == 1


def test_layout_rejects_unknown_mode():
    result = runner.invoke(app, ["layout", GEDCOM, "--mode", "radial"])
    assert result.exit_code == 1
