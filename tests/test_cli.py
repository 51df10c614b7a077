"""Tests for the netdiagram command line."""

import json

import pytest
from typer.testing import CliRunner

from netdiagram import config as config_module
from netdiagram.main import app

runner = CliRunner()


@pytest.fixture
def result_file(write_json):
    return write_json("result.json", {
        "data": {
            "count": [1, 2, 3],
            "dst_country": ["CN", "CN", "US"],
            "src_country": ["US", "US", "CN"],
        },
        "metadata": {"fields": [{"name": "count"}, {"name": "dst_country"}, {"name": "src_country"}]},
    })


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep netdiagram.toml lookups inside the test directory."""
    monkeypatch.chdir(tmp_path)


def test_build_json(result_file):
    result = runner.invoke(app, ["build", str(result_file), "--json"])
    assert result.exit_code == 0, result.output

    payload = json.loads(result.output)
    assert payload["sourceField"] == "src_country"
    assert payload["destField"] == "dst_country"
    assert payload["valueField"] == "count"
    assert payload["graph"]["nodes"] == [
        {"id": 1, "label": "US", "title": "US"},
        {"id": 2, "label": "CN", "title": "CN"},
    ]
    assert payload["graph"]["edges"] == [
        {"from": 1, "to": 2, "title": 1},
        {"from": 1, "to": 2, "title": 2},
        {"from": 2, "to": 1, "title": 3},
    ]
    assert payload["valueRange"] == {"min": 1.0, "max": 3.0}
    assert payload["options"]["physics"]["stabilization"]["iterations"] == 50
    assert "scaling" not in payload["options"]["edges"]


def test_build_json_with_selection_and_title(result_file):
    result = runner.invoke(
        app,
        ["build", str(result_file), "--json", "-s", "dst_country", "-d", "src_country", "-t", "Flows"],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["title"] == "Flows"
    assert [n["label"] for n in payload["graph"]["nodes"]] == ["CN", "US"]


def test_build_scales_edges_when_enabled(result_file, monkeypatch):
    monkeypatch.setenv("NETDIAGRAM_SCALE_EDGES", "1")
    config_module.reload_settings()
    result = runner.invoke(app, ["build", str(result_file), "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["options"]["edges"]["scaling"] == {"min": 1.0, "max": 3.0}


def test_build_table(result_file):
    result = runner.invoke(app, ["build", str(result_file)])
    assert result.exit_code == 0, result.output
    assert "Nodes (2)" in result.output
    assert "Edges (3)" in result.output
    assert "src_country -> dst_country" in result.output


def test_build_html_with_focus(result_file, write_json, service_map_doc, tmp_path):
    services = write_json("services.json", service_map_doc)
    out = tmp_path / "map.html"
    result = runner.invoke(
        app,
        ["build", str(result_file), "--html", str(out), "--focus", "checkout", "--service-map", str(services)],
    )
    assert result.exit_code == 0, result.output
    page = out.read_text(encoding="utf-8")
    assert '"nodeId": 5' in page


def test_build_html_unknown_focus_warns(result_file, write_json, service_map_doc, tmp_path):
    services = write_json("services.json", service_map_doc)
    out = tmp_path / "map.html"
    result = runner.invoke(
        app,
        ["build", str(result_file), "--html", str(out), "--focus", "billing", "--service-map", str(services)],
    )
    assert result.exit_code == 0, result.output
    assert "not in the service map" in result.output
    assert "const FOCUS = null;" in out.read_text(encoding="utf-8")


def test_build_focus_requires_html(result_file):
    result = runner.invoke(app, ["build", str(result_file), "--focus", "checkout"])
    assert result.exit_code == 1
    assert "--focus requires" in result.output


def test_build_too_few_fields(write_json):
    path = write_json("result.json", {"data": {"a": [1]}, "metadata": {"fields": [{"name": "a"}]}})
    result = runner.invoke(app, ["build", str(path)])
    assert result.exit_code == 1
    assert "at least 2 fields" in result.output


def test_build_missing_file(tmp_path):
    result = runner.invoke(app, ["build", str(tmp_path / "missing.json")])
    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_focus_found(write_json, service_map_doc):
    path = write_json("services.json", service_map_doc)
    result = runner.invoke(app, ["focus", str(path), "checkout", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"status": "found", "node_id": 5}


def test_focus_not_found(write_json, service_map_doc):
    path = write_json("services.json", service_map_doc)
    result = runner.invoke(app, ["focus", str(path), "Checkout"])
    assert result.exit_code == 1
    assert "Unknown service" in result.output


def test_focus_empty_query(write_json, service_map_doc):
    path = write_json("services.json", service_map_doc)
    result = runner.invoke(app, ["focus", str(path), "", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"status": "empty", "node_id": None}


def test_options_service_map():
    result = runner.invoke(app, ["options", "--preset", "service_map"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["height"] == "434px"


def test_options_reads_toml(tmp_path):
    (tmp_path / "netdiagram.toml").write_text('[diagram]\nheight = "900px"\n', encoding="utf-8")
    result = runner.invoke(app, ["options"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["height"] == "900px"
