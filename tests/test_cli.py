"""Tests for the command-line scripts under cli/."""

import importlib.util
import io
import json
import sys
from pathlib import Path

import pytest

CLI_DIR = Path(__file__).resolve().parent.parent / "cli"


def _load_script(name):
    spec = importlib.util.spec_from_file_location(f"cli_{name}", CLI_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


code2graph = _load_script("code2graph")
graph2code = _load_script("graph2code")


# =========================================================================
# Tests: code2graph
# =========================================================================

class TestCode2Graph:
    def test_stdin_with_report(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("classDiagram\nA --> B\nstyle A x"))
        code2graph.main(["--in", "-", "--report"])
        captured = capsys.readouterr()
        assert "Dialect: classDiagram" in captured.err
        assert "skipped: style A x" in captured.err
        graph = json.loads(captured.out)
        assert [n["id"] for n in graph["nodes"]] == ["A", "B"]
        assert graph["links"][0]["type"] == "association"

    def test_file_input_without_report(self, tmp_path, capsys):
        source = tmp_path / "flow.mmd"
        source.write_text("flowchart LR\nA -->|go| B\n", encoding="utf-8")
        code2graph.main(["--in", str(source)])
        captured = capsys.readouterr()
        assert captured.err == ""
        assert json.loads(captured.out)["links"][0]["label"] == "go"

    def test_empty_input_reports_empty(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO(""))
        code2graph.main(["--report"])
        captured = capsys.readouterr()
        assert "Dialect: empty" in captured.err
        assert json.loads(captured.out) == {"nodes": [], "links": []}


# =========================================================================
# Tests: graph2code
# =========================================================================

class TestGraph2Code:
    def test_invalid_document_exits(self, tmp_path, capsys):
        document = tmp_path / "bad.json"
        document.write_text(json.dumps({"nodes": []}), encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            graph2code.main(["--in", str(document), "--fmt", "dot"])
        assert excinfo.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_malformed_json_exits(self, tmp_path, capsys):
        document = tmp_path / "broken.json"
        document.write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            graph2code.main(["--in", str(document), "--fmt", "mermaid"])
        assert excinfo.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_dot_to_stdout(self, tmp_path, capsys):
        document = tmp_path / "graph.json"
        document.write_text(
            json.dumps({"nodes": [{"id": "A"}, {"id": "B"}], "links": [{"source": "A", "target": "B", "type": "link"}]}),
            encoding="utf-8",
        )
        graph2code.main(["--in", str(document), "--fmt", "dot", "--orientation", "LR"])
        out = capsys.readouterr().out
        assert out.startswith("digraph")
        assert "rankdir=LR" in out
        assert "A -> B" in out

    def test_mermaid_to_file(self, tmp_path, capsys):
        document = tmp_path / "graph.json"
        document.write_text(
            json.dumps({"nodes": [], "links": [{"source": "A", "target": "B", "type": "inheritance", "label": ""}]}),
            encoding="utf-8",
        )
        output = tmp_path / "diagram.mmd"
        graph2code.main(["--in", str(document), "--fmt", "mermaid", "--out", str(output)])
        assert capsys.readouterr().out == ""
        assert output.read_text(encoding="utf-8").startswith("classDiagram")
