"""Tests for the single-file and batch converters."""

import json

import pytest

from convert import batch_convert, convert_file, main


class TestConvertFile:
    def test_writes_graph_json(self, tmp_path):
        source = tmp_path / "zoo.mmd"
        source.write_text("classDiagram\nAnimal <|-- Dog\n", encoding="utf-8")

        model = convert_file(source)

        output = json.loads((tmp_path / "zoo.json").read_text(encoding="utf-8"))
        assert output == model.to_dict()
        assert output["links"][0]["type"] == "inheritance"

    def test_writes_dot_when_requested(self, tmp_path):
        source = tmp_path / "flow.mmd"
        source.write_text("flowchart LR\nA --> B\n", encoding="utf-8")

        convert_file(source, tmp_path / "out" / "flow.json", save_dot=True)

        dot = (tmp_path / "out" / "flow.dot").read_text(encoding="utf-8")
        assert "rankdir=LR" in dot
        assert "A -> B" in dot


class TestBatchConvert:
    def test_summary(self, tmp_path):
        input_dir = tmp_path / "in"
        input_dir.mkdir()
        (input_dir / "a.mmd").write_text("classDiagram\nA --> B\n", encoding="utf-8")
        (input_dir / "b.txt").write_text("%% nothing here\n", encoding="utf-8")
        (input_dir / "ignored.json").write_text("{}", encoding="utf-8")

        summary = batch_convert(input_dir, tmp_path / "out")

        assert summary["stats"] == {"total": 2, "success": 1, "failed": 0, "empty": 1}
        assert [r["id"] for r in summary["results"]] == ["a", "b"]
        assert (tmp_path / "out" / "conversion_summary.json").exists()

    def test_shared_stem_does_not_overwrite(self, tmp_path, capsys):
        input_dir = tmp_path / "in"
        input_dir.mkdir()
        (input_dir / "a.mmd").write_text("classDiagram\nA --> B\n", encoding="utf-8")
        (input_dir / "a.txt").write_text("flowchart LR\nX --> Y\n", encoding="utf-8")

        summary = batch_convert(input_dir, tmp_path / "out")

        assert [r["id"] for r in summary["results"]] == ["a_mmd", "a_txt"]
        first = json.loads((tmp_path / "out" / "a_mmd.json").read_text(encoding="utf-8"))
        second = json.loads((tmp_path / "out" / "a_txt.json").read_text(encoding="utf-8"))
        assert [n["id"] for n in first["nodes"]] == ["A", "B"]
        assert [n["id"] for n in second["nodes"]] == ["X", "Y"]
        assert "Name clash: a.txt written as a_txt.json" in capsys.readouterr().out

    def test_empty_directory(self, tmp_path, capsys):
        summary = batch_convert(tmp_path, tmp_path / "out")
        assert summary["stats"]["total"] == 0
        assert "No Mermaid files found" in capsys.readouterr().out


class TestMain:
    def test_missing_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing.mmd")])
        assert excinfo.value.code == 1
        assert "is not a file" in capsys.readouterr().err

    def test_single_file(self, tmp_path, capsys):
        source = tmp_path / "d.mmd"
        source.write_text("flowchart TD\nA -->|yes| B\n", encoding="utf-8")
        main([str(source)])
        out = capsys.readouterr().out
        assert "Dialect: flowchart" in out
        assert "Links: 1" in out
