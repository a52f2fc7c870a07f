"""Tests for the axtree command-line shell.

Verifies:
- Tree and JSON output for file and stdin input
- --no-color, NO_COLOR and --width handling
- Argument validation exits with status 2
- Unreadable or malformed input exits with status 1 and a stderr message
"""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from axtree.cli import build_parser, main
from axtree.formatting.config import OutputFormat

SNAPSHOT = {
    "role": "AXApplication",
    "title": "Demo",
    "children": [
        {"role": "AXButton", "label": "Cancel", "traits": 1},
        {"role": "AXButton", "label": "OK", "identifier": "ok_btn", "traits": ["button"]},
    ],
}


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _no_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.input == "-"
        assert args.format is OutputFormat.TREE
        assert args.width == 80
        assert args.no_color is False

    def test_format_is_case_insensitive(self) -> None:
        assert build_parser().parse_args(["-f", "JSON"]).format is OutputFormat.JSON

    @pytest.mark.parametrize("argv", [["--width", "0"], ["-w", "-3"], ["--width", "wide"]])
    def test_invalid_width(self, argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 2
        assert "positive number" in capsys.readouterr().err

    def test_invalid_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--format", "xml"])
        assert excinfo.value.code == 2
        assert "'tree' or 'json'" in capsys.readouterr().err

    def test_unknown_argument(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--bogus"])
        assert excinfo.value.code == 2


class TestTreeOutput:
    def test_plain_tree(self, snapshot_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(snapshot_file), "--no-color"]) == 0
        assert capsys.readouterr().out == (
            "├── AXButton\n"
            "│   label: Cancel\n"
            "│   traits: [button]\n"
            "└── AXButton\n"
            "    label: OK\n"
            "    traits: [button]\n"
            "    id: ok_btn\n"
        )

    def test_colored_by_default(
        self, snapshot_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(snapshot_file)]) == 0
        assert "\x1b[35mAXButton\x1b[0m" in capsys.readouterr().out

    def test_no_color_env(
        self,
        snapshot_file: Path,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        assert main([str(snapshot_file)]) == 0
        assert "\x1b" not in capsys.readouterr().out

    def test_empty_no_color_env_keeps_colors(
        self,
        snapshot_file: Path,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("NO_COLOR", "")
        assert main([str(snapshot_file)]) == 0
        assert "\x1b[35mAXButton\x1b[0m" in capsys.readouterr().out

    def test_width(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "wide.json"
        path.write_text(
            json.dumps({"children": [{"role": "AXStaticText", "label": "one two three four"}]}),
            encoding="utf-8",
        )
        assert main([str(path), "--no-color", "-w", "16"]) == 0
        assert capsys.readouterr().out == (
            "└── AXStaticText\n"
            "    label:\n"
            "      one two\n"
            "      three four\n"
        )

    def test_array_input_renders_each_root(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "roots.json"
        path.write_text(json.dumps([{"role": "AXWindow"}, {"role": "AXMenuBar"}]), encoding="utf-8")
        assert main([str(path), "--no-color"]) == 0
        assert capsys.readouterr().out == "├── AXWindow\n└── AXMenuBar\n"

    def test_single_element_array_is_a_root(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "root.json"
        path.write_text('\n  [{"role": "AXWindow"}]', encoding="utf-8")
        assert main([str(path), "--no-color"]) == 0
        assert capsys.readouterr().out == "└── AXWindow\n"

    def test_leaf_container_prints_empty_line(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "leaf.json"
        path.write_text('{"role": "AXApplication"}', encoding="utf-8")
        assert main([str(path)]) == 0
        assert capsys.readouterr().out == "\n"

    def test_reads_stdin(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(SNAPSHOT)))
        assert main(["-", "--no-color"]) == 0
        assert capsys.readouterr().out.startswith("├── AXButton\n")


class TestJsonOutput:
    def test_whole_document(self, snapshot_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(snapshot_file), "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {
            "role": "AXApplication",
            "title": "Demo",
            "children": [
                {"role": "AXButton", "label": "Cancel", "traits": ["button"]},
                {"role": "AXButton", "label": "OK", "identifier": "ok_btn", "traits": ["button"]},
            ],
        }

    def test_array_is_wrapped(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "roots.json"
        path.write_text(json.dumps([{"role": "AXWindow"}]), encoding="utf-8")
        assert main([str(path), "-f", "json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"children": [{"role": "AXWindow"}]}


class TestInputErrors:
    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "missing.json")]) == 1
        assert capsys.readouterr().err.startswith("axtree: error:")

    def test_malformed_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{oops", encoding="utf-8")
        assert main([str(path)]) == 1
        assert "axtree: error:" in capsys.readouterr().err

    def test_wrong_shape(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "shape.json"
        path.write_text('{"label": 5}', encoding="utf-8")
        assert main([str(path)]) == 1
        assert "'label' must be a string" in capsys.readouterr().err
