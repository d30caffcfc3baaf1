"""Unit tests for console and file helpers (blueprinter.utils)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from blueprinter.utils import (
    load_json,
    print_error,
    print_success,
    print_summary_table,
    print_text,
    print_warning,
    write_text,
)


class TestJsonIO:
    @pytest.mark.unit
    def test_load_object(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"a": 1}), encoding="utf-8")
        assert load_json(path) == {"a": 1}

    @pytest.mark.unit
    def test_load_rejects_array(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            load_json(path)

    @pytest.mark.unit
    def test_load_invalid_json(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text("{nope", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)

    @pytest.mark.unit
    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")


class TestWriteText:
    @pytest.mark.unit
    def test_creates_parents_and_adds_newline(self, tmp_path: Path):
        target = tmp_path / "out" / "deep" / "BLUEPRINT.md"
        written = write_text("# Title", target)
        assert written == target
        assert target.read_text(encoding="utf-8") == "# Title\n"

    @pytest.mark.unit
    def test_keeps_existing_newline(self, tmp_path: Path):
        target = tmp_path / "a.md"
        write_text("x\n", target)
        assert target.read_text(encoding="utf-8") == "x\n"


class TestConsoleOutput:
    @pytest.mark.unit
    def test_messages_are_escaped(self):
        with patch("blueprinter.utils.console") as mock_console:
            print_error("bad [id: 1]")
            print_success("ok [x]")
            print_warning("hmm [y]")
        printed = [c.args[0] for c in mock_console.print.call_args_list]
        assert printed[0] == "[bold red]Error:[/bold red] bad \\[id: 1]"
        assert printed[1] == "[bold green]ok \\[x][/bold green]"
        assert printed[2] == "[bold yellow]hmm \\[y][/bold yellow]"

    @pytest.mark.unit
    def test_print_text_disables_markup(self):
        with patch("blueprinter.utils.console") as mock_console:
            print_text("[not markup]")
        mock_console.print.assert_called_once_with(
            "[not markup]", markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    @pytest.mark.unit
    def test_summary_table(self, capsys):
        print_summary_table({"Project": "Shop", "Routes": "3"}, title="Blueprint")
        out = capsys.readouterr().out
        assert "Blueprint" in out
        assert "Shop" in out
        assert "Routes" in out
