"""Tests for the command-line entry point."""

import io
import logging

import pytest

from phylotext.__main__ import main


class TestCli:
    """Test suite for `python -m phylotext`."""

    def test_renders_newick_file(self, tmp_path, capsys):
        path = tmp_path / "tree.nwk"
        path.write_text("(A:1,B:2)R:0;", encoding="utf-8")

        assert main([str(path), "--width", "10", "--height", "4"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "          Reference",
            "|----1    A",
            "0   2     ",
            "----------B",
            "          ",
        ]

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("(A:1,B:2);"))
        assert main(["-", "--width", "10", "--height", "4"]) == 0
        assert "----------B" in capsys.readouterr().out

    def test_demo_tree(self, capsys):
        assert main(["--demo", "3", "--width", "40", "--height", "8"]) == 0
        out = capsys.readouterr().out
        for name in ("L_3", "L_2", "L_1", "R_1"):
            assert name in out

    def test_colored_output_strips_markup(self, capsys):
        assert main(["--demo", "2", "--width", "30", "--height", "6", "--color", "cyan"]) == 0
        out = capsys.readouterr().out
        assert "R_1" in out
        assert "[cyan]" not in out

    def test_missing_file_exits_with_error(self, tmp_path, capsys):
        assert main([str(tmp_path / "absent.nwk")]) == 1
        assert "absent.nwk" in capsys.readouterr().err

    def test_degenerate_tree_exits_with_error(self, tmp_path, capsys):
        path = tmp_path / "star.nwk"
        path.write_text("(A:0,B:0);", encoding="utf-8")
        assert main([str(path)]) == 1
        assert "scale is undefined" in capsys.readouterr().err

    def test_log_file_option(self, tmp_path):
        log_file = tmp_path / "run.log"
        args = ["--demo", "2", "--width", "20", "--height", "6", "--log-level", "INFO", "--log-file", str(log_file)]
        assert main(args) == 0
        for handler in logging.getLogger("phylotext").handlers:
            handler.close()
        assert "Rendering tree with 3 leaves on a 20x6 grid" in log_file.read_text(encoding="utf-8")

    def test_tree_argument_required(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def teardown_method(self):
        logger = logging.getLogger("phylotext")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
