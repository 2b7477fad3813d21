"""
Tests for the `python -m danja` command line.
"""

import pytest

from danja.__main__ import main, parse_var


@pytest.fixture
def script(tmp_path):
    def write(source: str, name: str = "script.danja"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return str(path)
    return write


class TestParseVar:
    """Test NAME=VALUE parsing."""

    def test_typed_values(self):
        """Values are parsed as bool, int, float, then string."""
        assert parse_var("a=1") == ("a", 1)
        assert parse_var("b = 2.5") == ("b", 2.5)
        assert parse_var("c=TRUE") == ("c", True)
        assert parse_var("d='x y'") == ("d", "x y")
        assert parse_var("e=안녕") == ("e", "안녕")

    def test_missing_equals(self):
        """A variable needs a name and an equals sign."""
        with pytest.raises(ValueError):
            parse_var("oops")
        with pytest.raises(ValueError):
            parse_var(" =1")


class TestRun:
    """Test the run sub-command."""

    def test_run_prints(self, script, capsys):
        """Sample natives are available to scripts."""
        path = script("[[출력|[[덧셈|1|2|3]]|[[a]]]]")
        assert main(["run", path, "--var", "a=안녕"]) == 0
        assert capsys.readouterr().out == "6 안녕\n"

    def test_run_with_config(self, script, tmp_path, capsys):
        """Variables may come from a config file."""
        config = tmp_path / "run.yaml"
        config.write_text("variables:\n  a: 10\n", encoding="utf-8")
        path = script("[[출력|[[덧셈|[[a]]|5]]]]")
        assert main(["run", path, "--config", str(config)]) == 0
        assert capsys.readouterr().out == "15\n"

    def test_run_reports_errors(self, script, capsys):
        """A failing script exits 1 with the diagnostic on stderr."""
        path = script("[[없음|]]")
        assert main(["run", path]) == 1
        assert "E201" in capsys.readouterr().err

    def test_run_missing_file(self, tmp_path, capsys):
        """A missing source file is reported."""
        assert main(["run", str(tmp_path / "nope.danja")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_run_bad_config(self, script, tmp_path, capsys):
        """An invalid config is reported before running."""
        config = tmp_path / "run.yaml"
        config.write_text("optimize: maybe\n", encoding="utf-8")
        assert main(["run", script("[[출력|x]]"), "--config", str(config)]) == 1
        assert "optimize" in capsys.readouterr().err

    def test_run_malformed_config(self, script, tmp_path, capsys):
        """A config that is not valid YAML exits 1 without running."""
        config = tmp_path / "run.yaml"
        config.write_text("variables: [unclosed\n", encoding="utf-8")
        assert main(["run", script("[[출력|x]]"), "--config", str(config)]) == 1
        captured = capsys.readouterr()
        assert captured.err.startswith("Error: invalid YAML")
        assert captured.out == ""


class TestInspect:
    """Test the tokens and ast sub-commands."""

    def test_tokens(self, script, capsys):
        """Tokens are printed one per line."""
        assert main(["tokens", script("[[f|x]]")]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "BLOCK_START('[')",
            "BLOCK_START('[')",
            "IDENTIFIER('f')",
            "SEPARATOR('|')",
            "VALUE('x')",
            "BLOCK_END(']')",
            "BLOCK_END(']')",
        ]

    def test_raw_tokens(self, script, capsys):
        """--raw skips the optimization pass."""
        assert main(["tokens", script("[[f|x]]"), "--raw"]) == 0
        assert "IDENTIFIER('x')" in capsys.readouterr().out

    def test_ast(self, script, capsys):
        """The AST is printed as an indented tree."""
        assert main(["ast", script("[[f|1|[[a]]]]")]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Program",
            "  Function 'f'",
            "    Value '1'",
            "    Block 'a'",
        ]

    def test_ast_parse_error(self, script, capsys):
        """Parse errors are reported on stderr."""
        assert main(["ast", script("[[f|1]")]) == 1
        assert "E102" in capsys.readouterr().err
