from pathlib import Path

import pytest
from click.testing import CliRunner

from linelimit.cli import iter_files, main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LINELIMIT_MAX_LENGTH", raising=False)


class TestMain:
    def test_no_command_shows_help(self, runner: CliRunner) -> None:
        result = runner.invoke(main)
        assert result.exit_code == 0
        assert "Check that no line is longer" in result.output

    def test_help_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.output
        assert "describe" in result.output


class TestCheck:
    def test_all_lines_ok(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "ok.py"
        source.write_text("x = 1\ny = 2\n")
        result = runner.invoke(main, ["check", str(source)])
        assert result.exit_code == 0
        assert "All lines within 120 characters" in result.output

    def test_reports_long_lines(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "long.py"
        source.write_text("ok\n" + "x" * 10 + "\n")
        result = runner.invoke(main, ["check", "--max-length", "5", str(source)])
        assert result.exit_code == 1
        assert f"{source}:2: 10 > 5" in result.output
        assert "Found 1 line(s) longer than 5 characters in 1 file(s)" in result.output

    def test_never_writes_files(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "long.py"
        text = "x" * 10 + "\n"
        source.write_text(text)
        runner.invoke(main, ["check", "-l", "5", "--diff", str(source)])
        assert source.read_text() == text

    def test_diff_shows_marker(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "long.py"
        source.write_text("ok\n" + "x" * 10 + "\n")
        result = runner.invoke(main, ["check", "-l", "5", "--diff", str(source)])
        assert result.exit_code == 1
        assert "+" + "x" * 10 + " # Line too long" in result.output
        assert "-" + "x" * 10 in result.output

    def test_max_length_from_env(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LINELIMIT_MAX_LENGTH", "5")
        source = tmp_path / "long.py"
        source.write_text("x" * 6 + "\n")
        result = runner.invoke(main, ["check", str(source)])
        assert result.exit_code == 1
        assert f"{source}:1: 6 > 5" in result.output

    def test_option_overrides_env(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LINELIMIT_MAX_LENGTH", "5")
        source = tmp_path / "long.py"
        source.write_text("x" * 6 + "\n")
        result = runner.invoke(main, ["check", "-l", "10", str(source)])
        assert result.exit_code == 0

    def test_invalid_max_length(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "a.py"
        source.write_text("x\n")
        result = runner.invoke(main, ["check", "--max-length", "0", str(source)])
        assert result.exit_code == 2
        assert "max_length must be a positive integer" in result.output

    def test_invalid_env_max_length(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LINELIMIT_MAX_LENGTH", "wide")
        source = tmp_path / "a.py"
        source.write_text("x\n")
        result = runner.invoke(main, ["check", str(source)])
        assert result.exit_code == 2

    def test_missing_path(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(main, ["check", str(tmp_path / "nope.py")])
        assert result.exit_code == 2

    def test_directory(self, runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "pkg").mkdir()
        (tmp_path / "pkg" / "a.py").write_text("x" * 8 + "\n")
        (tmp_path / "b.txt").write_text("y" * 9 + "\nok\n")
        result = runner.invoke(main, ["check", "-l", "5", str(tmp_path)])
        assert result.exit_code == 1
        assert "Found 2 line(s) longer than 5 characters in 2 file(s)" in result.output

    def test_skips_undecodable_files(self, runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "blob.bin").write_bytes(b"\xff\xfe\x00\x81" * 10 + b"\n")
        (tmp_path / "ok.py").write_text("x\n")
        result = runner.invoke(main, ["check", "-l", "5", str(tmp_path)])
        assert result.exit_code == 0


class TestIterFiles:
    def test_skips_hidden(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        (tmp_path / ".git" / "config").write_text("x")
        (tmp_path / ".env").write_text("x")
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.py").write_text("x")
        assert list(iter_files([tmp_path])) == [tmp_path / "src" / "a.py"]

    def test_explicit_file(self, tmp_path: Path) -> None:
        source = tmp_path / ".hidden.py"
        source.write_text("x")
        assert list(iter_files([source])) == [source]


class TestDescribe:
    def test_describe(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["describe"])
        assert result.exit_code == 0
        assert "linelimit/line_length_limit" in result.output
        assert "Line must be no longer than 120 characters." in result.output
        assert "Priority: -32" in result.output
        assert "Risky:    no" in result.output

    def test_describe_max_length(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["describe", "-l", "80"])
        assert "Line must be no longer than 80 characters." in result.output
