import io
import subprocess
import sys
from pathlib import Path

from timesheet_py.cli import main


def _run(cmd: list[str], stdin: str = "", cwd: Path | None = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        cmd,
        input=stdin,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        cwd=cwd,
    )


def test_help():
    proc = _run([sys.executable, "-m", "timesheet_py.cli", "--help"])
    assert proc.returncode == 0
    assert "--store" in proc.stdout


def test_exit_immediately(tmp_path: Path):
    proc = _run(
        [sys.executable, "-m", "timesheet_py.cli", "--store", str(tmp_path / "t.xlsx")],
        stdin="x\n",
        cwd=tmp_path,
    )
    assert proc.returncode == 0
    assert "Projects" in proc.stdout
    assert (tmp_path / "timesheet.log").exists()


def test_main_reports_fatal_errors(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    cfg_dir = tmp_path / "config"
    cfg_dir.mkdir()
    (cfg_dir / "timesheet.yml").write_text("- not a mapping\n", encoding="utf-8")
    assert main(["--config-dir", str(cfg_dir)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_main_eof_exits_cleanly(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--store", str(tmp_path / "t.xlsx")]) == 0


def test_version_is_exposed():
    import timesheet_py

    assert isinstance(timesheet_py.__version__, str) and timesheet_py.__version__
