from pathlib import Path

import pytest

from timesheet_py.config import load_config
from timesheet_py.errors import ConfigError


def test_defaults_when_missing(tmp_path: Path, monkeypatch):
    tmp_path = tmp_path.resolve()
    monkeypatch.chdir(tmp_path)
    cfg = load_config()
    assert cfg.store_path == tmp_path / "Timesheet.xlsx"
    assert cfg.timing_sheet == "Timing"
    assert cfg.completed_sheet == "Completed"
    assert cfg.archive_dir == tmp_path / "Archive"
    assert cfg.backup_name == "Timesheet"
    assert cfg.log_path == tmp_path / "timesheet.log"
    assert cfg.log_level == "INFO"


def test_yaml_overrides_are_merged(tmp_path: Path):
    tmp_path = tmp_path.resolve()
    (tmp_path / "timesheet.yml").write_text(
        "store:\n  path: {}\nbackup:\n  name: Hours\nlogging:\n  level: debug\n  file: ''\n".format(
            (tmp_path / "data" / "hours.xlsx").as_posix()
        ),
        encoding="utf-8",
    )
    cfg = load_config(tmp_path)
    assert cfg.store_path == tmp_path / "data" / "hours.xlsx"
    assert cfg.archive_dir == tmp_path / "data" / "Archive"
    assert cfg.backup_name == "Hours"
    assert cfg.timing_sheet == "Timing"  # untouched default
    assert cfg.log_level == "DEBUG"
    assert cfg.log_path is None


def test_yaml_extension_fallback(tmp_path: Path):
    (tmp_path / "timesheet.yaml").write_text("ui:\n  pause_seconds: 0\n", encoding="utf-8")
    assert load_config(tmp_path).pause_seconds == 0.0


def test_with_store_override(tmp_path: Path):
    tmp_path = tmp_path.resolve()
    cfg = load_config(tmp_path).with_store(tmp_path / "other.xlsx")
    assert cfg.store_path == tmp_path / "other.xlsx"


@pytest.mark.parametrize(
    "text",
    ["- just\n- a list\n", "logging:\n  level: LOUD\n", "ui:\n  pause_seconds: soon\n", "store: [\n"],
)
def test_bad_config_raises(tmp_path: Path, text: str):
    (tmp_path / "timesheet.yml").write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)
