from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).resolve().parents[1] / "scripts"


def _load_script(name: str):
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_export_script_rejects_bad_date():
    export_csv = _load_script("export_csv")

    with pytest.raises(SystemExit) as excinfo:
        export_csv.main(["2024-13-01"])

    assert "expected YYYY-MM-DD" in str(excinfo.value)


def test_export_script_writes_file(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr("config.testing.DB_CONFIG", {"path": str(tmp_path / "attendance.db")}, raising=False)
    monkeypatch.setattr("config.testing.EXPORT_DIR", str(tmp_path / "exports"), raising=False)
    export_csv = _load_script("export_csv")

    export_csv.main(["2024-01-10"])

    assert (tmp_path / "exports" / "attendance_2024-01-10.csv").exists()
    assert "OK: Exported to:" in capsys.readouterr().out
