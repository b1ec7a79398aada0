"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

from stressless.config import get_settings
from stressless.main import main


@pytest.fixture
def db_env(tmp_path, monkeypatch):
    monkeypatch.setattr("stressless.main.setup_logging", lambda level: None)
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


class TestCli:
    def test_assess_then_dashboard(self, db_env, capsys):
        assert _run(["assess", "--answer", "1=9", "--answer", "3=1", "--heart-rate", "95"]) == 0
        out = capsys.readouterr().out
        assert "Current stress level" in out
        assert "Sleep Focus Needed" in out

        assert _run(["dashboard"]) == 0
        assert "Current stress level" in capsys.readouterr().out

    def test_invalid_answer(self, db_env, capsys):
        assert _run(["assess", "--answer", "2=12"]) == 2
        assert "must be in" in capsys.readouterr().err

    def test_export(self, db_env, tmp_path, capsys):
        assert _run(["assess"]) == 0
        target = tmp_path / "history.json"
        assert _run(["export", str(target), "--format", "json"]) == 0
        assert target.exists()
        assert "Exported 1 entries" in capsys.readouterr().out

    def test_no_command_prints_help(self, db_env):
        assert _run([]) == 1
