"""Alembic migration tests (run against a throwaway SQLite file)."""

import os
import subprocess
import sys
from pathlib import Path

from sqlalchemy import create_engine, inspect

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def run_alembic(database_url: str, *args: str) -> subprocess.CompletedProcess[str]:
    """Run alembic against database_url and return the result."""
    env = os.environ.copy()
    env["DATABASE_URL"] = database_url
    return subprocess.run(
        [sys.executable, "-m", "alembic", *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=60,
        env=env,
    )


def test_alembic_upgrade_downgrade_cycle(tmp_path: Path) -> None:
    """upgrade head creates the evidence table; downgrade base removes it."""
    url = f"sqlite:///{tmp_path / 'migrations.db'}"

    result = run_alembic(url, "upgrade", "head")
    assert result.returncode == 0, f"alembic upgrade head failed: {result.stderr}"

    engine = create_engine(url)
    try:
        inspector = inspect(engine)
        assert "evidence" in inspector.get_table_names()
        columns = {c["name"] for c in inspector.get_columns("evidence")}
        assert columns == {"id", "testimony", "date_time", "created_by"}
    finally:
        engine.dispose()

    result = run_alembic(url, "downgrade", "base")
    assert result.returncode == 0, f"alembic downgrade base failed: {result.stderr}"

    engine = create_engine(url)
    try:
        assert "evidence" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()
