"""Application lifespan and command line runner behaviour."""

from __future__ import annotations

import argparse
import pathlib
import runpy
from uuid import uuid4

import pytest

from app.db.session import Database
from app.main import create_app

SCRIPT_PATH = pathlib.Path(__file__).resolve().parents[1] / "scripts" / "run_projection.py"


def _load_runner():
    return runpy.run_path(str(SCRIPT_PATH), run_name="run_projection_script")


class _BrokenSchemaDatabase(Database):
    def __init__(self, url: str):
        super().__init__(url)
        self.disposed = False

    async def create_all(self) -> None:
        raise RuntimeError("schema unavailable")

    async def dispose(self) -> None:
        self.disposed = True
        await super().dispose()


async def test_lifespan_disposes_engine_when_startup_fails(tmp_path):
    database = _BrokenSchemaDatabase(f"sqlite+aiosqlite:///{tmp_path / 'broken.db'}")
    app = create_app(database)

    with pytest.raises(RuntimeError):
        async with app.router.lifespan_context(app):
            pass

    assert database.disposed


async def test_runner_reports_missing_simulation(tmp_path, capsys):
    url = f"sqlite+aiosqlite:///{tmp_path / 'runner.db'}"
    database = Database(url)
    await database.create_all()
    await database.dispose()

    simulation_id = uuid4()
    args = argparse.Namespace(
        simulation_id=simulation_id,
        start=None,
        end=None,
        interest=None,
        inflation=None,
        life_status=None,
        change_date=None,
        database_url=url,
    )
    exit_code = await _load_runner()["_run"](args)

    assert exit_code == 1
    captured = capsys.readouterr()
    assert f"Simulation {simulation_id} not found" in captured.err
