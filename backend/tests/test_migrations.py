"""Alembic schema matches the models' create_all schema"""
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from backend.app.core.config import settings
from backend.app.db.base import Base
import backend.app.models  # noqa: F401

ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


def _indexes(engine, table):
    insp = inspect(engine)
    return sorted((ix["name"], tuple(ix["column_names"]), bool(ix["unique"])) for ix in insp.get_indexes(table))


def _unique_constraints(engine, table):
    return sorted(tuple(uc["column_names"]) for uc in inspect(engine).get_unique_constraints(table))


@pytest.fixture
def migrated_engine(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setattr(settings, "database_url", url)
    cfg = Config()  # no ini file, so the app's logging config is left alone
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))
    command.upgrade(cfg, "head")
    engine = create_engine(url)
    yield engine
    engine.dispose()


@pytest.fixture
def model_engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'models.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.mark.parametrize("table", ["users", "profiles"])
def test_migration_indexes_match_models(migrated_engine, model_engine, table):
    assert _indexes(migrated_engine, table) == _indexes(model_engine, table)
    assert _unique_constraints(migrated_engine, table) == _unique_constraints(model_engine, table)


def test_profile_user_id_is_a_unique_index(migrated_engine):
    assert ("ix_profiles_user_id", ("user_id",), True) in _indexes(migrated_engine, "profiles")
