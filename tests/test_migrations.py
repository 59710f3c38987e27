"""Tests for the alembic migrations."""
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from core.config import get_settings
from models import Base

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "src" / "db" / "migrations"


@pytest.fixture
def migrated_db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A SQLite file upgraded to the latest revision."""
    path = tmp_path / "migrations.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{path}")
    get_settings.cache_clear()

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    try:
        command.upgrade(config, "head")
    finally:
        get_settings.cache_clear()
    return path


def test_upgrade_creates_model_tables(migrated_db: Path) -> None:
    """Test the migrated schema has every model table with its columns and indexes."""
    engine = create_engine(f"sqlite:///{migrated_db}")
    try:
        inspector = inspect(engine)
        assert set(Base.metadata.tables) <= set(inspector.get_table_names())

        for name, table in Base.metadata.tables.items():
            columns = {column["name"] for column in inspector.get_columns(name)}
            assert columns == set(table.columns.keys()), name

            indexes = {index["name"] for index in inspector.get_indexes(name)}
            assert indexes == {index.name for index in table.indexes}, name
    finally:
        engine.dispose()


def test_upgrade_creates_constraints(migrated_db: Path) -> None:
    """Test the membership key, cascades and smart-list check survive migration."""
    engine = create_engine(f"sqlite:///{migrated_db}")
    try:
        inspector = inspect(engine)

        pk = inspector.get_pk_constraint("bookmarks_in_lists")
        assert pk["constrained_columns"] == ["list_id", "bookmark_id"]

        ondelete = {
            fk["referred_table"]: fk["options"].get("ondelete")
            for fk in inspector.get_foreign_keys("bookmarks_in_lists")
        }
        assert ondelete == {"bookmark_lists": "CASCADE", "bookmarks": "CASCADE"}

        parent_fk = inspector.get_foreign_keys("bookmark_lists")
        assert [fk["options"].get("ondelete") for fk in parent_fk] == ["SET NULL"]

        checks = {check["name"] for check in inspector.get_check_constraints("bookmark_lists")}
        assert "ck_bookmark_lists_query_only_for_smart" in checks
    finally:
        engine.dispose()


def test_downgrade_removes_tables(migrated_db: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test downgrading to base drops every table the upgrade created."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{migrated_db}")
    get_settings.cache_clear()
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    try:
        command.downgrade(config, "base")
    finally:
        get_settings.cache_clear()

    engine = create_engine(f"sqlite:///{migrated_db}")
    try:
        assert set(inspect(engine).get_table_names()) == {"alembic_version"}
    finally:
        engine.dispose()
