"""Tests for the Alembic migrations."""
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

BACKEND_DIR = Path(__file__).resolve().parents[1]


def _alembic_config(database_url: str) -> Config:
    config = Config(str(BACKEND_DIR / "alembic.ini"))
    config.set_main_option("sqlalchemy.url", database_url)
    config.attributes["configure_logger"] = False
    return config


def test_upgrade_and_downgrade(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'migrations.db'}"
    config = _alembic_config(database_url)

    command.upgrade(config, "head")
    engine = create_engine(database_url)
    inspector = inspect(engine)
    assert {"authors", "tags", "posts", "post_tags"} <= set(inspector.get_table_names())
    post_columns = {column["name"] for column in inspector.get_columns("posts")}
    assert {"slug", "draft", "created_at", "updated_at", "author_id"} <= post_columns

    command.downgrade(config, "base")
    assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    engine.dispose()
