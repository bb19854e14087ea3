from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ROOT = Path(__file__).resolve().parents[2]


def test_upgrade_creates_tables_and_downgrade_drops_them(tmp_path: Path) -> None:
    db_path = tmp_path / "migrated.sqlite3"
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "backend/src/movievault/infrastructure/database/migrations"))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    config.attributes["configure_logger"] = False

    command.upgrade(config, "head")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        assert {"users", "movies"} <= set(inspector.get_table_names())
        assert {c["name"] for c in inspector.get_columns("movies")} >= {
            "id", "owner_id", "title", "director", "genre", "release_year", "rating",
        }
        foreign_keys = inspector.get_foreign_keys("movies")
        assert foreign_keys[0]["referred_table"] == "users"
    finally:
        engine.dispose()

    command.downgrade(config, "base")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        assert "movies" not in inspect(engine).get_table_names()
    finally:
        engine.dispose()
