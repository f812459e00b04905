"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite

from ..config import get_settings


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_settings().data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "gym_companion.db"


async def _run_migrations(db: aiosqlite.Connection) -> None:
    """Run database migrations for schema updates."""
    cursor = await db.execute("PRAGMA table_info(machines)")
    columns = await cursor.fetchall()
    column_names = {col[1] for col in columns}

    # Early databases stored no notes
    if "notes" not in column_names:
        await db.execute("ALTER TABLE machines ADD COLUMN notes TEXT")

    await db.commit()


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS machines (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                muscles TEXT NOT NULL DEFAULT '[]',
                notes TEXT,
                image_url TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_machines_created
            ON machines(created_at)
        """)

        await db.commit()

        await _run_migrations(db)
