"""Data access layer for gym-companion."""

import json
import logging
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..errors import MachineNotFoundError
from ..models.machine import Machine, parse_muscles
from .engine import get_db_path

logger = logging.getLogger(__name__)


class MachineRepository:
    """Repository for identified machines."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(
        self, name: str, muscles: list[str], image_url: str | None = None
    ) -> Machine:
        """Insert one machine row and return it."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO machines (name, muscles, image_url)
                VALUES (?, ?, ?)
                """,
                (name, json.dumps(parse_muscles(muscles)), image_url),
            )
            await db.commit()
            machine_id = cursor.lastrowid

        logger.info("Created machine %d (%s)", machine_id, name)
        machine = await self.get(machine_id)
        if machine is None:
            raise MachineNotFoundError(machine_id)
        return machine

    async def get(self, machine_id: int) -> Machine | None:
        """Get a machine by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM machines WHERE id = ?", (machine_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_machine(row)

    async def list_all(self) -> list[Machine]:
        """List all machines, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM machines ORDER BY created_at DESC, id DESC"
            )
            rows = await cursor.fetchall()
            return [self._row_to_machine(row) for row in rows]

    async def update(
        self,
        machine_id: int,
        name: str,
        muscles: list[str],
        notes: str | None,
    ) -> None:
        """Update the editable fields of a machine.

        Only name, muscles and notes are written; the image and id are
        left untouched.

        Raises:
            MachineNotFoundError: if no row has this id
        """
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE machines SET name = ?, muscles = ?, notes = ?
                WHERE id = ?
                """,
                (name, json.dumps(parse_muscles(muscles)), notes, machine_id),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise MachineNotFoundError(machine_id)

    async def delete(self, machine_id: int) -> None:
        """Delete a machine.

        Raises:
            MachineNotFoundError: if no row has this id
        """
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM machines WHERE id = ?", (machine_id,))
            await db.commit()
            if cursor.rowcount == 0:
                raise MachineNotFoundError(machine_id)

        logger.info("Deleted machine %d", machine_id)

    def _row_to_machine(self, row: aiosqlite.Row) -> Machine:
        """Convert a database row to a Machine."""
        data = {
            "name": row["name"],
            "muscles": json.loads(row["muscles"]),
            "notes": row["notes"],
            "image_url": row["image_url"],
        }
        return Machine.from_dict(
            data,
            id=row["id"],
            created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
        )
