"""Tests for the machine repository."""

import asyncio

import pytest

from gym_companion.db import MachineRepository, init_db
from gym_companion.errors import MachineNotFoundError


@pytest.fixture
def repo(temp_db_path):
    asyncio.run(init_db(temp_db_path))
    return MachineRepository(temp_db_path)


class TestMachineRepository:
    """Tests for MachineRepository."""

    def test_create_and_get(self, repo):
        """Test a created machine can be read back."""
        created = asyncio.run(repo.create("Leg Press", ["Quads", "Glutes"], "data:image/png;base64,AAAA"))
        fetched = asyncio.run(repo.get(created.id))

        assert fetched.name == "Leg Press"
        assert fetched.muscles == ["Quads", "Glutes"]
        assert fetched.image_url == "data:image/png;base64,AAAA"
        assert fetched.notes is None
        assert fetched.created_at is not None

    def test_create_raises_when_row_vanishes(self, repo, monkeypatch):
        """Test create reports a row that cannot be read back as not found."""
        async def missing(machine_id):
            return None

        monkeypatch.setattr(repo, "get", missing)

        with pytest.raises(MachineNotFoundError):
            asyncio.run(repo.create("Leg Press", ["Quads"]))

    def test_get_missing_returns_none(self, repo):
        """Test an unknown id gives None."""
        assert asyncio.run(repo.get(999)) is None

    def test_list_all_newest_first(self, repo):
        """Test listing orders by creation, newest first."""
        async def create_three():
            for name in ["First", "Second", "Third"]:
                await repo.create(name, ["Chest"])
            return await repo.list_all()

        machines = asyncio.run(create_three())

        assert [m.name for m in machines] == ["Third", "Second", "First"]

    def test_list_all_empty(self, repo):
        """Test an empty table lists nothing."""
        assert asyncio.run(repo.list_all()) == []

    def test_update_changes_only_editable_fields(self, repo):
        """Test update writes name, muscles and notes and keeps the image."""
        async def scenario():
            machine = await repo.create("Chest Pres", ["Chest"], "data:image/jpeg;base64,XYZ")
            await repo.update(machine.id, "Chest Press", ["Chest", "Triceps"], "Seat at notch 4")
            return machine, await repo.get(machine.id)

        original, updated = asyncio.run(scenario())

        assert updated.id == original.id
        assert updated.name == "Chest Press"
        assert updated.muscles == ["Chest", "Triceps"]
        assert updated.notes == "Seat at notch 4"
        assert updated.image_url == "data:image/jpeg;base64,XYZ"
        assert updated.created_at == original.created_at

    def test_update_missing_raises(self, repo):
        """Test updating an unknown id raises."""
        with pytest.raises(MachineNotFoundError):
            asyncio.run(repo.update(42, "Nothing", [], None))

    def test_delete(self, repo):
        """Test delete removes the row."""
        async def scenario():
            machine = await repo.create("Smith Machine", ["Quads"])
            await repo.delete(machine.id)
            return await repo.list_all()

        assert asyncio.run(scenario()) == []

    def test_delete_twice_raises(self, repo):
        """Test deleting an already-deleted id raises MachineNotFoundError."""
        machine = asyncio.run(repo.create("Hack Squat", ["Quads"]))
        asyncio.run(repo.delete(machine.id))

        with pytest.raises(MachineNotFoundError):
            asyncio.run(repo.delete(machine.id))
