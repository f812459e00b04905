"""Database layer for gym-companion."""

from .engine import get_db_path, init_db
from .repositories import MachineRepository

__all__ = [
    "get_db_path",
    "init_db",
    "MachineRepository",
]
