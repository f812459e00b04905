"""CLI commands for gym-companion."""

from .analyze import analyze
from .exercises import exercises
from .init import init
from .machines import machines
from .serve import serve

__all__ = [
    "analyze",
    "exercises",
    "init",
    "machines",
    "serve",
]
