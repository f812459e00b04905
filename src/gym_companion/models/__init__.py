"""Data models for gym-companion."""

from .exercise import Exercise, tutorial_query
from .machine import Machine, format_muscles, parse_muscles

__all__ = [
    "Exercise",
    "format_muscles",
    "Machine",
    "parse_muscles",
    "tutorial_query",
]
