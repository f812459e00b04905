"""Application services."""

from .functions import analyze_machine, generate_exercises, identify_machine, plan_exercises
from .upload import UploadService

__all__ = [
    "analyze_machine",
    "generate_exercises",
    "identify_machine",
    "plan_exercises",
    "UploadService",
]
