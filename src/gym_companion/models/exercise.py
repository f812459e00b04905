"""Generated exercise model.

Exercises are never stored; they live on a generation job until the
results page has been shown.
"""

from dataclasses import dataclass
from urllib.parse import quote_plus

VIDEO_SEARCH_URL = "https://www.youtube.com/results?search_query="


def tutorial_query(exercise_name: str, machine_name: str = "") -> str:
    """Build the video-search query for an exercise."""
    parts = [exercise_name.strip()]
    if machine_name and machine_name.strip().lower() not in exercise_name.lower():
        parts.append(machine_name.strip())
    parts.append("tutorial")
    return " ".join(p for p in parts if p)


@dataclass
class Exercise:
    """A single exercise in a generated plan."""

    name: str
    description: str = ""
    sets: str = ""
    reps: str = ""
    rest: str = ""
    tips: str = ""
    youtube_search: str = ""

    @property
    def tutorial_url(self) -> str:
        """External video-search URL for this exercise."""
        return VIDEO_SEARCH_URL + quote_plus(self.youtube_search or self.name)

    def to_dict(self) -> dict:
        """Convert to the wire format returned by the generate endpoint."""
        return {
            "name": self.name,
            "description": self.description,
            "sets": self.sets,
            "reps": self.reps,
            "rest": self.rest,
            "tips": self.tips,
            "youtubeSearch": self.youtube_search,
        }

    @classmethod
    def from_dict(cls, data: dict, machine_name: str = "") -> "Exercise":
        """Create from a model reply entry.

        Numeric values are kept as display strings; a missing search query
        is derived from the exercise and machine names.
        """
        name = str(data.get("name", "")).strip() or "Unnamed exercise"
        search = str(data.get("youtubeSearch") or "").strip()
        return cls(
            name=name,
            description=str(data.get("description", "")),
            sets=str(data.get("sets", "")),
            reps=str(data.get("reps", "")),
            rest=str(data.get("rest", "")),
            tips=str(data.get("tips", "")),
            youtube_search=search or tutorial_query(name, machine_name),
        )
