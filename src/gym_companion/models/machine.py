"""Gym machine model."""

from dataclasses import dataclass, field
from datetime import datetime


def parse_muscles(value: str | list[str] | None) -> list[str]:
    """Normalize muscle input into a clean, ordered list.

    Accepts either comma-separated text (as typed into the edit form) or a
    list (as returned by the AI). Entries are trimmed, empty entries are
    dropped and repeats are removed, keeping the first spelling seen.

    Args:
        value: Comma-separated string or list of labels

    Returns:
        List of distinct, non-empty muscle labels
    """
    if value is None:
        return []

    if isinstance(value, str):
        items = value.split(",")
    else:
        items = [str(item) for item in value]

    muscles = []
    seen = set()
    for item in items:
        label = item.strip()
        if not label:
            continue
        key = label.lower()
        if key in seen:
            continue
        seen.add(key)
        muscles.append(label)

    return muscles


def format_muscles(muscles: list[str]) -> str:
    """Render muscles the way the edit form shows them."""
    return ", ".join(muscles)


@dataclass
class Machine:
    """A piece of gym equipment identified from a photo."""

    name: str
    muscles: list[str] = field(default_factory=list)
    notes: str | None = None
    image_url: str | None = None
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON responses."""
        return {
            "id": self.id,
            "name": self.name,
            "muscles": self.muscles,
            "notes": self.notes,
            "image_url": self.image_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        created_at: datetime | None = None,
    ) -> "Machine":
        """Create from dictionary."""
        return cls(
            id=id,
            name=data["name"],
            muscles=parse_muscles(data.get("muscles")),
            notes=data.get("notes"),
            image_url=data.get("image_url"),
            created_at=created_at,
        )

    @property
    def muscles_text(self) -> str:
        return format_muscles(self.muscles)
