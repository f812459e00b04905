"""Tests for data models."""

from datetime import datetime

from gym_companion.models.exercise import Exercise, tutorial_query
from gym_companion.models.machine import Machine, format_muscles, parse_muscles


class TestParseMuscles:
    """Tests for parse_muscles function."""

    def test_comma_split_and_trim(self):
        """Test comma-separated input is split and trimmed."""
        assert parse_muscles(" Quads, Glutes ,Hamstrings") == ["Quads", "Glutes", "Hamstrings"]

    def test_empty_entries_dropped(self):
        """Test blank entries are removed."""
        assert parse_muscles("Chest,, ,Triceps,") == ["Chest", "Triceps"]

    def test_duplicates_removed_keeping_first(self):
        """Test repeated labels are removed case-insensitively."""
        assert parse_muscles("Chest, chest, Triceps, CHEST") == ["Chest", "Triceps"]

    def test_list_input(self):
        """Test list input from the AI reply."""
        assert parse_muscles(["Lats ", "", "Biceps", "lats"]) == ["Lats", "Biceps"]

    def test_none_and_empty(self):
        """Test missing input gives an empty list."""
        assert parse_muscles(None) == []
        assert parse_muscles("") == []
        assert parse_muscles(" , ") == []

    def test_format_round_trip_for_edit_form(self):
        """Test the edit form text parses back to the same list."""
        muscles = ["Quads", "Glutes"]
        assert format_muscles(muscles) == "Quads, Glutes"
        assert parse_muscles(format_muscles(muscles)) == muscles


class TestMachine:
    """Tests for Machine model."""

    def test_machine_to_dict(self):
        """Test machine serialization."""
        created = datetime(2024, 5, 1, 12, 30)
        machine = Machine(
            id=7,
            name="Leg Press",
            muscles=["Quads", "Glutes"],
            image_url="data:image/png;base64,AAAA",
            created_at=created,
        )
        data = machine.to_dict()

        assert data["id"] == 7
        assert data["name"] == "Leg Press"
        assert data["muscles"] == ["Quads", "Glutes"]
        assert data["notes"] is None
        assert data["created_at"] == "2024-05-01T12:30:00"

    def test_machine_from_dict_normalizes_muscles(self):
        """Test deserialization applies the muscle list rules."""
        machine = Machine.from_dict({"name": "Cable Row", "muscles": ["Lats", " lats", "Rhomboids"]}, id=3)

        assert machine.id == 3
        assert machine.muscles == ["Lats", "Rhomboids"]
        assert machine.muscles_text == "Lats, Rhomboids"


class TestExercise:
    """Tests for Exercise model."""

    def test_from_dict_keeps_given_search(self):
        """Test an explicit search query is kept."""
        exercise = Exercise.from_dict(
            {"name": "Leg Press", "sets": 4, "reps": "10", "youtubeSearch": "leg press how to"}
        )

        assert exercise.sets == "4"
        assert exercise.youtube_search == "leg press how to"

    def test_from_dict_derives_search(self):
        """Test a missing search query is derived from names."""
        exercise = Exercise.from_dict({"name": "Calf Raise"}, machine_name="Leg Press Machine")

        assert exercise.youtube_search == "Calf Raise Leg Press Machine tutorial"

    def test_tutorial_query_skips_repeated_machine(self):
        """Test the machine name is not repeated when already in the exercise name."""
        assert tutorial_query("Leg Press Machine Calf Raise", "Leg Press Machine") == (
            "Leg Press Machine Calf Raise tutorial"
        )

    def test_tutorial_url_is_encoded(self):
        """Test the video-search link escapes the query."""
        exercise = Exercise(name="Chest Fly", youtube_search="pec deck & fly")

        assert exercise.tutorial_url == (
            "https://www.youtube.com/results?search_query=pec+deck+%26+fly"
        )

    def test_to_dict_uses_wire_names(self):
        """Test serialization uses the endpoint's field names."""
        data = Exercise(name="Row", youtube_search="row tutorial").to_dict()

        assert data["youtubeSearch"] == "row tutorial"
        assert set(data) == {"name", "description", "sets", "reps", "rest", "tips", "youtubeSearch"}
