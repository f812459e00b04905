"""Prompt templates for the AI gateway calls."""

EXERCISE_COUNT = 6

ANALYZE_MACHINE_PROMPT = """You are a professional fitness trainer. Identify the gym machine or piece of equipment in this photo.

Return ONLY a JSON object with this structure (no markdown, no code blocks):
{
  "name": "Machine name",
  "muscles": ["Primary muscle", "Secondary muscle"]
}

List the muscles the machine mainly targets, most important first."""


def build_analyze_messages(image_data_url: str) -> list[dict]:
    """Build the chat messages for machine identification.

    Args:
        image_data_url: Photo as a ``data:image/...;base64,`` URL

    Returns:
        Messages list for a vision-capable chat-completion call
    """
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": ANALYZE_MACHINE_PROMPT},
                {"type": "image_url", "image_url": {"url": image_data_url}},
            ],
        }
    ]


def build_exercise_prompt(machine_name: str, muscles: list[str], workout_goal: str) -> str:
    """Format the exercise-generation prompt."""
    return f"""You are a professional fitness trainer. Generate exactly {EXERCISE_COUNT} specific exercises for the following gym machine and workout goal.

Machine: {machine_name}
Machine targets: {", ".join(muscles)}
User's workout goal: {workout_goal}

Provide {EXERCISE_COUNT} exercises that:
1. Are specifically designed for this machine
2. Target the user's stated workout goal
3. Include proper form and technique tips
4. Have appropriate sets, reps, and rest times

Return ONLY a JSON object with this structure (no markdown, no code blocks):
{{
  "exercises": [
    {{
      "name": "Exercise name",
      "description": "Brief description of the exercise and proper form",
      "sets": "number of sets",
      "reps": "number of reps or duration",
      "rest": "rest time between sets",
      "tips": "1-2 sentence form tip",
      "youtubeSearch": "short search query for a tutorial video"
    }}
  ]
}}"""


def build_exercise_messages(machine_name: str, muscles: list[str], workout_goal: str) -> list[dict]:
    return [
        {
            "role": "user",
            "content": build_exercise_prompt(machine_name, muscles, workout_goal),
        }
    ]
