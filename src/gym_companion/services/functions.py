"""Stateless AI proxy operations.

``identify_machine`` and ``plan_exercises`` are the domain calls used by
the upload flow and the generation jobs. ``analyze_machine`` and
``generate_exercises`` wrap them as JSON request handlers: they validate
the request body and turn every failure into a ``FunctionError`` that
carries the HTTP status to answer with.
"""

import logging

from ..ai.client import GatewayClient
from ..ai.parsing import parse_json_reply
from ..ai.prompts import build_analyze_messages, build_exercise_messages
from ..errors import (
    EmptyReplyError,
    FunctionError,
    GatewayConfigError,
    GatewayError,
    QuotaExhaustedError,
    RateLimitedError,
    ReplyParseError,
)
from ..models.exercise import Exercise
from ..models.machine import parse_muscles

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
QUOTA_MESSAGE = "AI credits exhausted. Please add credits to continue."
CONFIG_MESSAGE = "API configuration error"


def to_data_url(image: str, mime_type: str = "image/jpeg") -> str:
    """Return ``image`` as a data URL, wrapping bare base64 if needed."""
    if image.startswith("data:"):
        return image
    return f"data:{mime_type};base64,{image}"


async def identify_machine(client: GatewayClient, image_data_url: str) -> tuple[str, list[str]]:
    """Ask the vision model which machine is in the photo.

    Returns:
        Tuple of (machine name, target muscles)

    Raises:
        GatewayError: if the gateway call fails
        ReplyParseError: if the reply is not the expected JSON
    """
    reply = await client.complete(build_analyze_messages(image_data_url))
    data = parse_json_reply(reply)

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        logger.error("Machine reply has no name: %r", data)
        raise ReplyParseError("Model reply has no machine name")

    muscles = data.get("muscles") or []
    if not isinstance(muscles, list):
        muscles = [muscles]

    return name.strip(), parse_muscles(muscles)


async def plan_exercises(
    client: GatewayClient,
    machine_name: str,
    muscles: list[str],
    workout_goal: str,
) -> list[Exercise]:
    """Ask the model for an exercise plan on one machine.

    Raises:
        GatewayError: if the gateway call fails
        ReplyParseError: if the reply is not the expected JSON
    """
    reply = await client.complete(build_exercise_messages(machine_name, muscles, workout_goal))
    data = parse_json_reply(reply)

    items = data.get("exercises")
    if not isinstance(items, list):
        logger.error("Exercise reply has no exercise list: %r", data)
        raise ReplyParseError("Model reply has no exercises list")

    return [
        Exercise.from_dict(item, machine_name=machine_name)
        for item in items
        if isinstance(item, dict)
    ]


def _missing_fields(body: dict, fields: list[str]) -> list[str]:
    return [name for name in fields if body.get(name) in (None, "")]


def to_function_error(e: Exception, action: str, empty_message: str, parse_message: str) -> FunctionError:
    """Map a domain failure onto the status and message a handler returns."""
    if isinstance(e, RateLimitedError):
        return FunctionError(429, RATE_LIMIT_MESSAGE)
    if isinstance(e, QuotaExhaustedError):
        return FunctionError(402, QUOTA_MESSAGE)
    if isinstance(e, GatewayConfigError):
        return FunctionError(500, CONFIG_MESSAGE)
    if isinstance(e, EmptyReplyError):
        return FunctionError(500, empty_message)
    if isinstance(e, ReplyParseError):
        return FunctionError(500, parse_message)
    return FunctionError(500, f"Failed to {action}")


async def analyze_machine(body: object, client: GatewayClient) -> dict:
    """Handle an analyze-machine request.

    Request: ``{"imageBase64": str}``. Response: ``{"name", "muscles"}``.

    Raises:
        FunctionError: with the HTTP status to return
    """
    if not isinstance(body, dict):
        logger.warning("analyze-machine: body is not a JSON object")
        raise FunctionError(400, "Request body must be a JSON object")

    missing = _missing_fields(body, ["imageBase64"])
    if missing:
        logger.warning("analyze-machine: missing fields %s", missing)
        raise FunctionError(400, f"Missing required fields: {', '.join(missing)}")

    image = body["imageBase64"]
    if not isinstance(image, str):
        raise FunctionError(400, "imageBase64 must be a string")

    try:
        name, muscles = await identify_machine(client, to_data_url(image))
    except (GatewayError, ReplyParseError) as e:
        logger.error("analyze-machine failed: %s", e)
        raise to_function_error(
            e,
            action="analyze machine",
            empty_message="No machine identified",
            parse_message="Failed to parse machine data",
        ) from e

    logger.info("analyze-machine identified %r (%s)", name, ", ".join(muscles))
    return {"name": name, "muscles": muscles}


async def generate_exercises(body: object, client: GatewayClient) -> dict:
    """Handle a generate-exercises request.

    Request: ``{"machineName": str, "muscles": [str], "workoutGoal": str}``.
    Response: ``{"exercises": [...]}``.

    Raises:
        FunctionError: with the HTTP status to return
    """
    if not isinstance(body, dict):
        logger.warning("generate-exercises: body is not a JSON object")
        raise FunctionError(400, "Request body must be a JSON object")

    missing = _missing_fields(body, ["machineName", "muscles", "workoutGoal"])
    if missing:
        logger.warning("generate-exercises: missing fields %s", missing)
        raise FunctionError(400, f"Missing required fields: {', '.join(missing)}")

    machine_name = body["machineName"]
    muscles = body["muscles"]
    workout_goal = body["workoutGoal"]

    if not isinstance(machine_name, str) or not isinstance(workout_goal, str):
        raise FunctionError(400, "machineName and workoutGoal must be strings")
    if not isinstance(muscles, list) or not all(isinstance(m, str) for m in muscles):
        raise FunctionError(400, "muscles must be a list of strings")

    try:
        exercises = await plan_exercises(client, machine_name, muscles, workout_goal)
    except (GatewayError, ReplyParseError) as e:
        logger.error("generate-exercises failed: %s", e)
        raise to_function_error(
            e,
            action="generate exercises",
            empty_message="No exercises generated",
            parse_message="Failed to parse exercise data",
        ) from e

    logger.info("generate-exercises produced %d exercises for %r", len(exercises), machine_name)
    return {"exercises": [exercise.to_dict() for exercise in exercises]}
