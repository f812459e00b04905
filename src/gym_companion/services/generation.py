"""Exercise generation jobs started from the machine list."""

import asyncio
import logging

from ..ai.client import GatewayClient
from ..errors import EmptyWorkoutGoalError, GatewayError, ReplyParseError
from ..models.machine import Machine
from .job_tracker import GenerationJob, JobTracker
from .functions import plan_exercises, to_function_error

logger = logging.getLogger(__name__)


def clean_workout_goal(goal: str | None) -> str:
    """Return the trimmed goal.

    Raises:
        EmptyWorkoutGoalError: if the goal is blank or whitespace only
    """
    cleaned = (goal or "").strip()
    if not cleaned:
        raise EmptyWorkoutGoalError("Please enter a workout goal")
    return cleaned


async def run_generation(job: GenerationJob, muscles: list[str], client: GatewayClient, tracker: JobTracker) -> None:
    """Generate exercises for a job and feed the result into its join."""
    try:
        exercises = await plan_exercises(client, job.machine_name, muscles, job.workout_goal)
    except (GatewayError, ReplyParseError) as e:
        error = to_function_error(
            e,
            action="generate exercises",
            empty_message="No exercises generated",
            parse_message="Failed to parse exercise data",
        )
        await tracker.fail_job(job.id, error.message)
        return
    except Exception as e:
        logger.exception("Unexpected failure in job %s", job.id)
        await tracker.fail_job(job.id, str(e) or "Failed to generate exercises")
        return

    await tracker.exercises_ready(job.id, exercises)


async def start_generation(
    machine: Machine,
    workout_goal: str | None,
    client: GatewayClient,
    tracker: JobTracker,
) -> GenerationJob:
    """Validate the goal and launch generation in the background.

    Raises:
        EmptyWorkoutGoalError: if the goal is blank; no job is created
    """
    goal = clean_workout_goal(workout_goal)
    job = await tracker.create_job(machine.id, machine.name, goal)
    logger.info("Job %s: generating exercises for %r (goal=%r)", job.id, machine.name, goal)
    job.task = asyncio.create_task(run_generation(job, machine.muscles, client, tracker))
    return job
