"""Generate an exercise plan from the command line."""

import click

from ..ai.client import GatewayClient
from ..db import MachineRepository
from ..errors import EmptyWorkoutGoalError, GatewayError, ReplyParseError
from ..services.functions import plan_exercises, to_function_error
from ..services.generation import clean_workout_goal
from .base import async_command, echo_error, echo_info, ensure_initialized


@click.command()
@click.argument("machine_id", type=int)
@click.argument("goal")
@click.pass_context
@async_command
async def exercises(ctx: click.Context, machine_id: int, goal: str):
    """Generate exercises for MACHINE_ID aimed at GOAL.

    Example:

        gym-companion exercises 3 "Build chest strength"
    """
    ensure_initialized(ctx)

    try:
        goal = clean_workout_goal(goal)
    except EmptyWorkoutGoalError as e:
        echo_error(str(e))
        ctx.exit(1)

    machine = await MachineRepository().get(machine_id)
    if not machine:
        echo_error(f"Machine ID {machine_id} not found")
        ctx.exit(1)

    echo_info(f"Generating exercises for {machine.name}...")
    try:
        plan = await plan_exercises(GatewayClient(), machine.name, machine.muscles, goal)
    except (GatewayError, ReplyParseError) as e:
        error = to_function_error(
            e,
            action="generate exercises",
            empty_message="No exercises generated",
            parse_message="Failed to parse exercise data",
        )
        echo_error(error.message)
        ctx.exit(1)

    click.echo()
    click.echo(click.style(f"{machine.name} - Exercises", bold=True))
    click.echo(f"Goal: {goal}")
    for index, exercise in enumerate(plan, start=1):
        click.echo()
        click.echo(click.style(f"{index}. {exercise.name}", bold=True))
        click.echo(f"   {exercise.description}")
        click.echo(f"   Sets: {exercise.sets}  Reps: {exercise.reps}  Rest: {exercise.rest}")
        click.echo(f"   Form tip: {exercise.tips}")
        click.echo(f"   Tutorial: {exercise.tutorial_url}")
