"""Machine management commands."""

import click
import questionary
from questionary import Style

from ..db import MachineRepository
from ..errors import MachineNotFoundError
from ..models.machine import parse_muscles
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, format_table

custom_style = Style([
    ("qmark", "fg:#e8b04b bold"),
    ("question", "bold"),
    ("answer", "fg:#e8b04b"),
])


@click.group()
@click.pass_context
def machines(ctx):
    """Manage identified machines.

    Commands for listing, viewing, editing and deleting machines.
    """
    ensure_initialized(ctx)


@machines.command(name="list")
@async_command
async def list_machines():
    """List all machines, newest first."""
    all_machines = await MachineRepository().list_all()

    if not all_machines:
        echo_info("No machines found. Identify one with 'gym-companion analyze <photo>'")
        return

    headers = ["ID", "Name", "Muscles", "Added"]
    rows = []
    for machine in all_machines:
        muscles = machine.muscles_text
        rows.append([
            str(machine.id),
            machine.name[:30] + "..." if len(machine.name) > 30 else machine.name,
            muscles[:40] + "..." if len(muscles) > 40 else muscles,
            machine.created_at.strftime("%Y-%m-%d") if machine.created_at else "N/A",
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_machines)} machine(s)")


@machines.command()
@click.argument("machine_id", type=int)
@click.pass_context
@async_command
async def show(ctx, machine_id: int):
    """Show details of a machine."""
    machine = await MachineRepository().get(machine_id)
    if not machine:
        echo_error(f"Machine ID {machine_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo(f"Machine: {machine.name} (ID: {machine.id})")
    click.echo("-" * 40)
    click.echo(f"Target muscles: {machine.muscles_text or 'none'}")
    if machine.notes:
        click.echo(f"Notes: {machine.notes}")
    click.echo(f"Added: {machine.created_at}")


@machines.command()
@click.argument("machine_id", type=int)
@click.pass_context
@async_command
async def edit(ctx, machine_id: int):
    """Edit a machine's name, muscles and notes."""
    repo = MachineRepository()
    machine = await repo.get(machine_id)
    if not machine:
        echo_error(f"Machine ID {machine_id} not found")
        ctx.exit(1)

    name = await questionary.text(
        "Machine name:",
        default=machine.name,
        validate=lambda text: bool(text.strip()) or "Name cannot be empty",
        style=custom_style,
    ).ask_async()
    if name is None:
        return

    muscles = await questionary.text(
        "Muscles (comma separated):",
        default=machine.muscles_text,
        style=custom_style,
    ).ask_async()
    if muscles is None:
        return

    notes = await questionary.text(
        "Notes (optional):",
        default=machine.notes or "",
        style=custom_style,
    ).ask_async()
    if notes is None:
        return

    try:
        await repo.update(machine_id, name.strip(), parse_muscles(muscles), notes)
    except MachineNotFoundError:
        echo_error(f"Machine ID {machine_id} no longer exists")
        ctx.exit(1)

    echo_success("Machine updated!")


@machines.command()
@click.argument("machine_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, machine_id: int, yes: bool):
    """Delete a machine."""
    if not yes and not click.confirm(f"Delete machine {machine_id}?"):
        return

    try:
        await MachineRepository().delete(machine_id)
    except MachineNotFoundError:
        echo_error(f"Machine ID {machine_id} not found")
        ctx.exit(1)

    echo_success("Machine deleted")
