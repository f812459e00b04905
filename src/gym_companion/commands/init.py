"""Initialize project command."""

import click

from ..config import get_settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the gym-companion data directory and database."""
    data_dir = get_settings().data_dir
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing gym-companion in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Set AI_GATEWAY_API_KEY in your environment or .env file")
    click.echo("  2. Identify a machine:   gym-companion analyze photo.jpg")
    click.echo("  3. Start the web app:    gym-companion serve")
