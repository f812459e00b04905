"""Identify a machine from a local photo."""

import mimetypes
from pathlib import Path

import click

from ..errors import InvalidImageError, UploadFailedError
from ..services.upload import UploadService
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
@async_command
async def analyze(ctx: click.Context, image: Path):
    """Identify the machine in IMAGE and save it.

    Example:

        gym-companion analyze leg_press.jpg
    """
    ensure_initialized(ctx)

    content_type, _ = mimetypes.guess_type(image.name)
    echo_info(f"Analyzing {image.name}...")

    try:
        machine = await UploadService().analyze_and_store(
            image.read_bytes(), content_type, image.name
        )
    except (InvalidImageError, UploadFailedError) as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Identified {machine.name} (ID: {machine.id})")
    click.echo(f"  Target muscles: {machine.muscles_text}")
