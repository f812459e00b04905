"""Web server command."""

import click

from ..config import get_settings
from .base import ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the web server.

    Examples:

        # Start on default port (8000)
        gym-companion serve

        # Expose to network (all interfaces)
        gym-companion serve --host 0.0.0.0

        # Development mode with auto-reload
        gym-companion serve --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    click.echo()
    click.echo(click.style("Starting gym-companion web server...", fg="green"))
    click.echo()
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "gym_companion.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_level=get_settings().log_level.lower(),
    )
