"""CLI entry point for gym-companion."""

import click

from . import __version__
from .commands import analyze, exercises, init, machines, serve
from .config import configure_logging, get_settings


@click.group()
@click.version_option(version=__version__, prog_name="gym-companion")
def main():
    """gym-companion: identify gym machines and plan exercises for them.

    Upload a photo of a machine, let the AI name it and its target muscles,
    then ask for an exercise plan for any workout goal.

    Example usage:

        # Initialize the project
        gym-companion init

        # Identify a machine from a photo
        gym-companion analyze leg_press.jpg

        # Plan exercises for it
        gym-companion exercises 1 "Build leg strength"

        # Or use the web interface
        gym-companion serve
    """
    configure_logging(get_settings().log_level)


# Register commands
main.add_command(init)
main.add_command(analyze)
main.add_command(exercises)
main.add_command(machines)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
