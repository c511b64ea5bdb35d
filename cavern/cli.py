"""
Cavern CLI - command line interface for the text adventure.

Usage:
    cavern play           Start an interactive session
    cavern check          Validate a world file and print a summary
"""

import logging
import sys

import click

from cavern import __version__, config
from cavern.engine.engine import GameEngine
from cavern.engine.loader import WorldLoadError, load_world

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )


def _load_or_exit(world_file: str):
    try:
        return load_world(world_file)
    except WorldLoadError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="cavern")
def main():
    """Cavern - a small text adventure."""
    pass


@main.command()
@click.option(
    "--world", "-w", "world_file",
    default=config.WORLD_FILE, show_default=False,
    help="World YAML file (default: CAVERN_WORLD_FILE or the bundled cave)",
)
@click.option(
    "--log-level", "-l",
    default=config.LOG_LEVEL, type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level for stderr",
)
def play(world_file: str, log_level: str):
    """Start an interactive session.

    Reads one command per line from standard input until 'quit' or 'exit'
    (or end of input).
    """
    _configure_logging(log_level)
    world = _load_or_exit(world_file)
    engine = GameEngine(world)

    click.echo(engine.welcome())

    stdin = click.get_text_stream("stdin")
    while True:
        click.echo(config.PROMPT, nl=False)
        line = stdin.readline()
        if not line:
            # End of input behaves like quit
            click.echo("")
            break
        if engine.is_quit(line):
            break
        click.echo(engine.handle_command(line))

    click.echo("Goodbye!")
    logger.info("Session ended in room '%s'", engine.player.room_id)


@main.command()
@click.option(
    "--world", "-w", "world_file",
    default=config.WORLD_FILE, show_default=False,
    help="World YAML file (default: CAVERN_WORLD_FILE or the bundled cave)",
)
def check(world_file: str):
    """Load a world file and print a summary without playing."""
    _configure_logging(config.LOG_LEVEL)
    world = _load_or_exit(world_file)

    item_count = 0
    for room in world.rooms.values():
        stack = list(room.items)
        while stack:
            item = stack.pop()
            item_count += 1
            stack.extend(item.contents)

    click.echo(f"Start room: {world.start_room_id}")
    click.echo(f"Rooms: {len(world.rooms)}")
    click.echo(f"Exits: {len(world.exits)}")
    click.echo(f"Placed items: {item_count}")
    click.echo(f"Use rules: {len(world.use_rules)}")

    dangling = world.dangling_exits()
    if dangling:
        click.echo(click.style(f"Dangling exits: {len(dangling)}", fg="yellow"))
        for room_id, direction in dangling:
            click.echo(f"  {room_id}:{direction} -> {world.exits[(room_id, direction)]}")
    else:
        click.echo(click.style("✅ World looks consistent", fg="green"))


if __name__ == "__main__":
    main()
