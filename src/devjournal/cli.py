"""devjournal CLI - development session journaling."""

import logging
import sys
from datetime import datetime

import click

from .adapters.file_context import FileContextStore
from .config import load_config
from .core.categories import Category
from .errors import JournalError
from .workflows import finish_ticket, pick_ticket, start_session, status, update_context

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _fail(e: JournalError) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(e.exit_code)


def _run(action, *args, **kwargs) -> None:
    """Run a workflow and echo its result, exiting with the error's code on failure."""
    try:
        output = action(*args, **kwargs)
    except JournalError as e:
        _fail(e)
    click.echo(output)


@click.group()
@click.version_option(package_name="devjournal")
@click.option("--root", envvar="DEVJOURNAL_ROOT", default=None,
              type=click.Path(file_okay=False),
              help="Journal root directory (default from devjournal.conf, else .context)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, root: str | None, debug: bool):
    """devjournal - Development session journal."""
    try:
        config = load_config()
    except JournalError as e:
        _fail(e)
    if root:
        config.context_root = root

    logging.basicConfig(
        format=LOG_FORMAT,
        level=logging.DEBUG if debug else getattr(logging, config.log_level, logging.WARNING),
    )

    ctx.obj = {
        "config": config,
        "store": FileContextStore(config.root_path),
    }


@main.command("start-session")
@click.pass_obj
def start_session_cmd(obj):
    """Create or resume today's session journal."""
    _run(start_session, obj["store"], datetime.now())


@main.command("pick-ticket")
@click.argument("ticket_id")
@click.pass_obj
def pick_ticket_cmd(obj, ticket_id: str):
    """Record the ticket you are working on."""
    _run(pick_ticket, obj["store"], datetime.now(), ticket_id)


@main.command("update-context")
@click.option("--type", "category", required=True,
              help=f"Journal category ({'|'.join(Category.choices())})")
@click.option("--msg", "message", required=True, help="Entry text")
@click.pass_obj
def update_context_cmd(obj, category: str, message: str):
    """Append a note, decision, or architecture entry."""
    _run(update_context, obj["store"], datetime.now(), category, message)


@main.command("finish-ticket")
@click.argument("ticket_id")
@click.option("--summary", required=True, help="What was done")
@click.pass_obj
def finish_ticket_cmd(obj, ticket_id: str, summary: str):
    """Record ticket completion."""
    _run(finish_ticket, obj["store"], datetime.now(), ticket_id, summary)


@main.command("status")
@click.option("--blocks", "-n", type=click.IntRange(min=1), default=None,
              help="Number of recent entries to show (default from config)")
@click.option("--type", "category", default=Category.NOTE.value,
              help=f"Journal category ({'|'.join(Category.choices())})")
@click.pass_obj
def status_cmd(obj, blocks: int | None, category: str):
    """Show recent entries from today's session."""
    config = obj["config"]
    max_blocks = blocks if blocks is not None else config.status_blocks

    def _status():
        return status(obj["store"], datetime.now(), max_blocks, Category.parse(category))

    _run(_status)


if __name__ == "__main__":
    main()
