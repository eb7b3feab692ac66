"""Command-line interface for the Arabic dictionary."""

import asyncio
import dataclasses
import logging
from pathlib import Path

import click
import structlog

from . import prompts
from .app import ScholarApp
from .config import EXAMPLE_WORDS, Settings
from .context import build_context
from .errors import ScholarError
from .render import format_entry, format_word_list
from .session import SessionState
from .storage import open_store

log = structlog.get_logger()


def configure_logging(verbose: bool = False):
    """JSON logs by default, human-readable console logs with ``--verbose``."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)
    renderer = structlog.dev.ConsoleRenderer() if verbose else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _app(settings: Settings) -> ScholarApp:
    try:
        ctx = build_context(settings, in_memory=str(settings.store_path) == ":memory:")
    except ScholarError as e:
        raise click.ClickException(str(e))
    return ScholarApp(ctx)


def _session(settings: Settings) -> SessionState:
    return SessionState.load(open_store(settings.store_path), history_limit=settings.history_limit)


@click.group()
@click.option(
    "--db",
    type=click.Path(path_type=Path),
    default=None,
    help="SQLite file for history and bookmarks (':memory:' for none)"
)
@click.option(
    "--model",
    default=None,
    help="OpenAI model to use for lookups and chat"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose logging"
)
@click.pass_context
def main(ctx: click.Context, db: Path, model: str, verbose: bool):
    """Arabic Scholar: an AI-powered guide to the Arabic language."""
    configure_logging(verbose)

    settings = Settings()
    if db is not None:
        settings = dataclasses.replace(settings, store_path=db)
    if model:
        settings = dataclasses.replace(settings, model=model, chat_model=model)
    log.info("Starting Arabic Scholar", model=settings.model, db=str(settings.store_path))
    ctx.obj = settings


@main.command()
@click.argument("word")
@click.option("--no-audio", is_flag=True, help="Skip the pronunciation request")
@click.option("--json", "as_json", is_flag=True, help="Print the raw entry as JSON")
@click.pass_obj
def lookup(settings: Settings, word: str, no_audio: bool, as_json: bool):
    """Look up an Arabic WORD."""
    if no_audio:
        settings = dataclasses.replace(settings, enable_audio=False)
    app = _app(settings)

    snapshot = asyncio.run(app.submit_search(word))
    if snapshot.error:
        raise click.ClickException(snapshot.error)

    entry = snapshot.entry
    if as_json:
        click.echo(entry.model_dump_json(by_alias=True, indent=2, exclude={"pronunciation_audio"}))
    else:
        click.echo(format_entry(entry, bookmarked=app.session.is_bookmarked(entry.word)))


@main.command()
@click.pass_obj
def history(settings: Settings):
    """Show recent searches, newest first."""
    click.echo(format_word_list(_session(settings).history))


@main.command("clear-history")
@click.pass_obj
def clear_history(settings: Settings):
    """Forget all recent searches (bookmarks are kept)."""
    _session(settings).clear_history()
    click.echo("History cleared.")


@main.command()
@click.pass_obj
def bookmarks(settings: Settings):
    """Show bookmarked words."""
    click.echo(format_word_list(_session(settings).bookmarks))


@main.command()
@click.argument("word")
@click.pass_obj
def bookmark(settings: Settings, word: str):
    """Bookmark WORD, or remove it if already bookmarked."""
    word = word.strip()
    if not word:
        raise click.ClickException(prompts.BLANK_QUERY_MESSAGE)
    if _session(settings).toggle_bookmark(word):
        click.echo(f"Bookmarked {word}")
    else:
        click.echo(f"Removed {word} from bookmarks")


@main.command()
def examples():
    """Suggest a few words to try."""
    click.echo(" ".join(EXAMPLE_WORDS))


@main.command()
@click.pass_obj
def chat(settings: Settings):
    """Ask the scholar free-form questions (type /quit to leave)."""
    app = _app(settings)
    session = app.open_chat()
    click.echo(session.transcript[0].text)

    async def run_chat():
        while True:
            text = click.prompt("you", prompt_suffix="> ", default="", show_default=False)
            if text.strip() in ("/quit", "/exit"):
                return
            reply = await app.send_chat_message(text)
            if reply is not None:
                click.echo(reply)

    try:
        asyncio.run(run_chat())
    except (EOFError, click.Abort):
        click.echo()


if __name__ == "__main__":
    main()
