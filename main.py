import json
from pathlib import Path
from typing import Optional

import typer

from config import REQUIRED_FOR, load_config
from core import logger
from core.errors import BlawgError
from core.logger import LEVELS, log_event
from publisher import Publisher

app = typer.Typer(
    name="blawg",
    help="Use plain text editor of choice to manage web content.",
    add_completion=False,
)


def _mode(update: Optional[str], delete: Optional[str]) -> str:
    if update is not None and delete is not None:
        raise typer.BadParameter("--update and --delete cannot be used together")
    for flag, slug in (("--delete", delete), ("--update", update)):
        if slug is not None and not slug.strip():
            raise typer.BadParameter(f"{flag} needs a non-empty slug")
    if delete is not None:
        return "delete"
    if update is not None:
        return "update"
    return "create"


def _echo_body(body):
    if body in (None, ""):
        return
    if isinstance(body, (dict, list)):
        body = json.dumps(body, ensure_ascii=False, indent=2)
    typer.echo(body)


def run(mode: str, input_file: Optional[Path], slug: Optional[str], log_level: str = "INFO"):
    config = load_config(REQUIRED_FOR[mode])
    logger.configure(config.log_file, log_level)
    log_event("INFO", f"Starting {mode}", {"slug": slug} if slug else None)

    publisher = Publisher(config)
    if mode == "delete":
        return publisher.delete(slug)
    if mode == "update":
        return publisher.update(slug)
    return publisher.create(input_file)


@app.command()
def main(
    input_file: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, help="File whose text seeds the new article's content"
    ),
    update: Optional[str] = typer.Option(None, "-u", "--update", help="Slug of the article to edit"),
    delete: Optional[str] = typer.Option(None, "-d", "--delete", help="Slug of the article to delete"),
    log_level: str = typer.Option(
        "INFO", "--log-level", help="Event log level [DEBUG|INFO|SUCCESS|WARNING|ERROR]"
    ),
):
    """Write, update or delete an article in your text editor."""
    mode = _mode(update, delete)
    if log_level.upper() not in LEVELS:
        raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level")
    slug = delete if mode == "delete" else update
    try:
        result = run(mode, input_file, slug, log_level)
    except BlawgError as err:
        log_event("ERROR", str(err), {"kind": type(err).__name__})
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(code=err.exit_code)

    typer.echo(result.message)
    _echo_body(result.body)


if __name__ == "__main__":
    app()
