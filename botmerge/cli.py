import asyncio
import json
from collections.abc import Callable
from functools import wraps
from logging import getLogger
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from .services.github.auth import GitHubClient
from .services.handler import handle_event
from .settings import settings

app = typer.Typer()
logger = getLogger(__name__)
console = Console()


def syncify(f: Callable[..., Any]) -> Callable[..., Any]:
    """This simple decorator converts an async function into a sync function,
    allowing it to work with Typer.
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))

    return wrapper


@app.command(help=f"Display the current installed version of {settings.project_name}.")
def version() -> None:
    from . import __version__

    typer.echo(f"{settings.project_name} - {__version__}")


@app.command(help="Merge the pull request from the current workflow event if it is eligible.")
@syncify
async def handle(
    event_path: str | None = typer.Option(
        None,
        "--event-path",
        help="Path to the event payload JSON (default: GITHUB_EVENT_PATH)",
    ),
    event_name: str | None = typer.Option(
        None,
        "--event-name",
        help="Name of the triggering event (default: GITHUB_EVENT_NAME)",
    ),
    token: str | None = typer.Option(
        None,
        "--token",
        help="GitHub token (overrides env var)",
    ),
    max_attempts: int | None = typer.Option(
        None,
        "--max-attempts",
        min=1,
        help="Total merge attempts when the base branch was modified (default: MAX_ATTEMPTS)",
    ),
) -> None:
    """Merge the pull request from the current workflow event if it is eligible."""
    try:
        payload = _load_payload(event_path or settings.github_event_path)
        github_client = GitHubClient(token_override=token).get_authenticated_client()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    async with github_client:
        await handle_event(
            github_client,
            event_name or settings.github_event_name,
            payload,
            settings,
            max_attempts=max_attempts,
        )


def _load_payload(event_path: str | None) -> dict[str, Any]:
    """Read the webhook payload written by the Actions runner.

    Args:
        event_path: Path to the payload JSON file

    Returns:
        Parsed payload dictionary

    Raises:
        ValueError: If the path is missing or the file is not a JSON object
    """
    if not event_path:
        raise ValueError("No event payload available (set GITHUB_EVENT_PATH or pass --event-path)")

    path = Path(event_path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Unable to read event payload {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid event payload {path}: {e}") from e

    if not isinstance(payload, dict):
        raise ValueError(f"Invalid event payload {path}: expected a JSON object")
    return payload


if __name__ == "__main__":
    app()
