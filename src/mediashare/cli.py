"""Command-line interface using Typer."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from mediashare import __version__
from mediashare.logging import setup_logging

app = typer.Typer(
    name="mediashare",
    help="MediaShare - media-sharing backend CLI",
    add_completion=False,
)

# Subcommand groups
users_app = typer.Typer(help="User management commands")
videos_app = typer.Typer(help="Video discovery commands")
likes_app = typer.Typer(help="Like commands")
app.add_typer(users_app, name="users")
app.add_typer(videos_app, name="videos")
app.add_typer(likes_app, name="likes")

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"MediaShare v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """MediaShare - videos, comments, tweets, playlists, likes and subscriptions."""
    setup_logging(level=log_level)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Run the API server."""
    import uvicorn

    from mediashare.config import settings

    uvicorn.run(
        "mediashare.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload or settings.api_reload,
    )


@app.command("init-db")
def init_db_command() -> None:
    """Create any missing database tables."""
    from mediashare.db.session import init_db

    try:
        init_db(create_tables=True)
    except Exception as e:
        console.print(f"[bold red]Database initialization failed: {e}[/bold red]")
        raise typer.Exit(code=1)

    console.print("[bold green]Database ready[/bold green]")


@users_app.command("create")
def users_create(
    username: str = typer.Option(..., "--username", "-u", help="Unique username"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    full_name: Optional[str] = typer.Option(None, "--name", "-n", help="Full name"),
) -> None:
    """Create a user (channel)."""
    from mediashare.db.session import get_session_context
    from mediashare.errors import MediaShareError
    from mediashare.services.users import create_user

    try:
        with get_session_context() as session:
            user = create_user(session, username, email, full_name)
            console.print("[bold green]User created successfully![/bold green]")
            console.print(f"[cyan]ID:[/cyan] {user.id}")
            console.print(f"[cyan]Username:[/cyan] {user.username}")
    except MediaShareError as e:
        console.print(f"[bold red]{e.message}[/bold red]")
        raise typer.Exit(code=1)


@videos_app.command("search")
def videos_search(
    query: Optional[str] = typer.Argument(None, help="Text to search in titles and descriptions"),
    page: int = typer.Option(1, "--page", help="Page number"),
    limit: int = typer.Option(10, "--limit", "-l", help="Results per page"),
    sort_by: Optional[str] = typer.Option(None, "--sort-by", help="createdAt, updatedAt, title or duration"),
    sort_type: str = typer.Option("desc", "--sort-type", help="asc or desc"),
    owner: Optional[str] = typer.Option(None, "--owner", help="Owner user ID"),
) -> None:
    """Search videos."""
    from mediashare.db.session import get_session_context
    from mediashare.errors import MediaShareError
    from mediashare.services.videos import list_videos

    try:
        with get_session_context() as session:
            envelope = list_videos(
                session,
                page=page,
                limit=limit,
                query=query,
                sort_by=sort_by,
                sort_type=sort_type,
                user_id=owner,
            )

            table = Table(title=f"Videos (page {envelope.current_page} of {envelope.total_pages})")
            table.add_column("ID", style="dim")
            table.add_column("Title", style="cyan")
            table.add_column("Duration", justify="right")
            table.add_column("Published")
            table.add_column("Created")

            for video in envelope.items:
                table.add_row(
                    str(video.id),
                    video.title,
                    f"{video.duration:.0f}s",
                    "yes" if video.is_published else "no",
                    video.created_at.strftime("%Y-%m-%d %H:%M") if video.created_at else "-",
                )
    except MediaShareError as e:
        console.print(f"[bold red]{e.message}[/bold red]")
        raise typer.Exit(code=1)

    console.print(table)
    console.print(f"[dim]{envelope.total_items} matching videos[/dim]")


@likes_app.command("toggle")
def likes_toggle(
    user: str = typer.Option(..., "--user", "-u", help="Acting user ID"),
    target: str = typer.Argument(..., help="ID of the liked entity"),
    kind: str = typer.Option("video", "--kind", "-k", help="video, comment or tweet"),
) -> None:
    """Like or unlike a video, comment or tweet."""
    from mediashare.db.session import get_session_context
    from mediashare.domain.enums import ObjectKind
    from mediashare.errors import MediaShareError
    from mediashare.services.identifiers import validate_reference
    from mediashare.services.likes import LIKEABLE_KINDS, toggle_like

    try:
        object_kind = ObjectKind(kind.lower())
    except ValueError:
        object_kind = None
    if object_kind not in LIKEABLE_KINDS:
        console.print(f"[bold red]Cannot like a {kind}[/bold red]")
        raise typer.Exit(code=1)

    try:
        subject_id = validate_reference(user, field="user")
        with get_session_context() as session:
            result = toggle_like(session, subject_id, target, object_kind)
    except MediaShareError as e:
        console.print(f"[bold red]{e.message}[/bold red]")
        raise typer.Exit(code=1)

    state = "liked" if result.active else "unliked"
    console.print(f"[bold green]{object_kind.value.capitalize()} {state}[/bold green]")


if __name__ == "__main__":
    app()
