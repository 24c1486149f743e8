"""Command line interface for music streaming."""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .domain.entities import Album, Artist, Playlist, Song, User
from .domain.result import Result, collect
from .domain.services import StreamingService
from .exceptions import MusicStreamingError, ScriptError
from .infrastructure.repositories import InMemoryStreamingRepository
from .models.config import Config, configure_logging, load_config, save_config

console = Console()


def load_script(script_path: Path) -> List[Dict[str, Any]]:
    """Load operation steps from a JSON file.

    The file holds either a list of steps or an object with a ``steps`` list.
    """
    try:
        with open(script_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ScriptError(f"Invalid script {script_path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("steps")
    if not isinstance(data, list) or not all(isinstance(step, dict) for step in data):
        raise ScriptError(f"Script {script_path} must contain a list of step objects")

    return data


def _describe(value: Any) -> str:
    """One-line description of an operation outcome."""
    if isinstance(value, User):
        return f"user {value.name} ({value.mobile})"
    if isinstance(value, Artist):
        return f"artist {value.name} [{value.likes} likes]"
    if isinstance(value, Album):
        return f"album {value.title}"
    if isinstance(value, Song):
        return f"song {value.title} ({value.length}) [{value.likes} likes]"
    if isinstance(value, Playlist):
        return f"playlist {value.title}"
    if value is None:
        return "none"
    return str(value)


def _print_outcome(index: int, operation: str, result: Result) -> None:
    if result.is_success():
        console.print(f"[green]{index:>3}[/green] {escape(operation)}: {escape(_describe(result.value()))}")
    else:
        console.print(f"[red]{index:>3}[/red] {escape(operation)}: [red]{escape(str(result.error()))}[/red]")


def _print_summary(repository: InMemoryStreamingRepository, top_n: int) -> None:
    artists = sorted(repository.artists, key=lambda a: a.likes, reverse=True)[:top_n]
    artist_table = Table(title="Artists")
    artist_table.add_column("Artist", style="cyan")
    artist_table.add_column("Albums", justify="right")
    artist_table.add_column("Likes", justify="right")
    for artist in artists:
        artist_table.add_row(
            escape(artist.name), str(len(repository.get_artist_albums(artist))), str(artist.likes)
        )
    console.print(artist_table)

    songs = sorted(repository.songs, key=lambda s: s.likes, reverse=True)[:top_n]
    song_table = Table(title="Songs")
    song_table.add_column("Song", style="cyan")
    song_table.add_column("Artist")
    song_table.add_column("Length", justify="right")
    song_table.add_column("Likes", justify="right")
    for song in songs:
        song_table.add_row(
            escape(song.title),
            escape(repository.get_artist_name_from_song(song) or "-"),
            str(song.length),
            str(song.likes),
        )
    console.print(song_table)

    playlist_table = Table(title="Playlists")
    playlist_table.add_column("Playlist", style="cyan")
    playlist_table.add_column("Songs", justify="right")
    playlist_table.add_column("Listeners", justify="right")
    for playlist in repository.playlists[:top_n]:
        playlist_table.add_row(
            escape(playlist.title),
            str(len(repository.get_playlist_songs(playlist))),
            str(len(repository.get_playlist_listeners(playlist))),
        )
    console.print(playlist_table)

    stats = repository.get_statistics()
    console.print(f"Most popular artist: [bold]{escape(stats['most_popular_artist'] or '-')}[/bold]")
    console.print(f"Most popular song: [bold]{escape(stats['most_popular_song'] or '-')}[/bold]")


@click.group()
@click.version_option(version=__version__)
def cli():
    """Run streaming catalog operations against an in-memory repository."""
    pass


@cli.command()
@click.argument('script', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Log repository activity'
)
@click.option(
    '--fail-fast',
    is_flag=True,
    help='Stop at the first failing step'
)
def replay(script: Path, config: Optional[Path], verbose: bool, fail_fast: bool):
    """Replay the operations in SCRIPT against a fresh repository."""
    try:
        cfg = load_config(config) if config else Config.default()
        if verbose:
            cfg.logging.level = "DEBUG"
        configure_logging(cfg)

        steps = load_script(script)
    except MusicStreamingError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    repository = InMemoryStreamingRepository()
    service = StreamingService(repository)

    results = service.execute_all(steps, stop_on_failure=fail_fast)
    for index, (step, result) in enumerate(zip(steps, results), start=1):
        _print_outcome(index, str(step.get("op")), result)

    if cfg.display.show_tables:
        console.print()
        _print_summary(repository, cfg.display.top_n)

    outcome = collect(results)
    if outcome.is_failure():
        console.print(f"\n[red]{len(outcome.error())} of {len(results)} steps failed[/red]")
        sys.exit(1)

    console.print(f"\n[green]{len(results)} steps completed[/green]")


@cli.command(name='init-config')
@click.argument('path', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--force', is_flag=True, help='Overwrite an existing file')
def init_config(path: Path, force: bool):
    """Write the default configuration to PATH."""
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists (use --force to overwrite)[/yellow]")
        sys.exit(1)

    save_config(Config.default(), path)
    console.print(f"[green]Wrote default configuration to {path}[/green]")


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
