"""CLI application for devnote using Rich and Typer."""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from devnote.core.config import (
    ensure_data_dir,
    get_db_path,
    get_or_create_config,
    get_selected_path,
    setup_logging,
)
from devnote.core.editor import Editor, create_editor
from devnote.core.errors import DevnoteError
from devnote.core.formatting import format_groups, format_note, group_notes
from devnote.core.notebook import Notebook
from devnote.core.selection import SelectedProject
from devnote.storage.sqlite import SqliteRepository

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="devnote",
    help="Simple program to add dev notes",
    no_args_is_help=True,
)

console = Console(soft_wrap=True)


def echo(text: str) -> None:
    """Print user content verbatim (no markup or highlighting)."""
    console.print(text, markup=False, highlight=False, emoji=False)


def fail(error: Exception) -> NoReturn:
    """Report an error and exit with status 1."""
    logger.debug("Command failed", exc_info=error)
    console.print(f"[red]Error: {escape(str(error))}[/red]", highlight=False)
    raise typer.Exit(1)


@contextmanager
def open_notebook() -> Iterator[Notebook]:
    """Open config, selection and database for one command."""
    data_dir = ensure_data_dir()
    try:
        config = get_or_create_config(data_dir)
        repo = SqliteRepository(get_db_path(data_dir))
    except (DevnoteError, sqlite3.Error) as e:
        fail(e)

    try:
        yield Notebook(repo, SelectedProject(get_selected_path(data_dir)), config)
    except (DevnoteError, sqlite3.Error) as e:
        fail(e)
    finally:
        repo.close()


def print_project(notebook: Notebook) -> None:
    """Print the currently selected project line."""
    echo(f"Project: {notebook.selected_name or 'Not Selected'}")


def editor_for(notebook: Notebook) -> Editor:
    """Editor configured for this notebook, working in the data directory."""
    return create_editor(notebook.config, ensure_data_dir())


@app.command()
def use(
    project: str = typer.Argument(..., help="The project name to be appended"),
):
    """Use a project to add the notes to."""
    with open_notebook() as notebook:
        print_project(notebook)
        created = notebook.use_project(project)
        selected = notebook.selected_name
        if created:
            console.print(
                f"[dim]Created project {escape(selected)}[/dim]", highlight=False
            )
        echo(f"Using Project: {selected}")


@app.command()
def add(
    name: Optional[str] = typer.Argument(None, help="Name of the note"),
    date: Optional[str] = typer.Argument(
        None, help='Date of the note, "YYYY-MM-DD HH:MM:SS" (defaults to now)'
    ),
):
    """Add dev note to selected project."""
    with open_notebook() as notebook:
        print_project(notebook)
        note = notebook.add_note(editor_for(notebook), name=name, date=date)
        if note is None:
            console.print("[yellow]Empty note not added[/yellow]")
        else:
            console.print(f"[green]Added note {note.guid}[/green]", highlight=False)


@app.command("rm")
def remove(
    note_id: str = typer.Argument(
        ..., metavar="ID", help="Guid prefix of the note to delete"
    ),
):
    """Delete note from project."""
    with open_notebook() as notebook:
        note = notebook.remove_note(note_id)
        console.print(f"[green]Removed note {note.guid}[/green]", highlight=False)


@app.command("ls")
def list_notes(
    guid: bool = typer.Option(False, "--guid", "-g", help="Show note guids"),
):
    """List notes for current project."""
    with open_notebook() as notebook:
        print_project(notebook)
        notes = notebook.list_notes()
        echo(f"Notes for {notebook.selected_name}")

        include_time = notebook.config.include_time
        if notebook.config.group_by_date:
            if notes:
                echo(format_groups(group_notes(notes, include_time, guid)))
        else:
            for note in notes:
                echo(format_note(note, include_time, guid))


@app.command()
def projects():
    """List selectable projects."""
    with open_notebook() as notebook:
        for project in notebook.list_projects():
            echo(project.name)


@app.command()
def view(
    guid: str = typer.Argument(..., help="Guid prefix of the note"),
    show_guid: bool = typer.Option(False, "--guid", "-g", help="Show the note guid"),
):
    """View note."""
    with open_notebook() as notebook:
        print_project(notebook)
        note = notebook.find_note(guid)
        echo(format_note(note, notebook.config.include_time, show_guid))


@app.command()
def edit(
    guid: str = typer.Argument(..., help="Guid prefix of the note"),
):
    """Edit note."""
    with open_notebook() as notebook:
        print_project(notebook)
        note = notebook.edit_note(editor_for(notebook), guid)
        if note is None:
            console.print("[yellow]Empty edit not saved[/yellow]")


@app.command()
def move(
    guid: str = typer.Argument(..., help="Guid prefix of the note"),
):
    """Moves note with guid prefix to current project."""
    with open_notebook() as notebook:
        print_project(notebook)
        note = notebook.move_note(guid)
        target = escape(notebook.selected_name)
        console.print(
            f"[green]Moved note {note.guid} to {target}[/green]", highlight=False
        )


@app.callback()
def main(
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging",
    ),
):
    """Simple program to add dev notes."""
    setup_logging(debug)


def run_cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run_cli()
