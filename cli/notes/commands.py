# cli/notes/commands.py
import typer
from cli.core.session import load_token
from cli.core.api import api_create_note, api_get_note, api_update_note, api_delete_note
from cli.core.utils import require_token

app = typer.Typer(help="Note commands.")


def _print_note(note: dict) -> None:
    typer.echo(f"ID:      {note.get('id')}")
    typer.echo(f"Title:   {note.get('title')}")
    typer.echo(f"Created: {note.get('created_at')}")
    typer.echo("-" * 40)
    typer.echo(note.get("content", ""))


@app.command("create")
def create_note(
    title: str = typer.Option(..., "--title", "-t", help="Note title (max 120 chars)"),
    content: str = typer.Option(..., "--content", "-c", help="Note content"),
):
    """
    Create a note (Editor or Admin).
    """
    token = require_token(load_token())

    note = api_create_note(token, title, content)
    if note is None:
        typer.echo("Failed to create note (permissions, validation or API error).")
        raise typer.Exit(code=1)

    typer.echo(f"Note created with id {note['id']}.")


@app.command("show")
def show_note(
    note_id: str = typer.Argument(..., help="Note ID"),
):
    """
    Show a note.
    """
    token = require_token(load_token())

    note = api_get_note(token, note_id)
    if note is None:
        typer.echo("Note not found or access denied.")
        raise typer.Exit(code=1)

    _print_note(note)


@app.command("update")
def update_note(
    note_id: str = typer.Argument(..., help="Note ID"),
    title: str = typer.Option(..., "--title", "-t", help="New title"),
    content: str = typer.Option(..., "--content", "-c", help="New content"),
):
    """
    Replace the title and content of a note (Editor on own notes, Admin on any).
    """
    token = require_token(load_token())

    note = api_update_note(token, note_id, title, content)
    if note is None:
        typer.echo("Failed to update note (not found, permissions or API error).")
        raise typer.Exit(code=1)

    typer.echo(f"Note {note['id']} updated.")


@app.command("delete")
def delete_note(
    note_id: str = typer.Argument(..., help="Note ID to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """
    Delete a note (Admin only).
    """
    token = require_token(load_token())

    if not force:
        typer.confirm(f"Delete note {note_id}?", abort=True)

    if api_delete_note(token, note_id):
        typer.echo(f"Note {note_id} deleted.")
    else:
        typer.echo("Failed to delete note. Check Admin permissions.")
        raise typer.Exit(code=1)
