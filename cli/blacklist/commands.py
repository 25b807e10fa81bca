# cli/blacklist/commands.py
import typer
from cli.core.session import load_token
from cli.core.api import api_list_blacklist
from cli.core.utils import require_token

app = typer.Typer(help="Revoked token commands (Admin only).")


@app.command("list")
def list_revoked():
    """
    List the ids of revoked tokens that have not expired yet.
    """
    token = require_token(load_token())

    result = api_list_blacklist(token)
    if result is None:
        typer.echo("Failed to get revoked tokens (API error or permissions).")
        raise typer.Exit(code=1)

    if not result["count"]:
        typer.echo("No revoked tokens.")
        return

    typer.echo(f"{result['count']} revoked token(s):")
    for jti in result["tokens"]:
        typer.echo(f"  {jti}")
