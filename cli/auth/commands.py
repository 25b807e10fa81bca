from enum import Enum
import typer

from cli.core.session import save_session, load_token, clear_token, is_logged_in
from cli.core.api import api_register, api_login, api_logout
from cli.core.utils import validate_username, validate_password


app = typer.Typer(help="Authentication commands (register, login, logout)")


class RoleChoice(str, Enum):
    READER = "Reader"
    EDITOR = "Editor"
    ADMIN = "Admin"


@app.command("register")
def register(
    username: str = typer.Option(None, "--username", "-u", help="Username"),
    role: RoleChoice = typer.Option(RoleChoice.READER, "--role", "-r", help="Role of the new user"),
):
    """
    Register a new user.
    """
    if username is None:
        username = typer.prompt("Username")

    if not validate_username(username):
        raise typer.Exit(code=1)

    password = typer.prompt("Password", hide_input=True, confirmation_prompt=True)
    if not validate_password(password):
        raise typer.Exit(code=1)

    user = api_register(username, password, role.value)
    if user is None:
        typer.echo("Registration failed (username taken or API error).")
        raise typer.Exit(code=1)

    typer.echo(f"User '{user['username']}' registered as {user['role']}.")


@app.command("login")
def login(
    username: str = typer.Option(None, "--username", "-u", help="Username"),
):
    """
    Login to the system. Only allowed if no session is active.
    """
    if is_logged_in():
        typer.echo("Session already active. Logout first to remove current session token.")
        raise typer.Exit(code=1)

    if username is None:
        username = typer.prompt("Username")

    password = typer.prompt("Password", hide_input=True)

    result = api_login(username, password)
    if result is None:
        typer.echo("Login failed (invalid credentials or API error).")
        raise typer.Exit(code=1)

    save_session(result["token"], result["username"], result["role"], result["expires_at_utc"])
    typer.echo(f"Login successful as '{result['username']}' ({result['role']}). Session expires at {result['expires_at_utc']}.")


@app.command("logout")
def logout():
    """
    End session: revoke the token on the server and delete it locally.
    """
    token = load_token()
    if token:
        if api_logout(token):
            typer.echo("Logged out from backend. Token revoked.")
        else:
            typer.echo("Warning: Failed to logout from backend. The token may have had already expired.")

    clear_token()
    typer.echo("Session ended.")
