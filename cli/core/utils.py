import re
import typer

USERNAME_REGEX = re.compile(r"^[a-zA-Z0-9_.-]{3,64}$")
PASSWORD_MIN_LENGTH = 6


def validate_username(username: str) -> bool:
    if not USERNAME_REGEX.match(username):
        typer.echo(
            "Invalid username.\n"
            "Use only letters, numbers, '.', '_' or '-', with 3 to 64 characters."
        )
        return False
    return True


def validate_password(password: str) -> bool:
    """
    Same minimum the server enforces on registration.
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        typer.echo(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long.")
        return False
    return True


def require_token(token) -> str:
    if not token:
        typer.echo("No active session. Please login first.")
        raise typer.Exit(code=1)
    return token
