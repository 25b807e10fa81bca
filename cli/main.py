# cli/main.py


import typer
from cli.auth.commands import app as auth_app
from cli.notes.commands import app as notes_app
from cli.blacklist.commands import app as blacklist_app

app = typer.Typer()
app.add_typer(auth_app, name="auth")
app.add_typer(notes_app, name="notes")
app.add_typer(blacklist_app, name="blacklist")

if __name__ == "__main__":
    app()
