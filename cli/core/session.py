# cli/core/session.py
import json
from typing import Optional

from .config import SESSION_FILE


def save_session(token: str, username: str, role: str, expires_at_utc: str) -> None:
    """
    Guarda o token e os dados da sessão num ficheiro JSON (SESSION_FILE).
    """
    SESSION_FILE.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "token": token,
        "username": username,
        "role": role,
        "expires_at_utc": expires_at_utc,
    }
    with open(SESSION_FILE, "w", encoding="utf-8") as f:
        json.dump(data, f)


def load_session() -> Optional[dict]:
    """
    Lê a sessão guardada. Devolve None se o ficheiro não existir ou estiver inválido.
    """
    if not SESSION_FILE.exists():
        return None

    try:
        with open(SESSION_FILE, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        # Ficheiro ilegível: consideramos que não há sessão válida
        return None


def load_token() -> Optional[str]:
    session = load_session()
    if not session:
        return None
    return session.get("token")


def is_logged_in() -> bool:
    return load_token() is not None


def clear_token() -> None:
    """
    Apaga o ficheiro de sessão, terminando a sessão local.
    """
    if SESSION_FILE.exists():
        SESSION_FILE.unlink()
