import requests
from typing import Optional
from .config import BASE_URL, TIMEOUT


def _auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def api_register(username: str, password: str, role: str) -> Optional[dict]:
    """
    Regista um novo utilizador. Devolve o utilizador criado ou None.
    """
    url = f"{BASE_URL}/api/v1/auth/register"
    data = {"username": username, "password": password, "role": role}

    try:
        resp = requests.post(url, json=data, timeout=TIMEOUT)
    except requests.RequestException:
        return None
    if resp.status_code != 201:
        return None
    return resp.json().get("user")


def api_login(username: str, password: str) -> Optional[dict]:
    """
    Faz login no backend e devolve {token, expires_at_utc, username, role}.
    """
    url = f"{BASE_URL}/api/v1/auth/login"
    data = {"username": username, "password": password}

    try:
        resp = requests.post(url, json=data, timeout=TIMEOUT)
    except requests.RequestException:
        return None
    if resp.status_code != 200:
        return None
    return resp.json()


def api_logout(token: str) -> bool:
    """
    Faz logout no backend (o token fica revogado).
    """
    url = f"{BASE_URL}/api/v1/auth/logout"

    try:
        resp = requests.post(url, headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException:
        return False
    return resp.status_code == 200


def api_create_note(token: str, title: str, content: str) -> Optional[dict]:
    url = f"{BASE_URL}/api/v1/notes"
    try:
        resp = requests.post(url, json={"title": title, "content": content}, headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException:
        return None
    if resp.status_code != 201:
        return None
    return resp.json()


def api_get_note(token: str, note_id: str) -> Optional[dict]:
    url = f"{BASE_URL}/api/v1/notes/{note_id}"
    try:
        resp = requests.get(url, headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException:
        return None
    if resp.status_code != 200:
        return None
    return resp.json()


def api_update_note(token: str, note_id: str, title: str, content: str) -> Optional[dict]:
    url = f"{BASE_URL}/api/v1/notes/{note_id}"
    try:
        resp = requests.put(url, json={"title": title, "content": content}, headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException:
        return None
    if resp.status_code != 200:
        return None
    return resp.json().get("note")


def api_delete_note(token: str, note_id: str) -> bool:
    url = f"{BASE_URL}/api/v1/notes/{note_id}"
    try:
        resp = requests.delete(url, headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException:
        return False
    return resp.status_code == 200


def api_list_blacklist(token: str) -> Optional[dict]:
    """
    Lista os jti revogados (Admin). Devolve {message, count, tokens} ou None.
    """
    url = f"{BASE_URL}/api/v1/blacklist"
    try:
        resp = requests.get(url, headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException:
        return None
    if resp.status_code != 200:
        return None
    return resp.json()
