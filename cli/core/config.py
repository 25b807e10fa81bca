# cli/core/config.py
from pathlib import Path
import os

# URL do backend FastAPI
BASE_URL = os.environ.get("SAFESCRIBE_URL", "http://localhost:8000")

# Request timeout in seconds
TIMEOUT = float(os.environ.get("SAFESCRIBE_TIMEOUT", "5"))

# Pasta onde a CLI vai guardar dados locais (token, etc.)
APP_DIR = Path(os.environ.get("SAFESCRIBE_HOME", Path.home() / ".safescribe"))

# Ficheiro onde vamos guardar o token de sessão
SESSION_FILE = APP_DIR / "session.json"
