import os
import tempfile

# Settings are read once at import time, so the environment must be ready
# before any backend module is collected.
os.environ["JWT_SECRET"] = "test-secret-key-with-at-least-32-bytes!!"
os.environ["JWT_ISSUER"] = "SafeScribeAPI"
os.environ["JWT_AUDIENCE"] = "SafeScribeClients"
os.environ["JWT_EXPIRES_MINUTES"] = "60"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "Admin@123"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_PARALLELISM"] = "1"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SAFESCRIBE_HOME"] = tempfile.mkdtemp(prefix="safescribe-cli-")
