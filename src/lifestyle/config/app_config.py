import os

# --- Ownership ---
# Single-user deployment; every goal and review is filed under this id
DEFAULT_USER_ID = os.getenv("DEFAULT_USER_ID", "me")

# --- Hosted backend (PostgREST + RPC) ---
BACKEND_URL = os.getenv("BACKEND_URL", "http://127.0.0.1:54321")
BACKEND_API_KEY = os.getenv("BACKEND_API_KEY", "")
BACKEND_TIMEOUT = int(os.getenv("BACKEND_TIMEOUT", "30"))

# --- Logging ---
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
