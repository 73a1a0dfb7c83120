import os

from ..core.constants import DEFAULT_DEPARTMENTS

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Path to a service account JSON; empty means application default credentials.
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS", "")
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID", "")

IMGUR_CLIENT_ID = os.getenv("IMGUR_CLIENT_ID", "")
IMGUR_UPLOAD_URL = os.getenv("IMGUR_UPLOAD_URL", "https://api.imgur.com/3/image")
UPLOAD_TIMEOUT_SECONDS = float(os.getenv("UPLOAD_TIMEOUT_SECONDS", "30"))

DEPARTMENTS = tuple(
    d.strip() for d in os.getenv("DEPARTMENTS", ",".join(DEFAULT_DEPARTMENTS)).split(",") if d.strip()
)

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

DEBUG = bool(int(os.getenv("DEBUG", "0")))
