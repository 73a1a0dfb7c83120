from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret-key"

# Tests never talk to Imgur; uploads go through a patched session.
IMGUR_CLIENT_ID = "test-client-id"

DEBUG = False
TESTING = True
