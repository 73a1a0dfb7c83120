import os

from .base import *  # noqa: F401,F403

DEBUG = bool(int(os.getenv("DEBUG", "1")))
