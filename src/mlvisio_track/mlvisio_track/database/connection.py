from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FirestoreConfig:
    credentials_path: Optional[str] = None
    project_id: Optional[str] = None
    app_name: str = "mlvisio-track"


class FirestoreConnection:
    """Owns the Firebase app and the Firestore client for one process.

    Built once by the app factory and handed to the repositories; nothing is
    kept in module globals.
    """

    def __init__(self, config: FirestoreConfig):
        self._config = config
        self._client = None

    def _app(self) -> firebase_admin.App:
        try:
            return firebase_admin.get_app(self._config.app_name)
        except ValueError:
            pass

        if self._config.credentials_path:
            cred = credentials.Certificate(self._config.credentials_path)
        else:
            cred = credentials.ApplicationDefault()
        options = {"projectId": self._config.project_id} if self._config.project_id else None
        app = firebase_admin.initialize_app(cred, options, name=self._config.app_name)
        logger.info("Firebase app %r initialized", self._config.app_name)
        return app

    def client(self):
        if self._client is None:
            self._client = firestore.client(self._app())
        return self._client
