from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
PACKAGE_ROOT = REPO_ROOT / "src" / "mlvisio_track"
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from dotenv import load_dotenv

from mlvisio_track.config import get_settings_module
from mlvisio_track.database.bootstrap import seed_demo_data
from mlvisio_track.database.connection import FirestoreConfig, FirestoreConnection
from mlvisio_track.database.record_store import FirestoreRecordStore


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    settings = importlib.import_module(get_settings_module())
    conn = FirestoreConnection(
        FirestoreConfig(
            credentials_path=settings.FIREBASE_CREDENTIALS or None,
            project_id=settings.FIREBASE_PROJECT_ID or None,
        )
    )
    seed_demo_data(FirestoreRecordStore(conn))

    print(f"OK: Seeded Firestore project {settings.FIREBASE_PROJECT_ID or '(default credentials)'}")


if __name__ == "__main__":
    main()
