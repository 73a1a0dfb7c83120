from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Optional

import requests

from ..core.exceptions import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_UPLOAD_URL = "https://api.imgur.com/3/image"


@dataclass(frozen=True)
class ImgurConfig:
    client_id: Optional[str]
    upload_url: str = DEFAULT_UPLOAD_URL
    timeout_seconds: float = 30.0


class ImgurClient:
    """Anonymous Imgur uploads authorised by the application's client id."""

    def __init__(self, config: ImgurConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    def upload(self, image: bytes) -> str:
        """Upload raw image bytes and return the public link."""
        if not self._config.client_id:
            raise UpstreamError("Image hosting is not configured")

        try:
            resp = self._session.post(
                self._config.upload_url,
                headers={"Authorization": f"Client-ID {self._config.client_id}"},
                data={"image": base64.b64encode(image).decode("ascii")},
                timeout=self._config.timeout_seconds,
            )
            resp.raise_for_status()
            link = resp.json()["data"]["link"]
        except requests.RequestException as e:
            logger.warning("Imgur upload failed: %s", e)
            raise UpstreamError(f"Image upload failed: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Unexpected Imgur response: %s", e)
            raise UpstreamError("Image upload failed: unexpected response from image host") from e

        logger.info("Uploaded profile picture to %s", link)
        return link
