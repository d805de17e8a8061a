"""
Thin HTTP client for the Qdrant REST API.
"""
import logging
from typing import Optional

import requests

from .config import Config

logger = logging.getLogger(__name__)


class QdrantHttpClient:
    """Issue plain GET requests against a Qdrant server."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        """Initialize client with configuration and an optional session."""
        self.config = config
        self.timeout = config.request_timeout
        self._owns_session = session is None
        self.session = session or requests.Session()

    def get(self, url: str) -> requests.Response:
        """
        GET a URL and return the raw response.

        Transport failures propagate as requests.exceptions.RequestException;
        the status code is left for the caller to interpret.
        """
        logger.debug(f"GET {url}")
        response = self.session.get(url, timeout=self.timeout)
        logger.debug(f"GET {url} -> {response.status_code}")
        return response

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "QdrantHttpClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
