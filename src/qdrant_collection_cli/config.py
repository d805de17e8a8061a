"""
Configuration for the Qdrant collection inspector.
"""
from typing import Optional
from urllib.parse import quote


class Config:
    """Configuration class for the collection inspector."""

    def __init__(self):
        """Initialize with default configuration."""
        # Fixed local endpoint; not read from the environment in this version
        self.qdrant_url: str = "http://localhost:6333"
        self.collections_path: str = "/collections"

        # None leaves the transport's own default in place
        self.request_timeout: Optional[float] = None

    def collections_url(self) -> str:
        """URL of the listing endpoint."""
        return f"{self.qdrant_url.rstrip('/')}{self.collections_path}"

    def collection_url(self, name: str) -> str:
        """URL of the detail endpoint for one collection."""
        return f"{self.collections_url()}/{quote(name, safe='')}"
