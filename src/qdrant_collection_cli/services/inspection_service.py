"""
InspectionService: list, enrich and filter collections.

This service holds the inspection pipeline so the CLI only deals with
argument handling and printing.
"""

import logging
from typing import Callable, Optional, Union

import requests

from ..client import QdrantHttpClient
from ..collections import CollectionLister, CollectionEnricher
from ..config import Config
from ..errors import ErrorHandler
from ..models import HealthFilter, InspectionResult
from ..report import filter_records

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


def _noop(_message: str) -> None:
    pass


class InspectionService:
    """
    Service for inspecting every collection on a Qdrant server.

    Runs the listing call, then one detail call per collection in listing
    order, then applies the optional health filter.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 session: Optional[requests.Session] = None):
        """Initialize the service; ``session`` replaces the HTTP transport."""
        self.error_handler = error_handler or ErrorHandler()
        self.session = session

    def inspect(self, config: Config,
                only: Union[str, HealthFilter, None] = None,
                progress: Optional[ProgressCallback] = None) -> InspectionResult:
        """
        Inspect all collections.

        Args:
            config: Configuration with the server address
            only: Optional health filter ('healthy' or 'unhealthy')
            progress: Receives human-readable progress lines

        Returns:
            InspectionResult with all records and the filtered subset

        Raises:
            InvalidFilterError: before any request when ``only`` is invalid
            CollectionListingError: when the listing call fails
        """
        # Validate before touching the network
        health_filter = HealthFilter.parse(only)
        progress = progress or _noop

        with QdrantHttpClient(config, session=self.session) as client:
            progress(f"Calling endpoint: {config.collections_url()}")
            listing = CollectionLister(client).list_collections()
            progress(f"Response status: {listing.status_line}")

            progress("")
            progress(f"Total collections found: {len(listing.names)}")
            progress("Fetching details for each collection...")
            progress("")

            enricher = CollectionEnricher(client, self.error_handler)
            records = enricher.enrich_all(listing.names)

        displayed = filter_records(records, health_filter)
        result = InspectionResult(records=records, displayed=displayed, only=health_filter)
        summary = result.get_summary()
        logger.info("Inspection summary: " + " ".join(f"{k}={v}" for k, v in summary.items()))
        return result
