"""
Collection listing and enrichment for the collection inspector.
"""
import logging
from typing import List, Dict, Any, Optional

import requests

from .client import QdrantHttpClient
from .errors import CollectionListingError, ErrorCategory, ErrorHandler
from .models import CollectionRecord, ListingResult, COUNT_FIELDS

logger = logging.getLogger(__name__)


def _as_count(value: Any) -> Optional[int]:
    """Return value if it is a non-negative integer, otherwise None."""
    # bool is an int subclass but never a count
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


def _reject_constant(token: str) -> None:
    raise ValueError(f"Invalid JSON constant: {token}")


def _decode_body(response: requests.Response) -> Any:
    """Decode a JSON body, rejecting NaN and Infinity literals."""
    return response.json(parse_constant=_reject_constant)


def _extract_vector_config(result: Dict[str, Any]) -> Optional[Any]:
    """Pull config.params.vectors out of a collection's result section."""
    config = result.get("config")
    if not isinstance(config, dict):
        return None
    params = config.get("params")
    if not isinstance(params, dict):
        return None
    return params.get("vectors")


def extract_collection_fields(body: Any) -> Dict[str, Any]:
    """
    Best-effort extraction of record fields from a detail response body.

    Each field is read independently; a missing or malformed field does
    not prevent the others from being read. A body without a 'result'
    object yields an empty mapping.
    """
    fields: Dict[str, Any] = {}
    result = body.get("result") if isinstance(body, dict) else None
    if not isinstance(result, dict):
        return fields

    status = result.get("status")
    if isinstance(status, str):
        fields["status"] = status

    for key in COUNT_FIELDS:
        count = _as_count(result.get(key))
        if count is not None:
            fields[key] = count

    vector_config = _extract_vector_config(result)
    if vector_config is not None:
        fields["vector_config"] = vector_config

    return fields


class CollectionLister:
    """Enumerate collection names from the listing endpoint."""

    def __init__(self, client: QdrantHttpClient):
        self.client = client

    def list_collections(self) -> ListingResult:
        """
        Fetch collection names in server order.

        Raises:
            CollectionListingError: if the request fails, the body is not
                JSON, or result.collections is missing or not an array.
        """
        url = self.client.config.collections_url()

        try:
            response = self.client.get(url)
        except requests.exceptions.RequestException as e:
            raise CollectionListingError(f"Failed to fetch collections from {url}: {e}") from e

        try:
            body = _decode_body(response)
        except (ValueError, RecursionError) as e:
            raise CollectionListingError(
                f"Error parsing collections response (status: {response.status_code}): {e}",
                category=ErrorCategory.PARSING,
            ) from e

        result = body.get("result") if isinstance(body, dict) else None
        collections = result.get("collections") if isinstance(result, dict) else None
        if not isinstance(collections, list):
            raise CollectionListingError(
                f"Expected 'result.collections' to be an array (status: {response.status_code})",
                category=ErrorCategory.PARSING,
            )

        names: List[str] = []
        for item in collections:
            name = item.get("name") if isinstance(item, dict) else None
            if isinstance(name, str):
                names.append(name)
            else:
                logger.debug(f"Skipping collection entry without a name: {item!r}")

        logger.info(f"Listed {len(names)} collection(s) from {url}")
        return ListingResult(
            endpoint=url,
            status_code=response.status_code,
            reason=response.reason or "",
            names=names,
        )


class CollectionEnricher:
    """
    Build a CollectionRecord for each collection from its detail endpoint.

    Failures for one collection are stored on its record and never raised,
    so one bad collection cannot hide the rest of the report.
    """

    def __init__(self, client: QdrantHttpClient, error_handler: Optional[ErrorHandler] = None):
        self.client = client
        self.error_handler = error_handler or ErrorHandler()

    def enrich(self, name: str) -> CollectionRecord:
        """Fetch details for one collection and return its record."""
        url = self.client.config.collection_url(name)

        try:
            response = self.client.get(url)
        except requests.exceptions.RequestException as e:
            return self._failed(name, url, f"Failed to fetch collection details: {e}",
                                ErrorCategory.NETWORK, e)

        if not response.ok:
            status = f"{response.status_code} {response.reason or ''}".strip()
            return self._failed(name, url, f"Failed to get collection details (status: {status})",
                                ErrorCategory.NETWORK)

        try:
            body = _decode_body(response)
        except (ValueError, RecursionError) as e:
            return self._failed(name, url, f"Error parsing collection details: {e}",
                                ErrorCategory.PARSING, e)

        fields = extract_collection_fields(body)
        logger.debug(f"Collection '{name}': {fields.get('status', 'no status')}")
        return CollectionRecord(name=name, **fields)

    def enrich_all(self, names: List[str]) -> List[CollectionRecord]:
        """Enrich names one at a time, in the given order."""
        return [self.enrich(name) for name in names]

    def _failed(self, name: str, url: str, message: str, category: ErrorCategory,
                error: Optional[Exception] = None) -> CollectionRecord:
        response = self.error_handler.handle_collection_error(message, name, url, category, error)
        return CollectionRecord(name=name, error=response.message)
