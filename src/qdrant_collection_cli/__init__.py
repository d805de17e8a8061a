"""
Qdrant Collection CLI - inspect collection health on a local Qdrant server.
"""

from .errors import (
    InspectorError,
    InvalidFilterError,
    CollectionListingError,
    ReportError
)
from .models import CollectionRecord, HealthFilter
