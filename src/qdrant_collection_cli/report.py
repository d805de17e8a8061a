"""
Filtering and JSON rendering of collection records.
"""
import json
from typing import Iterable, List, Optional, Union

from .errors import ReportError
from .models import CollectionRecord, HealthFilter


def filter_records(records: Iterable[CollectionRecord],
                   only: Union[str, HealthFilter, None] = None) -> List[CollectionRecord]:
    """Keep records matching the health filter, preserving order.

    Raises InvalidFilterError for values other than healthy/unhealthy.
    """
    health_filter = HealthFilter.parse(only)
    if health_filter is None:
        return list(records)
    return [r for r in records if health_filter.matches(r)]


def render_report(records: Iterable[CollectionRecord]) -> str:
    """Serialize records as a pretty-printed JSON array."""
    try:
        return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ReportError(f"Failed to serialize report: {e}") from e


def parse_report(text: str) -> List[CollectionRecord]:
    """Parse the output of render_report() back into records."""
    try:
        data = json.loads(text)
    except ValueError as e:
        raise ReportError(f"Report is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise ReportError("Report must be a JSON array")

    records = []
    for i, item in enumerate(data):
        try:
            records.append(CollectionRecord.from_dict(item))
        except ValueError as e:
            raise ReportError(f"Invalid record at index {i}: {e}") from e
    return records
