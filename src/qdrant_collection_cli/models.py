"""
Data models for the collection inspector.
"""
from enum import Enum
from typing import List, Dict, Any, Optional, Union
from dataclasses import dataclass, field

from .errors import InvalidFilterError

HEALTHY_STATUS = "green"

COUNT_FIELDS = ("vectors_count", "points_count", "indexed_vectors_count")


@dataclass(frozen=True)
class CollectionRecord:
    """
    Status, counts and vector configuration of one collection.

    Every field except ``name`` may be None, meaning the value was not
    reported or could not be read. ``error`` carries the reason a fetch or
    parse failed for this collection.
    """

    name: str
    status: Optional[str] = None
    vectors_count: Optional[int] = None
    points_count: Optional[int] = None
    indexed_vectors_count: Optional[int] = None
    vector_config: Optional[Any] = None
    error: Optional[str] = None

    @property
    def is_healthy(self) -> bool:
        """Healthy means status is green and no error was recorded."""
        return self.status == HEALTHY_STATUS and self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to a JSON-ready dictionary."""
        return {
            "name": self.name,
            "status": self.status,
            "vectors_count": self.vectors_count,
            "points_count": self.points_count,
            "indexed_vectors_count": self.indexed_vectors_count,
            "vector_config": self.vector_config,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CollectionRecord":
        """Rebuild a record from the output of to_dict()."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        name = data.get("name")
        if not isinstance(name, str):
            raise ValueError("Record is missing a string 'name'")
        return cls(
            name=name,
            status=data.get("status"),
            vectors_count=data.get("vectors_count"),
            points_count=data.get("points_count"),
            indexed_vectors_count=data.get("indexed_vectors_count"),
            vector_config=data.get("vector_config"),
            error=data.get("error"),
        )


class HealthFilter(Enum):
    """Values accepted by ``--only``."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"

    @classmethod
    def parse(cls, value: Union[str, "HealthFilter", None]) -> Optional["HealthFilter"]:
        """Convert a user-supplied value, or raise InvalidFilterError."""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidFilterError(
                f"Invalid value for --only: '{value}'. Must be 'healthy' or 'unhealthy'"
            ) from None

    def matches(self, record: CollectionRecord) -> bool:
        if self is HealthFilter.HEALTHY:
            return record.is_healthy
        return not record.is_healthy


@dataclass
class ListingResult:
    """Outcome of the listing call."""

    endpoint: str
    status_code: int
    reason: str
    names: List[str] = field(default_factory=list)

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()


@dataclass
class InspectionResult:
    """Structured result for a full inspection run."""

    records: List[CollectionRecord]
    displayed: List[CollectionRecord]
    only: Optional[HealthFilter] = None

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def shown(self) -> int:
        return len(self.displayed)

    def healthy_count(self) -> int:
        return sum(1 for r in self.records if r.is_healthy)

    def unhealthy_count(self) -> int:
        return self.total - self.healthy_count()

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the inspection."""
        return {
            "total": self.total,
            "displayed": self.shown,
            "healthy": self.healthy_count(),
            "unhealthy": self.unhealthy_count(),
            "only": self.only.value if self.only else None,
        }
