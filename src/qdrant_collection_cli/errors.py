"""
Error handling for the collection inspector.

Two tiers of failure exist:
- fatal errors abort the whole run (bad filter value, listing failure,
  report serialization failure) and surface as InspectorError subclasses
- per-collection errors are recoverable and end up as data on the
  collection record instead of propagating

ErrorHandler gives both tiers a common categorization, guidance and
logging path.
"""

import logging
import traceback
from enum import Enum
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from datetime import datetime


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"           # Informational, run continues
    MEDIUM = "medium"     # One collection degraded, run continues
    HIGH = "high"         # Run must stop
    CRITICAL = "critical" # Unexpected failure


class ErrorCategory(Enum):
    """Error categories."""
    VALIDATION = "validation"        # Command-line input errors
    NETWORK = "network"              # Transport and HTTP status errors
    PARSING = "parsing"              # Malformed or unexpected response bodies
    SERIALIZATION = "serialization"  # Report rendering/parsing errors
    UNKNOWN = "unknown"


class InspectorError(Exception):
    """Base class for fatal inspector errors."""

    category = ErrorCategory.UNKNOWN

    def __init__(self, message: str, category: Optional[ErrorCategory] = None):
        super().__init__(message)
        if category is not None:
            self.category = category


class InvalidFilterError(InspectorError, ValueError):
    """Raised when the health filter is not 'healthy' or 'unhealthy'."""

    category = ErrorCategory.VALIDATION


class CollectionListingError(InspectorError):
    """Raised when the collections listing cannot be fetched or understood."""

    category = ErrorCategory.NETWORK


class ReportError(InspectorError):
    """Raised when the report cannot be serialized or parsed."""

    category = ErrorCategory.SERIALIZATION


@dataclass
class ErrorContext:
    """Context information for error reporting."""
    component: str                          # Component where error occurred
    operation: str                          # Operation being performed
    collection_name: Optional[str] = None   # Collection being processed, if any
    endpoint: Optional[str] = None          # URL being called, if any
    additional_data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary."""
        return {
            "component": self.component,
            "operation": self.operation,
            "collection_name": self.collection_name,
            "endpoint": self.endpoint,
            "additional_data": self.additional_data or {}
        }


@dataclass
class ErrorResponse:
    """Structured error response."""
    error_type: str
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    context: ErrorContext
    timestamp: datetime
    actionable_guidance: List[str]
    original_exception: Optional[Exception] = None
    stack_trace: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert error response to dictionary."""
        return {
            "error_type": self.error_type,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "context": self.context.to_dict(),
            "timestamp": self.timestamp.isoformat(),
            "actionable_guidance": self.actionable_guidance,
            "stack_trace": self.stack_trace
        }


class ErrorHandler:
    """
    Centralized error handling.

    Categorizes exceptions, attaches actionable guidance and logs them at a
    level derived from severity.
    """

    def __init__(self, logger_name: str = "qdrant_collection_cli"):
        """Initialize the error handler."""
        self.logger = logging.getLogger(logger_name)

    def handle_error(
        self,
        error: Exception,
        context: ErrorContext,
        category: Optional[ErrorCategory] = None,
        severity: Optional[ErrorSeverity] = None,
        include_stack_trace: bool = False,
        message: Optional[str] = None
    ) -> ErrorResponse:
        """
        Handle an error and return a structured response.

        Args:
            error: The exception that occurred
            context: Where the error occurred
            category: Error category (auto-detected if not provided)
            severity: Error severity (auto-detected if not provided)
            include_stack_trace: Whether to include the stack trace
            message: User-facing message (defaults to str(error))

        Returns:
            Structured error response
        """
        if category is None:
            category = self._categorize_error(error)
        if severity is None:
            severity = self._determine_severity(error)

        error_response = ErrorResponse(
            error_type=type(error).__name__,
            category=category,
            severity=severity,
            message=message if message is not None else str(error),
            context=context,
            timestamp=datetime.now(),
            actionable_guidance=self._generate_actionable_guidance(category),
            original_exception=error,
            stack_trace=traceback.format_exc() if include_stack_trace else None
        )

        self._log_error(error_response)
        return error_response

    def handle_collection_error(
        self,
        message: str,
        collection_name: str,
        endpoint: str,
        category: ErrorCategory,
        error: Optional[Exception] = None
    ) -> ErrorResponse:
        """
        Handle a recoverable failure for a single collection.

        The returned message is what gets stored on the collection record.
        """
        context = ErrorContext(
            component="collection_enricher",
            operation="enrich",
            collection_name=collection_name,
            endpoint=endpoint,
        )
        return self.handle_error(
            error or RuntimeError(message),
            context,
            category=category,
            severity=ErrorSeverity.MEDIUM,
            message=message,
        )

    def _categorize_error(self, error: Exception) -> ErrorCategory:
        """Auto-detect error category based on exception type and message."""
        if isinstance(error, InspectorError):
            return error.category

        error_type = type(error).__name__.lower()
        error_message = str(error).lower()

        # Check parsing before network so JSONDecodeError is not treated as HTTP
        if any(keyword in error_type for keyword in ['decode', 'parse', 'json']):
            return ErrorCategory.PARSING
        if any(keyword in error_type for keyword in ['connection', 'timeout', 'http', 'request']):
            return ErrorCategory.NETWORK
        if any(keyword in error_message for keyword in ['connection', 'timeout', 'status']):
            return ErrorCategory.NETWORK
        if any(keyword in error_message for keyword in ['expected', 'parsing', 'invalid json']):
            return ErrorCategory.PARSING
        if isinstance(error, ValueError):
            return ErrorCategory.VALIDATION

        return ErrorCategory.UNKNOWN

    def _determine_severity(self, error: Exception) -> ErrorSeverity:
        """Fatal errors are HIGH; anything not raised by this package is CRITICAL."""
        if isinstance(error, InspectorError):
            return ErrorSeverity.HIGH
        return ErrorSeverity.CRITICAL

    def _generate_actionable_guidance(self, category: ErrorCategory) -> List[str]:
        """Generate actionable guidance for resolving the error."""
        if category == ErrorCategory.NETWORK:
            return [
                "Verify the Qdrant server is running on http://localhost:6333",
                "Check the server logs for request errors",
            ]
        if category == ErrorCategory.PARSING:
            return [
                "Confirm the server speaks the Qdrant REST API",
                "Inspect the raw response with: curl http://localhost:6333/collections",
            ]
        if category == ErrorCategory.VALIDATION:
            return ["Use --only healthy or --only unhealthy"]
        if category == ErrorCategory.SERIALIZATION:
            return ["Re-run with --debug to see the offending value"]
        return ["Re-run with --debug for more details"]

    def _log_error(self, error_response: ErrorResponse) -> None:
        """Log the error using a level based on severity."""
        log_message = f"[{error_response.category.value.upper()}] {error_response.message}"
        log_context = f"Component: {error_response.context.component}, Operation: {error_response.context.operation}"
        if error_response.context.collection_name:
            log_context += f", Collection: {error_response.context.collection_name}"

        if error_response.severity == ErrorSeverity.CRITICAL:
            self.logger.critical(f"{log_message} | {log_context}")
        elif error_response.severity == ErrorSeverity.HIGH:
            self.logger.error(f"{log_message} | {log_context}")
        elif error_response.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(f"{log_message} | {log_context}")
        else:
            self.logger.info(f"{log_message} | {log_context}")

        if error_response.stack_trace:
            self.logger.debug(f"Stack trace: {error_response.stack_trace}")
