"""
Command-line interface for the Qdrant collection inspector.
"""
import sys
import logging
from typing import Optional

import click

from qdrant_collection_cli.config import Config
from qdrant_collection_cli.errors import ErrorHandler, ErrorContext, ErrorSeverity, InspectorError
from qdrant_collection_cli.models import HealthFilter
from qdrant_collection_cli.report import render_report
from qdrant_collection_cli.services import InspectionService

# Global error handler instance
error_handler = ErrorHandler()


def _configure_logging(verbose: bool, debug: bool) -> int:
    """Set the root log level; default WARNING."""
    level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Attach a single stream handler with simple formatter
    handler_found = False
    for h in list(root_logger.handlers):
        if getattr(h, "_qdrant_collection_cli", False):
            handler_found = True
            h.setLevel(level)
    if not handler_found:
        h = logging.StreamHandler()
        h.setLevel(level)
        h.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        setattr(h, "_qdrant_collection_cli", True)
        root_logger.addHandler(h)
    return level


@click.command(name="qdrant-collection-cli")
@click.option('--only', type=click.Choice([f.value for f in HealthFilter]), default=None,
              metavar='TYPE', help='Filter output by health status: healthy or unhealthy')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output with additional information')
@click.option('--debug', is_flag=True, help='Enable debug logging (DEBUG level)')
def cli(only: Optional[str], verbose: bool, debug: bool):
    """Fetch and display Qdrant collections information."""
    _configure_logging(verbose, debug)

    def progress(line: str) -> None:
        if verbose:
            print(line)

    cfg = Config()
    service = InspectionService(error_handler)

    try:
        result = service.inspect(cfg, only=only, progress=progress)
        report = render_report(result.displayed)
    except InspectorError as e:
        # Printed below; log at INFO so it only repeats under --verbose
        error_response = error_handler.handle_error(
            e, ErrorContext(component="cli", operation="inspect", endpoint=cfg.collections_url()),
            severity=ErrorSeverity.LOW,
        )
        print(f"Error: {error_response.message}", file=sys.stderr)
        if verbose:
            for hint in error_response.actionable_guidance:
                print(f"  - {hint}", file=sys.stderr)
        sys.exit(1)

    if verbose:
        if only:
            print(f"COLLECTION DETAILS (showing only {only} collections)")
        else:
            print("COLLECTION DETAILS")

    print(report)

    if verbose:
        print()
        print(f"Displayed: {result.shown} / {result.total} collections")


if __name__ == "__main__":
    cli()
