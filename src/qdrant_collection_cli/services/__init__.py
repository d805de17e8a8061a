"""
Services that keep the inspection pipeline separate from the CLI layer.
"""

from .inspection_service import InspectionService

__all__ = [
    'InspectionService',
]
