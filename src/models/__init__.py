"""
Models package for gdslice

Contains data structures and type definitions for the extraction pipeline.
"""

from .state import ProgramState, pipeline
from .tags import Marker
from .slices import OrderedTable, Slice, FileRecord, ProjectManifest, ExtractionResult

__all__ = [
    "ProgramState",
    "pipeline",
    "Marker",
    "OrderedTable",
    "Slice",
    "FileRecord",
    "ProjectManifest",
    "ExtractionResult",
]
