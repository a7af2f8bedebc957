"""
gdslice - Godot script slice exporter

Scans a Godot project for "# EXPORT name" / "# /EXPORT name" marker pairs
and produces a JSON manifest of the tagged regions for tutorial builders
and other generators.
"""

__version__ = "1.0.0"

from .lib import (
    slices_resolve,
    manifest_build,
    project_slice,
    MissingClosingTag,
    SliceError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "slices_resolve",
    "manifest_build",
    "project_slice",
    "MissingClosingTag",
    "SliceError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
