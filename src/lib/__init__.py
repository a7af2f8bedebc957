"""
gdslice - Godot script slice exporter

Extracts marker-delimited regions of GDScript files into a JSON manifest.
"""

__version__ = "1.0.0"

from .normalizer import text_normalize, lines_split
from .tags import tag_match, closingPattern_make
from .slicer import SliceResolver, SliceError, MissingClosingTag, slices_resolve
from .aggregator import fileRecord_build, manifest_build, project_slice
from .walker import files_find, text_read
from .project import projectRoot_resolve, ProjectError, PathNotFound, InvalidProject
from .log import LOG, state_connectToLogger

__all__ = [
    "text_normalize",
    "lines_split",
    "tag_match",
    "closingPattern_make",
    "SliceResolver",
    "SliceError",
    "MissingClosingTag",
    "slices_resolve",
    "fileRecord_build",
    "manifest_build",
    "project_slice",
    "files_find",
    "text_read",
    "projectRoot_resolve",
    "ProjectError",
    "PathNotFound",
    "InvalidProject",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
