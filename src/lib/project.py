"""
Godot project root validation

Checks performed by the command line front end before extraction starts.
The extraction core does not depend on them: project_slice() can run on
any directory.
"""

from pathlib import Path
from typing import Optional, Union


class ProjectError(Exception):
    """Raised when the target directory is not a usable Godot project"""
    pass


class PathNotFound(ProjectError):
    """Raised when the project path doesn't exist or isn't a directory"""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f'"{path}" doesn\'t exist or isn\'t accessible. Please check your path')


class InvalidProject(ProjectError):
    """Raised when the project marker file is missing from the root"""

    def __init__(self, path: Path, marker: str):
        self.path = path
        self.marker = marker
        super().__init__(
            f'No "{marker}" file found in "{path}". Are you sure this is a Godot repository?'
        )


def projectRoot_resolve(path: Union[str, Path], marker: Optional[str] = None) -> Path:
    """
    Resolve and validate a Godot project root

    Args:
        path: Candidate project directory (relative paths resolve against cwd)
        marker: Filename required at the root; defaults to settings.project_marker.
                Pass "" to only check that the directory exists.

    Returns:
        Absolute project root

    Raises:
        PathNotFound: If the directory doesn't exist
        InvalidProject: If the marker file is absent
    """
    if marker is None:
        from ..config import appsettings
        marker = appsettings.project_marker

    root = Path(path).resolve()
    if not root.is_dir():
        raise PathNotFound(root)

    if marker and not (root / marker).is_file():
        raise InvalidProject(root, marker)

    return root
