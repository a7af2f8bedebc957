"""
Filesystem collaborators: locate candidate scripts and read them.
"""

from pathlib import Path
from typing import List, Optional, Union

from .log import LOG


def files_find(root: Union[str, Path], extension: Optional[str] = None) -> List[Path]:
    """
    Recursively collect every file under `root` with the given extension

    Entries of each directory are visited in sorted name order and
    subdirectories are expanded where they appear, so the result is a
    stable depth-first listing. The extension is compared
    case-insensitively ("Player.GD" matches ".gd").

    Args:
        root: Directory to walk
        extension: Suffix including the dot; defaults to settings.extension

    Returns:
        Matching file paths, in traversal order
    """
    if extension is None:
        from ..config import appsettings
        extension = appsettings.extension
    extension = extension.lower()

    found: List[Path] = []
    for entry in sorted(Path(root).iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            found.extend(files_find(entry, extension))
        elif entry.suffix.lower() == extension:
            found.append(entry)

    LOG(f"{root}: {len(found)} '{extension}' file(s)", level=3)
    return found


def text_read(path: Union[str, Path]) -> str:
    """
    Read a script as UTF-8 text

    A leading byte order mark is dropped and undecodable bytes become
    U+FFFD, so one badly encoded script never stops a project scan.
    """
    return Path(path).read_text(encoding="utf-8-sig", errors="replace")
