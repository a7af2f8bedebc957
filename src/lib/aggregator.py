"""
File and project aggregation

Folds resolved slices into the manifest:

1. fileRecord_build(): slices of one file -> FileRecord (or None when the
   file has no markers)
2. manifest_build(): every candidate file -> ProjectManifest, raising on
   the first unresolvable file
3. project_slice(): walk + build as a fail-fast fold returning an
   ExtractionResult, which holds either the manifest or the first error

Files are processed one at a time and independently; a file's record is
added to the manifest only once it is complete.
"""

import posixpath
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from ..config import AppSettings, appsettings
from ..models.slices import ExtractionResult, FileRecord, OrderedTable, ProjectManifest, Slice
from .slicer import SliceError, slices_resolve
from .walker import files_find, text_read
from .log import LOG


def relativePath_make(root: Union[str, Path], path: Union[str, Path]) -> str:
    """
    Path of `path` relative to `root`, with forward slashes

    Example:
        >>> relativePath_make("/game", "/game/player/player.gd")
        'player/player.gd'
    """
    return Path(path).relative_to(Path(root)).as_posix()


def fileRecord_build(
    file_path: str,
    slices: Iterable[Slice],
    settings: Optional[AppSettings] = None,
) -> Optional[FileRecord]:
    """
    Collect the slices of one file into a FileRecord

    A later slice with an already-seen name replaces the earlier one, while
    the name keeps its first-discovery position in slice_names.

    Args:
        file_path: Relative path, forward slashes
        slices: Slices in discovery order
        settings: Configuration; defaults to the appsettings singleton

    Returns:
        FileRecord, or None if `slices` is empty
    """
    settings = settings or appsettings

    table: OrderedTable[Slice] = OrderedTable()
    for slice_ in slices:
        if slice_.name in table:
            LOG(f"{file_path}: slice '{slice_.name}' redefined, keeping the last one", level=2)
        table.set(slice_.name, slice_)

    if not len(table):
        return None

    base_name = posixpath.basename(file_path)
    return FileRecord(
        file_path=file_path,
        dir_name=posixpath.dirname(file_path) or ".",
        file_name=posixpath.splitext(base_name)[0],
        resource_path=settings.resourcePath_make(file_path),
        slices=table,
    )


def manifest_build(
    root: Union[str, Path],
    paths: Iterable[Union[str, Path]],
    reader: Optional[Callable[[Path], str]] = None,
    settings: Optional[AppSettings] = None,
) -> ProjectManifest:
    """
    Build the project manifest from candidate files

    Args:
        root: Project root the paths are relative to
        paths: Candidate files under `root`, in traversal order
        reader: Text-read collaborator; defaults to text_read
        settings: Configuration; defaults to the appsettings singleton

    Returns:
        ProjectManifest holding only files with at least one slice

    Raises:
        SliceError: On the first file whose markers cannot be resolved;
                    no manifest is produced
    """
    settings = settings or appsettings
    reader = reader or text_read

    files: OrderedTable[FileRecord] = OrderedTable()
    for path in paths:
        file_path = relativePath_make(root, path)
        slices = slices_resolve(
            reader(Path(path)),
            file_path,
            keyword=settings.keyword,
            whole_file_name=settings.whole_file_name,
            unit=settings.indent_unit,
        )
        record = fileRecord_build(file_path, slices, settings)
        if record is None:
            LOG(f"{file_path}: no markers", level=3)
            continue

        LOG(f"{file_path}: {len(record.slices)} slice(s) {record.slice_names}", level=2)
        files.set(file_path, record)

    return ProjectManifest(files=files)


def project_slice(
    root: Union[str, Path],
    extension: Optional[str] = None,
    reader: Optional[Callable[[Path], str]] = None,
    settings: Optional[AppSettings] = None,
) -> ExtractionResult:
    """
    Extract the manifest of a whole project tree

    Walks `root` for scripts and builds the manifest. The first SliceError
    ends the run and is returned in place of the manifest. No project
    marker check is made here.

    Args:
        root: Directory to scan
        extension: Script extension; defaults to settings.extension
        reader: Text-read collaborator; defaults to text_read
        settings: Configuration; defaults to the appsettings singleton

    Returns:
        ExtractionResult with either `manifest` or `error` set
    """
    settings = settings or appsettings
    paths: List[Path] = files_find(root, extension or settings.extension)
    LOG(f"Found {len(paths)} candidate file(s) under {root}", level=2)

    try:
        manifest = manifest_build(root, paths, reader=reader, settings=settings)
    except SliceError as e:
        LOG(f"Extraction halted: {e}", level=2)
        return ExtractionResult(error=e, files_scanned=len(paths))

    return ExtractionResult(manifest=manifest, files_scanned=len(paths))
