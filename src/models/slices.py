"""
Slice and manifest data models

Defines the records produced by the extraction pipeline, from a single
Slice up to the project-wide ProjectManifest, plus the ordered mapping
they are stored in and the result type returned by the fail-fast fold.

Each model knows how to render itself to the manifest JSON shape:

    {
      "files_paths": [...],
      "files": {
        "<path>": {
          "file_path", "dir_name", "file_name", "godot_path",
          "slices_names": [...],
          "slices": {"<name>": {"all", "name", "before", "after",
                                "contents", "indent", "start", "end",
                                "original"}}
        }
      }
    }
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from ..lib.slicer import SliceError


V = TypeVar("V")


class OrderedTable(Generic[V]):
    """
    Mapping with an explicitly tracked key order

    Values live in a dict, insertion order lives in a separate list. Setting
    an existing key replaces its value (last-wins) but keeps the key at the
    position where it was first inserted.

    Example:
        >>> table = OrderedTable()
        >>> table.set("a", 1); table.set("b", 2); table.set("a", 3)
        >>> table.keys()
        ['a', 'b']
        >>> table.get("a")
        3
    """

    def __init__(self) -> None:
        self._values: Dict[str, V] = {}
        self._order: List[str] = []

    def set(self, key: str, value: V) -> None:
        if key not in self._values:
            self._order.append(key)
        self._values[key] = value

    def get(self, key: str, default: Optional[V] = None) -> Optional[V]:
        return self._values.get(key, default)

    def keys(self) -> List[str]:
        """Keys in first-insertion order (copy)"""
        return list(self._order)

    def values(self) -> List[V]:
        return [self._values[key] for key in self._order]

    def items(self) -> List[Tuple[str, V]]:
        return [(key, self._values[key]) for key in self._order]

    def __getitem__(self, key: str) -> V:
        return self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._order))

    def __repr__(self) -> str:
        return f"OrderedTable({self.items()!r})"


@dataclass(frozen=True)
class Slice:
    """
    A named or whole-file region extracted from one script

    Attributes:
        name: Slice name, or "*" for a whole-file capture
        is_whole_file: True when the marker carried no explicit name
        indent: Indentation depth of the opening marker; content is
                de-indented by this many units
        start: 1-based line number of the first captured line
        end: 1-based line number of the closing marker (exclusive bound
             of the capture)

    Whole-file slices record the zero-based line of their marker in
    `start` and the line count of the file in `end`.
        content: Captured lines with `indent` leading units stripped
        raw_content: Captured lines as they appear in the file
                     (None for whole-file slices)
        before: File text up to and including the opening marker
        after: File text following the closing marker

    Example:
        For the file "# EXPORT demo\\nline one\\nline two\\n# /EXPORT demo":
        Slice(name="demo", is_whole_file=False, indent=0, start=2, end=4,
              content="line one\\nline two", raw_content="line one\\nline two",
              before="# EXPORT demo", after="")
    """
    name: str
    is_whole_file: bool
    indent: int
    start: int
    end: int
    content: str
    raw_content: Optional[str] = None
    before: str = ""
    after: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "all": self.is_whole_file,
            "name": self.name,
            "before": self.before,
            "after": self.after,
            "contents": self.content,
            "indent": self.indent,
            "start": self.start,
            "end": self.end,
        }
        if self.raw_content is not None:
            data["original"] = self.raw_content
        return data


@dataclass(frozen=True)
class FileRecord:
    """
    All slices found in one script

    Attributes:
        file_path: Path relative to the project root, forward slashes
        dir_name: Directory portion of file_path ("." at the root)
        file_name: Base name without extension
        resource_path: Engine resource path (e.g., "res://player/player.gd")
        slices: Slice table keyed by name, in first-discovery order
    """
    file_path: str
    dir_name: str
    file_name: str
    resource_path: str
    slices: OrderedTable[Slice] = field(default_factory=OrderedTable)

    @property
    def slice_names(self) -> List[str]:
        return self.slices.keys()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "dir_name": self.dir_name,
            "file_name": self.file_name,
            "godot_path": self.resource_path,
            "slices_names": self.slice_names,
            "slices": {name: slice_.to_dict() for name, slice_ in self.slices.items()},
        }


@dataclass(frozen=True)
class ProjectManifest:
    """
    Project-wide manifest: every file that produced at least one slice

    Attributes:
        files: FileRecord table keyed by relative path, in traversal order
    """
    files: OrderedTable[FileRecord] = field(default_factory=OrderedTable)

    @property
    def file_paths(self) -> List[str]:
        return self.files.keys()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_paths": self.file_paths,
            "files": {path: record.to_dict() for path, record in self.files.items()},
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize the manifest (non-ASCII text is kept as-is)"""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True)
class ExtractionResult:
    """
    Outcome of a whole-project extraction

    Holds either the manifest or the first error that halted the run,
    never both. A failed run carries no partial manifest.

    Attributes:
        manifest: Completed manifest on success, None on failure
        error: SliceError that stopped the run, None on success
        files_scanned: Number of candidate files found by the walk
    """
    manifest: Optional[ProjectManifest] = None
    error: Optional["SliceError"] = None
    files_scanned: int = 0

    def __post_init__(self) -> None:
        if (self.manifest is None) == (self.error is None):
            raise ValueError("ExtractionResult needs exactly one of manifest or error")

    @property
    def ok(self) -> bool:
        return self.error is None
