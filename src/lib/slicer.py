"""
Slice resolution for a single script

Turns the normalized lines of one file into Slice records.

The resolver walks the lines once, in order. Every line that matches the
opening marker grammar produces one slice:

- Whole-file marker ("# EXPORT" or "# EXPORT *"): the slice captures the
  entire file, de-indented by the marker's depth. No closing marker is
  expected.
- Named marker ("# EXPORT name"): the resolver searches forward for the
  first "# /EXPORT name" at exactly the same indentation. The lines in
  between are captured, de-indented by the opener's depth, together with
  the text before (opener included) and after (closer excluded).

A named marker without a matching closer raises MissingClosingTag. There
is no recovery: one unpaired marker fails the whole run.

Markers found inside another slice's capture are resolved as well, so
differently named slices may overlap or nest.

Example:
    >>> slices = slices_resolve("# EXPORT demo\\nline one\\nline two\\n# /EXPORT demo", "demo.gd")
    >>> slices[0].name, slices[0].start, slices[0].end
    ('demo', 2, 4)
    >>> slices[0].content
    'line one\\nline two'
"""

from typing import List, Optional

from ..models.slices import Slice
from ..models.tags import Marker
from .normalizer import text_normalize, lines_split
from .tags import tag_match, closingPattern_make
from .log import LOG


class SliceError(Exception):
    """Raised when a script's markers cannot be resolved into slices"""
    pass


class MissingClosingTag(SliceError):
    """
    Raised when a named marker has no matching closing marker

    Attributes:
        file_path: Path of the offending file (as given to the resolver)
        name: Name of the unclosed slice
    """

    def __init__(self, file_path: str, name: str):
        self.file_path = file_path
        self.name = name
        super().__init__(f'{file_path}: The slice "{name}" does not have a closing tag')


def line_dedent(line: str, indent: int) -> str:
    """
    Remove up to `indent` leading indentation units from a line

    Only indentation characters are removed; a line indented less deeply
    than `indent` (or blank) just loses the indentation it has.

    Example:
        >>> line_dedent("\\t\\tpass", 1)
        '\\tpass'
        >>> line_dedent("# note", 2)
        '# note'
    """
    stripped = 0
    while stripped < indent and stripped < len(line) and line[stripped].isspace():
        stripped += 1
    return line[stripped:]


def lines_dedent(lines: List[str], indent: int) -> str:
    """De-indent every line by `indent` units and join with newlines"""
    if not indent:
        return '\n'.join(lines)
    return '\n'.join(line_dedent(line, indent) for line in lines)


class SliceResolver:
    """
    Resolver for the markers of one normalized file

    Handles:
    - Whole-file captures (no name or "*")
    - Named captures closed at the same indentation depth
    - Indentation stripping relative to the opener
    - Error reporting naming the file and the unclosed slice
    """

    def __init__(
        self,
        lines: List[str],
        file_path: str,
        keyword: Optional[str] = None,
        whole_file_name: Optional[str] = None,
    ):
        """
        Initialize resolver with the file's lines

        Args:
            lines: Normalized lines of the file (see lines_split)
            file_path: Path used in error messages and logs
            keyword: Marker keyword; defaults to settings.keyword
            whole_file_name: Name of whole-file slices; defaults to settings
        """
        self.lines = lines
        self.file_path = file_path
        self.keyword = keyword
        self.whole_file_name = whole_file_name

    def resolve(self) -> List[Slice]:
        """
        Resolve every marker of the file, in line order

        Returns:
            One Slice per marker, in discovery order (duplicates included;
            de-duplication is the file aggregator's job)

        Raises:
            MissingClosingTag: If a named marker is never closed
        """
        slices: List[Slice] = []

        for line_number, line in enumerate(self.lines):
            marker = tag_match(
                line,
                line_number,
                keyword=self.keyword,
                whole_file_name=self.whole_file_name,
            )
            if marker is None:
                continue

            LOG(
                f"{self.file_path}:{line_number + 1}: marker '{marker.name}' (indent {marker.indent})",
                level=3,
            )
            slices.append(self.marker_resolve(marker))

        return slices

    def marker_resolve(self, marker: Marker) -> Slice:
        """Build the Slice for one opening marker"""
        if marker.is_whole_file:
            return self.wholeFile_capture(marker)
        return self.namedSlice_capture(marker)

    def wholeFile_capture(self, marker: Marker) -> Slice:
        """
        Capture the entire file for a whole-file marker

        The capture covers every line, including lines before the marker
        and the marker itself; only the marker's depth is stripped.
        `start` records the zero-based line of the marker and `end` the
        number of lines in the file.
        """
        return Slice(
            name=marker.name,
            is_whole_file=True,
            indent=marker.indent,
            start=marker.line,
            end=len(self.lines),
            content=lines_dedent(self.lines, marker.indent),
        )

    def namedSlice_capture(self, marker: Marker) -> Slice:
        """
        Capture the lines between a named opener and its closer

        Raises:
            MissingClosingTag: If no closer exists at the opener's depth
        """
        end = self.closer_find(marker)
        captured = self.lines[marker.line + 1:end]

        return Slice(
            name=marker.name,
            is_whole_file=False,
            indent=marker.indent,
            start=marker.line + 2,
            end=end + 1,
            content=lines_dedent(captured, marker.indent),
            raw_content='\n'.join(captured),
            before='\n'.join(self.lines[:marker.line + 1]),
            after='\n'.join(self.lines[end + 1:]),
        )

    def closer_find(self, marker: Marker) -> int:
        """
        Find the closing marker of a named opener

        Scans forward from the line after the opener. A closer at a
        different indentation depth is not a match.

        Args:
            marker: The opening marker

        Returns:
            Zero-based index of the closing marker line

        Raises:
            MissingClosingTag: If end of file is reached first
        """
        pattern = closingPattern_make(marker)

        for index in range(marker.line + 1, len(self.lines)):
            if pattern.match(self.lines[index]):
                return index

        raise MissingClosingTag(self.file_path, marker.name)


def slices_resolve(
    text: str,
    file_path: str,
    keyword: Optional[str] = None,
    whole_file_name: Optional[str] = None,
    unit: Optional[str] = None,
) -> List[Slice]:
    """
    Normalize raw file text and resolve its slices

    Args:
        text: Raw file contents
        file_path: Path used in error messages
        keyword: Marker keyword; defaults to settings.keyword
        whole_file_name: Name of whole-file slices; defaults to settings
        unit: Indentation unit; defaults to settings.indent_unit

    Returns:
        Slices in discovery order

    Raises:
        MissingClosingTag: If a named marker is never closed
    """
    lines = lines_split(text_normalize(text, unit))
    return SliceResolver(
        lines, file_path, keyword=keyword, whole_file_name=whole_file_name
    ).resolve()
