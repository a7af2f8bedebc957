"""
Tag matcher data models

Type-safe structure for a recognized marker comment.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Marker:
    """
    A single line recognized as an opening marker

    Returned by tag_match() when a normalized line matches the marker
    grammar (e.g., "\\t# EXPORT intro").

    Attributes:
        indent_prefix: Leading whitespace of the line, kept verbatim so the
                       closing marker can be required at the same depth
        keyword: Marker keyword that matched (e.g., "EXPORT")
        name: Slice name, or the whole-file name ("*") when none was given
        line: Zero-based index of the marker line in the file
        is_whole_file: True when no name (or "*") was given

    Example:
        For line "\\t\\t# EXPORT move" at index 7:
        Marker(indent_prefix="\\t\\t", keyword="EXPORT", name="move",
               line=7, is_whole_file=False)
    """
    indent_prefix: str
    keyword: str
    name: str
    line: int
    is_whole_file: bool

    @property
    def indent(self) -> int:
        """Indentation depth, counted in units (not inspected for type)"""
        return len(self.indent_prefix)
