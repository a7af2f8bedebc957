"""
Marker comment recognition

A marker is a comment line of the form (after normalization):

    <indent># EXPORT [name]

and a named slice is closed by a line at exactly the same indentation:

    <indent># /EXPORT name

Opening grammar (the keyword is configurable, EXPORT by default):

    ^(\\s*)#\\s(EXPORT)(?:\\s+(.*?))?(?:\\s|$)

Group 1 is the indentation prefix (only its length matters for depth),
group 3 the optional name. The name stops at the first whitespace, so
"# EXPORT intro trailing words" opens slice "intro". A missing name, or
"*", marks a whole-file capture.
"""

import re
from functools import lru_cache
from typing import Optional, Pattern

from ..models.tags import Marker

WHOLE_FILE_STAR = "*"


@lru_cache(maxsize=None)
def tagPattern_make(keyword: str = "EXPORT") -> Pattern[str]:
    """
    Compile the opening marker pattern for a keyword

    Args:
        keyword: Marker keyword, matched literally

    Returns:
        Compiled pattern with groups (indent, keyword, name)
    """
    return re.compile(r'^(\s*)#\s(' + re.escape(keyword) + r')(?:\s+(.*?))?(?:\s|$)')


def tag_match(
    line: str,
    line_number: int = 0,
    keyword: Optional[str] = None,
    whole_file_name: Optional[str] = None,
) -> Optional[Marker]:
    """
    Recognize an opening marker on one normalized line

    Args:
        line: A single line, without its line terminator
        line_number: Zero-based index of the line (recorded on the Marker)
        keyword: Marker keyword; defaults to settings.keyword
        whole_file_name: Name given to whole-file markers; defaults to settings

    Returns:
        Marker if the line matches the grammar, None otherwise

    Example:
        >>> tag_match("\\t# EXPORT move", 3).name
        'move'
        >>> tag_match("# EXPORT").is_whole_file
        True
        >>> tag_match("# /EXPORT move") is None
        True
    """
    from ..config import appsettings

    keyword = keyword or appsettings.keyword
    whole_file_name = whole_file_name or appsettings.whole_file_name

    match = tagPattern_make(keyword).match(line)
    if not match:
        return None

    indent_prefix, matched_keyword, name = match.groups()
    is_whole_file = not name or name in (WHOLE_FILE_STAR, whole_file_name)

    return Marker(
        indent_prefix=indent_prefix,
        keyword=matched_keyword,
        name=whole_file_name if is_whole_file else name,
        line=line_number,
        is_whole_file=is_whole_file,
    )


def closingPattern_make(marker: Marker) -> Pattern[str]:
    """
    Compile the closing marker pattern for a named opener

    The closer must repeat the opener's indentation prefix verbatim,
    then "# /<keyword> <name>", optionally followed by whitespace and
    nothing else. The name is matched literally.

    Args:
        marker: The opening marker

    Returns:
        Compiled pattern, used with .match() on each candidate line

    Example:
        For Marker(indent_prefix="\\t", keyword="EXPORT", name="move", ...):
        matches "\\t# /EXPORT move" and "\\t# /EXPORT move  ",
        rejects "# /EXPORT move" and "\\t# /EXPORT move_fast"
    """
    return re.compile(
        '^'
        + re.escape(marker.indent_prefix)
        + '# /'
        + re.escape(marker.keyword)
        + ' '
        + re.escape(marker.name)
        + r'\s*$'
    )
