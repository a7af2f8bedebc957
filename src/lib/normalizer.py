"""
Line normalization for scanned scripts

Brings raw file text into the canonical form the tag matcher and slice
resolver operate on:

1. A leading byte order mark is dropped
2. Line endings: "\\r\\n" and bare "\\r" become "\\n"
3. Indentation: on every line, a leading run of two or more spaces is
   replaced, character for character, by indentation units (tabs by
   default). Four leading spaces become four units, not one; a single
   leading space is left untouched.

Example:
    >>> text_normalize("func a():\\r\\n    pass\\r\\n")
    'func a():\\n\\t\\t\\t\\tpass\\n'
"""

import re
from typing import List, Optional

LINE_ENDINGS = re.compile(r'\r\n|\r')
LEADING_SPACES = re.compile(r'^( {2,})', re.MULTILINE)
BYTE_ORDER_MARK = '\ufeff'


def text_normalize(text: str, unit: Optional[str] = None) -> str:
    """
    Normalize line endings and leading space runs

    Args:
        text: Raw file contents
        unit: Indentation unit character; defaults to settings.indent_unit

    Returns:
        Normalized text, ready for lines_split()
    """
    if unit is None:
        from ..config import appsettings
        unit = appsettings.indent_unit

    if text.startswith(BYTE_ORDER_MARK):
        text = text[1:]

    text = LINE_ENDINGS.sub('\n', text)
    return LEADING_SPACES.sub(lambda match: unit * len(match.group(1)), text)


def lines_split(text: str) -> List[str]:
    """Split normalized text into lines; a trailing newline yields a final empty line"""
    return text.split('\n')
