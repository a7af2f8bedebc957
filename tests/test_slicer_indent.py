"""
Indentation tests - de-indentation and reconstruction

Verifies that:
- content is raw_content with the opener's depth stripped
- re-indenting content reproduces raw_content
- before + raw_content + closer + after rebuilds the normalized file
"""

import pytest

from gdslice.lib.normalizer import text_normalize, lines_split
from gdslice.lib.slicer import slices_resolve, line_dedent


SPACE_INDENTED = (
    "func _ready():\n"
    "    # EXPORT body\n"
    "    var x = 1\n"
    "    if x:\n"
    "        print(x)\n"
    "    # /EXPORT body\n"
    "    pass\n"
)

TAB_INDENTED = (
    "class_name Player\n"
    "\n"
    "func move(delta):\n"
    "\t# EXPORT move\n"
    "\tvar velocity = Vector2.ZERO\n"
    "\n"
    "\tif Input.is_action_pressed(\"ui_right\"):\n"
    "\t\tvelocity.x += 1\n"
    "\t# /EXPORT move\n"
    "\treturn velocity\n"
)


class TestSpaceIndentation:
    """Leading spaces are converted one unit per space"""

    def test_indent_counts_units(self):
        """Four spaces before the marker give depth 4"""
        body = slices_resolve(SPACE_INDENTED, "player.gd")[0]
        assert body.indent == 4

    def test_content_dedented(self):
        body = slices_resolve(SPACE_INDENTED, "player.gd")[0]
        assert body.content == "var x = 1\nif x:\n\t\t\t\tprint(x)"

    def test_raw_content_normalized(self):
        """Raw capture keeps the (normalized) indentation"""
        body = slices_resolve(SPACE_INDENTED, "player.gd")[0]
        assert body.raw_content == "\t\t\t\tvar x = 1\n\t\t\t\tif x:\n\t\t\t\t\t\t\t\tprint(x)"

    def test_boundaries(self):
        body = slices_resolve(SPACE_INDENTED, "player.gd")[0]

        assert body.start == 3
        assert body.end == 6
        assert body.before == "func _ready():\n\t\t\t\t# EXPORT body"
        assert body.after == "\t\t\t\tpass\n"


class TestTabIndentation:
    """Tab-indented sources are used as they are"""

    def test_content(self):
        move = slices_resolve(TAB_INDENTED, "player.gd")[0]

        assert move.indent == 1
        assert move.content == (
            "var velocity = Vector2.ZERO\n"
            "\n"
            "if Input.is_action_pressed(\"ui_right\"):\n"
            "\tvelocity.x += 1"
        )

    def test_blank_lines_kept(self):
        """Blank lines inside a capture stay blank"""
        move = slices_resolve(TAB_INDENTED, "player.gd")[0]
        assert move.content.split("\n")[1] == ""


class TestRoundTrip:
    """Content, raw capture and context fit back together"""

    @pytest.mark.parametrize("source", [SPACE_INDENTED, TAB_INDENTED])
    def test_reindent_reproduces_raw(self, source):
        """Prepending indent units to each content line gives raw_content"""
        slice_ = slices_resolve(source, "player.gd")[0]
        reindented = "\n".join(
            ("\t" * slice_.indent + line) if line else line
            for line in slice_.content.split("\n")
        )
        assert reindented == slice_.raw_content

    @pytest.mark.parametrize("source", [SPACE_INDENTED, TAB_INDENTED])
    def test_context_reconstructs_file(self, source):
        """before + raw + closer + after is the normalized file"""
        normalized = text_normalize(source)
        lines = lines_split(normalized)
        slice_ = slices_resolve(source, "player.gd")[0]
        closer = lines[slice_.end - 1]

        rebuilt = "\n".join([slice_.before, slice_.raw_content, closer, slice_.after])
        assert rebuilt == normalized


class TestClosingDepth:
    """The closer must sit at the opener's depth"""

    def test_deeper_closer_skipped(self):
        """A closer at another depth is captured as ordinary text"""
        source = "\t# EXPORT a\n\tx\n# /EXPORT a\n\ty\n\t# /EXPORT a"
        slice_ = slices_resolve(source, "a.gd")[0]

        assert slice_.content == "x\n# /EXPORT a\ny"
        assert slice_.raw_content == "\tx\n# /EXPORT a\n\ty"


class TestLineDedent:
    """Test single-line indentation stripping"""

    def test_strips_exactly_indent(self):
        assert line_dedent("\t\t\tpass", 2) == "\tpass"

    def test_shallower_line(self):
        """Only existing indentation is removed"""
        assert line_dedent("\tpass", 3) == "pass"

    def test_unindented_line(self):
        """Text is never cut"""
        assert line_dedent("# note", 2) == "# note"

    def test_zero_indent(self):
        assert line_dedent("\tpass", 0) == "\tpass"


class TestTwoSpaceMarker:
    """Two leading spaces give depth 2"""

    def test_two_space_indent(self):
        slice_ = slices_resolve("  # EXPORT a\n  x\n    y\n  # /EXPORT a\n", "a.gd")[0]

        assert slice_.indent == 2
        assert slice_.content == "x\n\t\ty"
        assert slice_.raw_content == "\t\tx\n\t\t\t\ty"
