"""
Tag matcher tests

Tests the opening marker grammar and the closing marker pattern.
"""

import pytest

from gdslice.lib.tags import tag_match, closingPattern_make


class TestOpeningMarker:
    """Test recognition of opening markers"""

    def test_named_marker(self):
        """Plain named marker at column 0"""
        marker = tag_match("# EXPORT demo", 4)

        assert marker is not None
        assert marker.name == "demo"
        assert marker.keyword == "EXPORT"
        assert marker.indent == 0
        assert marker.line == 4
        assert marker.is_whole_file is False

    def test_indented_marker(self):
        """Indentation depth counts leading units"""
        marker = tag_match("\t\t# EXPORT move")

        assert marker.indent == 2
        assert marker.indent_prefix == "\t\t"
        assert marker.name == "move"

    def test_name_stops_at_whitespace(self):
        """Words after the name are ignored"""
        marker = tag_match("# EXPORT intro this part is a comment")
        assert marker.name == "intro"

    def test_tab_after_hash(self):
        """Any single whitespace character may follow the hash"""
        marker = tag_match("#\tEXPORT demo")
        assert marker.name == "demo"

    def test_custom_keyword(self):
        """Keyword can be overridden"""
        marker = tag_match("# SNIPPET demo", keyword="SNIPPET")
        assert marker.name == "demo"
        assert tag_match("# EXPORT demo", keyword="SNIPPET") is None


class TestWholeFileMarker:
    """Test markers without an explicit name"""

    @pytest.mark.parametrize("line", ["# EXPORT", "# EXPORT *", "# EXPORT   ", "\t# EXPORT"])
    def test_whole_file(self, line):
        """No name, blank name or '*' mean whole file"""
        marker = tag_match(line)

        assert marker is not None
        assert marker.is_whole_file is True
        assert marker.name == "*"

    def test_star_with_custom_whole_file_name(self):
        """'*' stays a whole-file marker when another name is configured"""
        marker = tag_match("# EXPORT *", whole_file_name="ALL")

        assert marker.is_whole_file is True
        assert marker.name == "ALL"

    def test_custom_whole_file_name(self):
        """The configured name is recognized as well"""
        assert tag_match("# EXPORT ALL", whole_file_name="ALL").is_whole_file is True


class TestNonMarkers:
    """Lines that must not be recognized"""

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "var x = 1",
            "# just a comment",
            "#EXPORT demo",
            "# EXPORTED demo",
            "# export demo",
            "# /EXPORT demo",
            "var x = 1 # EXPORT demo",
        ],
    )
    def test_not_a_marker(self, line):
        assert tag_match(line) is None


class TestClosingPattern:
    """Test the closing marker built from an opener"""

    def test_same_indent(self):
        """Closer at the opener's depth matches, trailing whitespace allowed"""
        pattern = closingPattern_make(tag_match("\t# EXPORT move"))

        assert pattern.match("\t# /EXPORT move")
        assert pattern.match("\t# /EXPORT move   ")

    def test_other_indent(self):
        """Closer at another depth does not match"""
        pattern = closingPattern_make(tag_match("\t# EXPORT move"))

        assert not pattern.match("# /EXPORT move")
        assert not pattern.match("\t\t# /EXPORT move")

    def test_name_must_match_exactly(self):
        """Other names and trailing words do not match"""
        pattern = closingPattern_make(tag_match("# EXPORT move"))

        assert not pattern.match("# /EXPORT move_fast")
        assert not pattern.match("# /EXPORT mov")
        assert not pattern.match("# /EXPORT move now")
        assert not pattern.match("# /EXPORT  move")

    def test_name_matched_literally(self):
        """Regex characters in a name have no special meaning"""
        pattern = closingPattern_make(tag_match("# EXPORT a.b"))

        assert pattern.match("# /EXPORT a.b")
        assert not pattern.match("# /EXPORT axb")
