"""Tests for the description tag parser."""

from openapi_to_knife4j.comments import CommentParser


def test_plain_text_has_no_tags():
    """Test that text without tags is returned unchanged."""
    parsed = CommentParser().parse("plain text")

    assert parsed.tags == {}
    assert parsed.text == "plain text"
    assert not parsed.has_tag("description")
    assert parsed.get("description") is None


def test_empty_and_missing_text():
    """Test that empty input yields an empty result."""
    for text in ("", None):
        parsed = CommentParser().parse(text)
        assert parsed.tags == {}
        assert parsed.text == ""


def test_description_tag_with_surrounding_text():
    """Test that a description tag is found regardless of the text around it."""
    text = "Widget endpoints.\ndescription: Creates and lists widgets\nMore notes."
    parsed = CommentParser().parse(text)

    assert parsed.has_tag("description")
    assert parsed.get("description") == "Creates and lists widgets"
    assert parsed.text == "Widget endpoints.\nMore notes."


def test_multiple_tags():
    """Test parsing several tags, with and without the @ prefix."""
    text = "description: Widget API\n@version: 2\nAuthor : Jane"
    parsed = CommentParser().parse(text)

    assert parsed.get("description") == "Widget API"
    assert parsed.get("version") == "2"
    assert parsed.get("author") == "Jane"
    assert parsed.text == ""


def test_continuation_lines():
    """Test that indented lines extend the previous tag."""
    text = "description: first line\n  second line\nplain"
    parsed = CommentParser().parse(text)

    assert parsed.get("description") == "first line\nsecond line"
    assert parsed.text == "plain"


def test_malformed_tags_are_plain_text():
    """Test that lines that only look like tags stay in the text."""
    text = "description without colon\nunknown: value\n@: nothing"
    parsed = CommentParser().parse(text)

    assert parsed.tags == {}
    assert parsed.text == text


def test_absent_tag_returns_default():
    """Test the lookup of a missing tag."""
    parsed = CommentParser().parse("summary: short")

    assert parsed.get("description", "none") == "none"
    assert parsed.get("SUMMARY") == "short"


def test_custom_tag_names():
    """Test restricting the recognized tags."""
    parsed = CommentParser(tag_names=["owner"]).parse("owner: team-a\ndescription: x")

    assert parsed.get("owner") == "team-a"
    assert not parsed.has_tag("description")
    assert parsed.text == "description: x"


def test_tag_in_middle_of_line_is_plain_text():
    """Test that tags are only recognized at the start of a line."""
    text = "Widget endpoints. description: Creates widgets"
    parsed = CommentParser().parse(text)

    assert not parsed.has_tag("description")
    assert parsed.text == text
