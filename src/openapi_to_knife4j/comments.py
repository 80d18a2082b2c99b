"""
Parser for structured tags embedded in free-text descriptions.

A tag is a line that starts with a recognized tag name, optionally prefixed
with ``@``, followed by a colon and the value::

    Widget endpoints.
    description: Creates and lists widgets
    @version: 2
      (indented lines continue the previous tag)

Tags are only recognized at the start of a line; a tag name in the middle of
a sentence (``Widgets. description: ...``) is plain text. Everything that is
not a tag, including unknown names and lines that only look like tags, is
kept as plain text.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional

DEFAULT_TAGS = frozenset(
    {
        "description",
        "summary",
        "title",
        "version",
        "author",
        "contact",
        "license",
        "deprecated",
    }
)

_TAG_LINE = re.compile(r"^@?(?P<name>[A-Za-z][\w-]*)\s*:\s?(?P<value>.*)$")


@dataclass(frozen=True)
class ParsedComment:
    """Result of parsing a description: tag values plus the residual text."""

    text: str = ""
    tags: Dict[str, str] = field(default_factory=dict)

    def has_tag(self, name: str) -> bool:
        return name.lower() in self.tags

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.tags.get(name.lower(), default)


class CommentParser:
    """Splits free text into recognized tags and plain text."""

    def __init__(self, tag_names: Iterable[str] = DEFAULT_TAGS):
        self.tag_names: FrozenSet[str] = frozenset(name.lower() for name in tag_names)

    def _match_tag(self, line: str) -> Optional[re.Match]:
        match = _TAG_LINE.match(line.strip())
        if match and match.group("name").lower() in self.tag_names:
            return match
        return None

    def parse(self, text: Optional[str]) -> ParsedComment:
        """Parse ``text`` into a ParsedComment.

        Args:
            text: Free text, possibly empty or None

        Returns:
            The recognized tags (lower-cased names) and the remaining text
        """
        if not text:
            return ParsedComment()

        tags: Dict[str, str] = {}
        plain: List[str] = []
        current: Optional[str] = None

        for line in text.splitlines():
            if current is not None and line[:1].isspace() and line.strip():
                tags[current] = f"{tags[current]}\n{line.strip()}".strip()
                continue

            match = self._match_tag(line)
            if match:
                current = match.group("name").lower()
                tags[current] = match.group("value").strip()
            else:
                current = None
                plain.append(line)

        return ParsedComment(text="\n".join(plain).strip(), tags=tags)
