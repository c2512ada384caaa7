from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenKind(IntEnum):
    """Types of tokens that the lexer may generate."""

    TEXT = 0  # Standard text
    BOLD_DELIMITER = 1  # Beginning or end of boldness
    EMPHASIS_DELIMITER = 2  # Beginning or end of emphasis
    UNORDERED_LIST_ITEM = 3  # Beginning of an item in an unordered list
    ORDERED_LIST_ITEM = 4  # Beginning of an item in an ordered list
    LITERAL_TEXT = 5  # Literal, preformatted text
    WIKI_LINK = 6  # Wiki markup for links
    TAG = 7  # Embedded HTML markup
    NEW_LINE = 8  # New line (with indentation of next line)
    END_OF_FILE = 9  # Special token for the end of input


# Characters that switch token types. Text tokens are additionally
# separated by whitespace.
BOLD_MARK = "*"
EMPHASIS_MARK = "/"
UNORDERED_LIST_ITEM_MARK = "-"
ORDERED_LIST_ITEM_MARK = "#"
WIKILINK_OPEN = "["
WIKILINK_CLOSE = "]"
LITERAL_TEXT_OPEN = "{"
LITERAL_TEXT_CLOSE = "}"
TAG_OPEN = "<"
TAG_CLOSE = ">"

# Marks the end of the character stream; must not appear in content.
END_MARK = "\0"

# Characters that end a text token and start the next one.
INTERRUPTERS = frozenset(
    {WIKILINK_OPEN, LITERAL_TEXT_OPEN, BOLD_MARK, EMPHASIS_MARK, TAG_OPEN, "\n"}
)

CONTENT_KINDS = frozenset(
    {
        TokenKind.TEXT,
        TokenKind.BOLD_DELIMITER,
        TokenKind.EMPHASIS_DELIMITER,
        TokenKind.UNORDERED_LIST_ITEM,
        TokenKind.ORDERED_LIST_ITEM,
        TokenKind.LITERAL_TEXT,
        TokenKind.WIKI_LINK,
        TokenKind.TAG,
    }
)


@dataclass(frozen=True)
class Token:
    """An atomic element of the wiki language.

    `indent` is the number of spaces after a NEW_LINE token. Once the
    parser has propagated indentation, every token carries the
    indentation of the line it appears on.
    """

    kind: TokenKind
    text: str = ""
    indent: int = 0

    def is_list_item(self) -> bool:
        return self.kind in (TokenKind.UNORDERED_LIST_ITEM, TokenKind.ORDERED_LIST_ITEM)
