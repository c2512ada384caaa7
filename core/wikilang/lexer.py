from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple

from core.wikilang.tokens import (
    BOLD_MARK,
    EMPHASIS_MARK,
    END_MARK,
    INTERRUPTERS,
    LITERAL_TEXT_CLOSE,
    LITERAL_TEXT_OPEN,
    ORDERED_LIST_ITEM_MARK,
    TAG_CLOSE,
    TAG_OPEN,
    UNORDERED_LIST_ITEM_MARK,
    WIKILINK_CLOSE,
    WIKILINK_OPEN,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)

# A handler receives the character that selected it and returns the
# token plus whether the end mark was reached.
TokenHandler = Callable[[str], Tuple[Token, bool]]


class Lexer:
    """Convert a stream of characters into a stream of tokens.

    The stream ends at the first END_MARK character (or when the source
    is exhausted), after which a single END_OF_FILE token is produced.

    Text tokens are separated by whitespace. Bold, emphasis and list
    item delimiters are single-character tokens. Literal text, wiki
    links and embedded HTML tags consume everything from the opening
    character to the closing one.

    Each instance owns its dispatch table and its pending character, so
    separate lexers never share state.
    """

    def __init__(self, source: Iterable[str]):
        self._chars: Iterator[str] = iter(source)
        self._pending: Optional[str] = None
        self._handlers: Dict[str, TokenHandler] = {
            BOLD_MARK: self._single_char_token(TokenKind.BOLD_DELIMITER),
            EMPHASIS_MARK: self._single_char_token(TokenKind.EMPHASIS_DELIMITER),
            UNORDERED_LIST_ITEM_MARK: self._single_char_token(TokenKind.UNORDERED_LIST_ITEM),
            ORDERED_LIST_ITEM_MARK: self._single_char_token(TokenKind.ORDERED_LIST_ITEM),
            LITERAL_TEXT_OPEN: self._lex_literal_text,
            WIKILINK_OPEN: self._lex_wiki_link,
            TAG_OPEN: self._lex_tag,
            "\n": self._lex_new_line,
        }

    def __iter__(self) -> Iterator[Token]:
        return self.lex()

    def lex(self) -> Iterator[Token]:
        """Yield tokens until the end mark, then one END_OF_FILE token."""

        eof = False
        c = self._read()
        while not eof and c != END_MARK:
            if c == "\n" or not c.isspace():
                handler = self._handlers.get(c, self._lex_text)
                token, eof = handler(c)
                yield token

            if self._pending is not None:
                c, self._pending = self._pending, None
            elif not eof:
                c = self._read()

        yield Token(TokenKind.END_OF_FILE)

    def _read(self) -> str:
        return next(self._chars, END_MARK)

    def _single_char_token(self, kind: TokenKind) -> TokenHandler:
        def handler(c: str) -> Tuple[Token, bool]:
            return Token(kind, c), False

        return handler

    def _lex_text(self, first: str) -> Tuple[Token, bool]:
        value = [first]
        c = self._read()
        while c != END_MARK and not c.isspace() and c not in INTERRUPTERS:
            value.append(c)
            c = self._read()

        if c in INTERRUPTERS:
            self._pending = c

        return Token(TokenKind.TEXT, "".join(value)), c == END_MARK

    def _lex_literal_text(self, _open: str) -> Tuple[Token, bool]:
        nesting = 0
        value = []
        c = self._read()
        while (nesting > 0 or c != LITERAL_TEXT_CLOSE) and c != END_MARK:
            if c == LITERAL_TEXT_OPEN:
                nesting += 1
            elif c == LITERAL_TEXT_CLOSE:
                nesting -= 1

            value.append(c)
            c = self._read()

        if c == END_MARK:
            logger.warning("Unterminated literal text at end of input")
        return Token(TokenKind.LITERAL_TEXT, "".join(value)), c == END_MARK

    def _lex_wiki_link(self, _open: str) -> Tuple[Token, bool]:
        value = []
        c = self._read()
        while c != WIKILINK_CLOSE and c != END_MARK:
            value.append(c)
            c = self._read()

        if c == END_MARK:
            logger.warning("Unterminated wiki link at end of input")
        return Token(TokenKind.WIKI_LINK, "".join(value)), c == END_MARK

    def _lex_tag(self, open_char: str) -> Tuple[Token, bool]:
        value = [open_char]
        c = self._read()
        while c != TAG_CLOSE and c != END_MARK:
            value.append(c)
            c = self._read()

        if c == END_MARK:
            logger.warning("Unterminated HTML tag at end of input")
        else:
            value.append(TAG_CLOSE)
        return Token(TokenKind.TAG, "".join(value)), c == END_MARK

    def _lex_new_line(self, _newline: str) -> Tuple[Token, bool]:
        indent = 0
        c = self._read()
        while c == " ":
            indent += 1
            c = self._read()

        if c != END_MARK:
            self._pending = c

        return Token(TokenKind.NEW_LINE, "", indent), c == END_MARK
