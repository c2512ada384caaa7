from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

DEFAULT_WRAP_WIDTH = 80


class CodeWriterError(RuntimeError):
    """Raised when a code generator misuses its writer."""


class CodeWriter(ABC):
    """Lets a code generator write structured text with per-line indentation."""

    @abstractmethod
    def write(self, text: str) -> int:
        pass

    @abstractmethod
    def fresh_line(self) -> None:
        """Write a newline unless already at the start of a line."""
        pass

    @abstractmethod
    def new_line(self) -> None:
        """Write a newline unconditionally."""
        pass

    @abstractmethod
    def indent(self) -> None:
        """Write the indentation spaces when at the start of a line."""
        pass

    @abstractmethod
    def change_indentation(self, delta: int) -> None:
        pass

    @abstractmethod
    def literal_text(self, literal: bool) -> None:
        """Write text without wrapping or dropping whitespace while True."""
        pass


class StandardCodeWriter(CodeWriter):
    """Word-wrapping CodeWriter on top of a text stream.

    Text is wrapped greedily at `wrap_width`; a word is never split, and
    the whitespace where a line is broken is dropped. The column count
    starts after the indentation of the line, and every line break is
    followed by the current indentation.
    """

    def __init__(self, out: TextIO, *, wrap_width: int = DEFAULT_WRAP_WIDTH):
        if wrap_width < 2:
            raise ValueError(f"wrap_width must be at least 2, got {wrap_width}")

        self._out = out
        self._on_new_line = True
        self._indentation = 0
        self._position = 0
        self._max_position = int(wrap_width)
        self._literal = False

    @property
    def indentation(self) -> int:
        return self._indentation

    def fresh_line(self) -> None:
        if not self._on_new_line:
            self.new_line()

    def new_line(self) -> None:
        self._basic_write("\n")

    def indent(self) -> None:
        if self._on_new_line:
            # Deeper indentation than the line width would never settle.
            self._basic_write(" " * min(self._indentation, self._max_position - 1))

    def change_indentation(self, delta: int) -> None:
        if self._indentation + delta < 0:
            raise CodeWriterError(
                f"CodeWriter indentation < 0 (level {self._indentation}, change {delta})"
            )
        self._indentation += delta

    def literal_text(self, literal: bool) -> None:
        self._literal = bool(literal)

    def write(self, text: str) -> int:
        if self._literal:
            self._out.write(text)
            return len(text)

        length = len(text)
        last = 0
        while last < length:
            # Fill the rest of the line, then run on to the end of the word.
            nxt = last + self._max_position - self._position
            while nxt < length and not text[nxt].isspace():
                nxt += 1
            nxt = min(nxt, length)

            self._basic_write(text[last:nxt])

            last = nxt
            while last < length and text[last].isspace():
                last += 1

        return length

    def _basic_write(self, text: str) -> None:
        self._out.write(text)
        if not text:
            return

        self._on_new_line = text.endswith("\n")
        if self._on_new_line:
            self._position = 0

        if len(text) + self._position >= self._max_position:
            self.new_line()
        elif self._on_new_line:
            self.indent()
            self._position = 0
        else:
            self._position += len(text)
