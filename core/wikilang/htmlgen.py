from __future__ import annotations

import io
import unicodedata
from typing import Iterable, List

from core.wikilang.code_writer import DEFAULT_WRAP_WIDTH, CodeWriter, StandardCodeWriter
from core.wikilang.nodes import (
    LIST_ITEM,
    ORDERED_LIST,
    PARAGRAPH,
    PREFORMATTED,
    UNORDERED_LIST,
    ParseTree,
    TagNode,
    TextNode,
    Visitor,
)

# Tags laid out on their own lines, with their content indented.
BLOCK_TAGS = frozenset({PARAGRAPH, PREFORMATTED, UNORDERED_LIST, LIST_ITEM, ORDERED_LIST})

PARAGRAPH_SEPARATOR = "\n\n"


def _is_punct(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


class HtmlGenVisitor(Visitor):
    """Writes one parse tree as indented HTML."""

    def __init__(self, writer: CodeWriter):
        self.writer = writer
        self.last_was_text = False

    def visit_tag_begin(self, node: TagNode) -> None:
        is_block = node.tag in BLOCK_TAGS
        if is_block:
            self.writer.fresh_line()
        elif self.last_was_text:
            self.writer.write(" ")

        self.writer.write(f"<{node.tag}")
        for key, value in node.attributes.items():
            self.writer.write(f' {key}="{value}"')
        self.writer.write(">")

        if is_block:
            self.writer.change_indentation(2)
            self.writer.fresh_line()
            if node.tag == PREFORMATTED:
                self.writer.literal_text(True)
        self.last_was_text = False

    def visit_tag_end(self, node: TagNode) -> None:
        is_block = node.tag in BLOCK_TAGS
        if is_block:
            if node.tag == PREFORMATTED:
                self.writer.literal_text(False)
            self.writer.change_indentation(-2)
            self.writer.fresh_line()

        self.writer.write(f"</{node.tag}>")

        if is_block:
            self.writer.new_line()
            self.last_was_text = False

    def visit_text(self, node: TextNode) -> None:
        text = node.text
        if not text:
            return

        if self.last_was_text and not _is_punct(text[0]):
            self.writer.write(" ")

        self.writer.write(text)
        self.last_was_text = not _is_punct(text[-1])


def generate_tree_string(tree: ParseTree, *, wrap_width: int = DEFAULT_WRAP_WIDTH) -> str:
    buf = io.StringIO()
    tree.visit(HtmlGenVisitor(StandardCodeWriter(buf, wrap_width=wrap_width)))
    return buf.getvalue()


class HtmlGen:
    """Convert a stream of parse trees to HTML.

    Trees are read until the empty end-of-input tree; each one becomes an
    HTML fragment and fragments are separated by a blank line.
    """

    def __init__(self, trees: Iterable[ParseTree], *, wrap_width: int = DEFAULT_WRAP_WIDTH):
        self._trees = trees
        self._wrap_width = wrap_width

    def generate(self) -> str:
        fragments: List[str] = []
        for tree in self._trees:
            if not tree:
                break
            fragments.append(generate_tree_string(tree, wrap_width=self._wrap_width))
        return PARAGRAPH_SEPARATOR.join(fragments)
