from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple
from urllib.parse import quote_plus

from core.doclink.static import StaticDocLinkResolver
from core.ports.doclink_port import DocLinkResolver
from core.wikilang.nodes import (
    BOLD,
    EMPHASIS,
    LINK,
    LIST_ITEM,
    LITERAL,
    ORDERED_LIST,
    PARAGRAPH,
    PREFORMATTED,
    UNORDERED_LIST,
    ParseNode,
    ParseTree,
    TagNode,
    TextNode,
)
from core.wikilang.tokens import CONTENT_KINDS, Token, TokenKind
from core.wikilang.wikicase import wiki_case

logger = logging.getLogger(__name__)

# Decides whether a token ends the current level, and whether that
# token is consumed by it.
EndPredicate = Callable[[Token], Tuple[bool, bool]]

DOC_LINK_PREFIX = "doc"


def indent_tokens(tokens: Iterable[Token]) -> List[Token]:
    """Give every token the indentation of the line it is on.

    NEW_LINE tokens are dropped once their indentation has been applied.
    """

    indented: List[Token] = []
    current = 0
    for token in tokens:
        if token.kind == TokenKind.NEW_LINE:
            current = token.indent
        else:
            indented.append(replace(token, indent=current))
    return indented


def combine_tokens(tokens: Iterable[Token]) -> List[Token]:
    """Merge runs of text and embedded tags on the same line level."""

    combined: List[Token] = []
    run: Optional[Token] = None

    for token in tokens:
        is_text = token.kind in (TokenKind.TEXT, TokenKind.TAG)
        if run is not None and (token.indent != run.indent or not is_text):
            combined.append(run)
            run = None

        if is_text:
            if run is None:
                run = Token(TokenKind.TEXT, token.text, token.indent)
            else:
                run = replace(run, text=run.text + " " + token.text)
        else:
            combined.append(token)

    if run is not None:
        combined.append(run)
    return combined


def wrapper_tag(token: Token) -> str:
    if token.kind == TokenKind.UNORDERED_LIST_ITEM:
        return UNORDERED_LIST
    if token.kind == TokenKind.ORDERED_LIST_ITEM:
        return ORDERED_LIST
    return PARAGRAPH


class TreeBuilder:
    """Assemble parse trees from the tokens of one paragraph.

    Nesting is driven by indentation: deeper tokens open a nested
    paragraph or list, shallower ones close the current level. Bold and
    emphasis spans end at the next delimiter of the same kind, and list
    items end at the next item marker at the same or a shallower level.
    """

    def __init__(self, tokens: Sequence[Token], to_node: Callable[[Token], ParseNode]):
        self._tokens = tokens
        self._to_node = to_node

    def trees(self) -> List[ParseTree]:
        trees: List[ParseTree] = []
        start = 0
        while start < len(self._tokens):
            nodes, last = self._build_tag(start, 0, 0, [], top_level=True)
            if nodes:
                trees.append(ParseTree(nodes))
            start = last + 1
        return trees

    def _build_tag(
        self,
        start: int,
        indentation: int,
        prev_indentation: int,
        end_predicates: List[EndPredicate],
        top_level: bool = False,
    ) -> Tuple[List[ParseNode], int]:
        """Build the node for the level starting at `start`.

        Returns the nodes together with the index of the last token that
        belongs to this level; the caller resumes right after it. A nested
        level without content of its own yields no nodes, while a top-level
        one hands back whatever was nested inside it.
        """

        tokens = self._tokens
        tag: Optional[str] = None
        children: List[ParseNode] = []

        i = start
        while i < len(tokens):
            token = tokens[i]
            if token.indent < indentation:
                if token.indent >= prev_indentation:
                    i -= 1
                break

            ended = False
            for predicate in end_predicates:
                end, consumed = predicate(token)
                if end:
                    if consumed:
                        i += 1
                    ended = True
                    break
            if ended:
                break

            if token.indent > indentation:
                nodes, i = self._build_tag(i, token.indent, indentation, end_predicates)
                children.extend(nodes)
                i += 1
                continue

            if tag is None:
                tag = wrapper_tag(token)

            if token.kind in (TokenKind.BOLD_DELIMITER, TokenKind.EMPHASIS_DELIMITER):
                i = self._build_span(i, indentation, end_predicates, children)
            elif token.is_list_item():
                i = self._build_list(i, indentation, end_predicates, children)
                break
            else:
                children.append(self._to_node(token))

            i += 1

        if tag is None:
            return (children if top_level else []), i

        if tag in (UNORDERED_LIST, ORDERED_LIST) and not children:
            return [], i

        return [TagNode(tag, {}, ParseTree(children))], i

    def _build_span(
        self,
        i: int,
        indentation: int,
        end_predicates: List[EndPredicate],
        children: List[ParseNode],
    ) -> int:
        token = self._tokens[i]
        kind = token.kind

        def closes_span(t: Token) -> Tuple[bool, bool]:
            return t.kind == kind, True

        nodes, end = self._build_tag(i + 1, token.indent, indentation, end_predicates + [closes_span])
        if nodes:
            span_tag = BOLD if kind == TokenKind.BOLD_DELIMITER else EMPHASIS
            wrapper = nodes[0]
            # A list stays whole so its items keep their container.
            inner = wrapper.tree if wrapper.tag == PARAGRAPH else ParseTree([wrapper])
            children.append(TagNode(span_tag, {}, inner))
        return end - 1

    def _build_list(
        self,
        i: int,
        indentation: int,
        end_predicates: List[EndPredicate],
        children: List[ParseNode],
    ) -> int:
        tokens = self._tokens

        def ends_item(t: Token) -> Tuple[bool, bool]:
            return t.is_list_item() and t.indent <= indentation, False

        item_predicates = end_predicates + [ends_item]
        end_kind = tokens[i].kind
        current_indent = tokens[i].indent

        while i < len(tokens) and (
            (tokens[i].kind == end_kind and tokens[i].indent == current_indent)
            or tokens[i].indent > current_indent
        ):
            if tokens[i].indent > indentation:
                nodes, end = self._build_tag(i, tokens[i].indent, indentation, end_predicates)
                children.extend(nodes)
                i = end + 1
            else:
                nodes, i = self._build_tag(i + 1, tokens[i].indent, indentation, item_predicates)
                if nodes:
                    first = nodes[0]
                    if isinstance(first, TagNode) and first.tag == PARAGRAPH:
                        nodes = first.children
                    children.append(TagNode(LIST_ITEM, {}, ParseTree(nodes)))

        # Step back so the caller sees the token that ended the list.
        if (
            (i < len(tokens) and tokens[i].kind == end_kind)
            or (i < len(tokens) and tokens[i - 1].indent > tokens[i].indent)
            or (i + 1 < len(tokens) and tokens[i].indent <= tokens[i + 1].indent)
        ):
            i -= 1
        return i


class Parser:
    """Read tokens and produce parse trees, one per top-level paragraph.

    A paragraph ends at a blank line: two or more consecutive NEW_LINE
    tokens, the last of which is not indented. After the last paragraph
    an empty ParseTree is produced to mark the end of input.
    """

    def __init__(
        self,
        tokens: Iterable[Token],
        *,
        link_resolver: Optional[DocLinkResolver] = None,
        url_prefix: str = "",
    ):
        self._tokens: Iterator[Token] = iter(tokens)
        self._next_token: Optional[Token] = None
        self._link_resolver: DocLinkResolver = link_resolver or StaticDocLinkResolver()
        self._url_prefix = url_prefix

    def __iter__(self) -> Iterator[ParseTree]:
        return self.parse()

    def parse(self) -> Iterator[ParseTree]:
        while True:
            tokens, end = self._read_paragraph()
            paragraph = combine_tokens(indent_tokens(tokens))
            for tree in TreeBuilder(paragraph, self.token_to_node).trees():
                yield tree

            if end:
                yield ParseTree()
                return

    def _read_token(self) -> Token:
        if self._next_token is not None:
            token, self._next_token = self._next_token, None
            return token
        return next(self._tokens, Token(TokenKind.END_OF_FILE))

    def _read_paragraph(self) -> Tuple[List[Token], bool]:
        tokens: List[Token] = []
        has_content = False

        while True:
            token = self._read_token()

            if token.kind in CONTENT_KINDS:
                tokens.append(token)
                has_content = True

            elif token.kind == TokenKind.NEW_LINE:
                consecutive = 0
                should_break = False
                while token.kind == TokenKind.NEW_LINE:
                    tokens.append(token)
                    consecutive += 1
                    should_break = consecutive > 1 and token.indent == 0
                    token = self._read_token()
                self._next_token = token

                if has_content and should_break:
                    return tokens, False

            else:
                return tokens, True

    def token_to_node(self, token: Token) -> ParseNode:
        """Convert a token to its parse node.

        Embedded HTML is treated as text and passed straight through.
        """

        if token.kind in (TokenKind.TEXT, TokenKind.TAG):
            return TextNode(token.text)

        if token.kind == TokenKind.WIKI_LINK:
            return TagNode(
                LINK,
                {"href": self.link_url(token.text)},
                ParseTree([TextNode(self.link_text(token.text))]),
            )

        if token.kind == TokenKind.LITERAL_TEXT:
            tag = PREFORMATTED if "\n" in token.text else LITERAL
            return TagNode(tag, {}, ParseTree([TextNode(token.text)]))

        if token.kind == TokenKind.BOLD_DELIMITER:
            return TagNode(BOLD)
        if token.kind == TokenKind.EMPHASIS_DELIMITER:
            return TagNode(EMPHASIS)
        if token.is_list_item():
            return TagNode(LIST_ITEM)

        return TextNode("")

    def link_url(self, link: str) -> str:
        parts = link.split(":", 2)
        if len(parts) == 1:
            return self._url_prefix + "/view/" + quote_plus(parts[0], safe="")
        if len(parts) == 2:
            return parts[1]
        if parts[0] == DOC_LINK_PREFIX:
            return self._link_resolver.resolve(parts[1], parts[2])
        return parts[1] + ":" + parts[2]

    def link_text(self, link: str) -> str:
        parts = link.split(":", 2)
        if len(parts) == 3 and parts[0] == DOC_LINK_PREFIX:
            return parts[2]
        return wiki_case(parts[0])
