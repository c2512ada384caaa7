from __future__ import annotations

import logging
from typing import Optional

from core.ports.doclink_port import DocLinkResolver
from core.wikilang.code_writer import DEFAULT_WRAP_WIDTH
from core.wikilang.htmlgen import HtmlGen
from core.wikilang.lexer import Lexer
from core.wikilang.parser import Parser

logger = logging.getLogger(__name__)


def wiki_to_html(
    body: str,
    *,
    link_resolver: Optional[DocLinkResolver] = None,
    url_prefix: str = "",
    wrap_width: int = DEFAULT_WRAP_WIDTH,
) -> str:
    """Convert a string of wiki text into the equivalent HTML.

    The stages are chained lazily: the generator pulls parse trees from
    the parser, which pulls tokens from the lexer one at a time.

    Args:
        body: Wiki markup.
        link_resolver: Resolves `[doc:project:entity]` links. Defaults to
            the project index page of every project.
        url_prefix: Prepended to internal `/view/` links (proxy root).
        wrap_width: Column at which HTML lines are wrapped.

    Returns:
        The HTML fragments, one per top-level paragraph, separated by a
        blank line.
    """

    lexer = Lexer(body)
    parser = Parser(lexer, link_resolver=link_resolver, url_prefix=url_prefix)
    html = HtmlGen(parser, wrap_width=wrap_width).generate()

    logger.debug("Rendered %d characters of wiki text to %d characters of HTML", len(body), len(html))
    return html
