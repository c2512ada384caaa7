"""Lexer, parser and HTML generator for the docwiki language.

The language resembles reStructuredText: you write plain ASCII and the
HTML follows the same structure. It supports bold (`*bold*`) and
emphasized (`/emphasis/`) text, internal, external and documentation
links (`[WikiPage]`, `[Label:http://...]`, `[doc:project:Entity]`),
nested ordered (`#`) and unordered (`-`) lists, literal text
(`{...}`) and embedded HTML tags.

For the general case use `wiki_to_html(body)`. The Lexer, Parser and
HtmlGen stages are exposed for finer control; each one lazily pulls
from the previous stage.
"""

from core.wikilang.htmlgen import HtmlGen
from core.wikilang.lexer import Lexer
from core.wikilang.nodes import ParseTree, TagNode, TextNode, Visitor
from core.wikilang.parser import Parser
from core.wikilang.pipeline import wiki_to_html
from core.wikilang.tokens import Token, TokenKind
from core.wikilang.wikicase import wiki_case
