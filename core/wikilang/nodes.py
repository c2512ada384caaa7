from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Union

# Tag names of parse tree nodes. They match the HTML tags the generator
# emits.
PARAGRAPH = "p"
ORDERED_LIST = "ol"
UNORDERED_LIST = "ul"
LIST_ITEM = "li"
LINK = "a"
BOLD = "b"
EMPHASIS = "em"
LITERAL = "tt"  # literal text embedded in a single line
PREFORMATTED = "pre"  # multi-line literal text


@dataclass
class TextNode:
    """A single block of text; the leaves of a parse tree."""

    text: str

    def __str__(self) -> str:
        return "{Text: " + self.text + "}"


@dataclass
class TagNode:
    """A subtree surrounded by a tag."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    tree: "ParseTree" = field(default_factory=lambda: ParseTree())

    @property
    def children(self) -> List["ParseNode"]:
        return self.tree.nodes

    def __str__(self) -> str:
        attrs = "".join(f"{key}={value} " for key, value in self.attributes.items())
        return "{Tag " + self.tag + " (" + attrs + ") " + str(self.tree) + "}"


ParseNode = Union[TagNode, TextNode]


@dataclass
class ParseTree:
    """An ordered list of parse nodes.

    The empty tree doubles as the end-of-input marker between the parser
    and the HTML generator.
    """

    nodes: List[ParseNode] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.nodes)

    def __str__(self) -> str:
        return "[" + "".join(str(node) + " " for node in self.nodes) + "]"

    def visit(self, visitor: "Visitor") -> None:
        """Walk the tree; tag nodes are visited before and after their children."""
        for node in self.nodes:
            if isinstance(node, TagNode):
                visitor.visit_tag_begin(node)
                node.tree.visit(visitor)
                visitor.visit_tag_end(node)
            else:
                visitor.visit_text(node)


class Visitor(ABC):
    """Callbacks invoked by ParseTree.visit()."""

    @abstractmethod
    def visit_tag_begin(self, node: TagNode) -> None:
        """Called before the tag node's own tree is visited."""
        pass

    @abstractmethod
    def visit_tag_end(self, node: TagNode) -> None:
        """Called after the tag node's own tree has been visited."""
        pass

    @abstractmethod
    def visit_text(self, node: TextNode) -> None:
        pass
