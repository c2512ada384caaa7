import unittest

from core.wikilang.htmlgen import HtmlGen, generate_tree_string
from core.wikilang.nodes import ParseTree, TagNode, TextNode


def paragraph(*nodes) -> ParseTree:
    return ParseTree([TagNode("p", {}, ParseTree(list(nodes)))])


class TestHtmlGen(unittest.TestCase):
    def test_no_parse_trees(self) -> None:
        self.assertEqual(HtmlGen([ParseTree()]).generate(), "")
        self.assertEqual(HtmlGen([]).generate(), "")

    def test_basic_paragraph(self) -> None:
        trees = [paragraph(TextNode("This is a very simple paragraph.")), ParseTree()]
        self.assertEqual(
            HtmlGen(trees).generate(),
            "<p>\n  This is a very simple paragraph.\n</p>\n",
        )

    def test_long_paragraph_wraps(self) -> None:
        trees = [
            paragraph(
                TextNode(
                    "This is a paragraph that contains much "
                    "longer text than the previous one. It "
                    "is broken up into sentences and so the "
                    "generator should wrap it to multiple "
                    "lines so we can read it easier."
                )
            ),
            ParseTree(),
        ]
        self.assertEqual(
            HtmlGen(trees).generate(),
            "<p>\n"
            "  This is a paragraph that contains much longer text than the previous one. It is broken\n"
            "  up into sentences and so the generator should wrap it to multiple lines so we can\n"
            "  read it easier.\n"
            "</p>\n",
        )

    def test_trees_after_end_marker_are_ignored(self) -> None:
        trees = [paragraph(TextNode("One")), ParseTree(), paragraph(TextNode("Two"))]
        self.assertEqual(HtmlGen(trees).generate(), "<p>\n  One\n</p>\n")

    def test_fragments_separated_by_blank_line(self) -> None:
        trees = [paragraph(TextNode("One")), paragraph(TextNode("Two")), ParseTree()]
        self.assertEqual(
            HtmlGen(trees).generate(),
            "<p>\n  One\n</p>\n\n\n<p>\n  Two\n</p>\n",
        )

    def test_inline_tags_are_spaced_like_words(self) -> None:
        tree = paragraph(
            TextNode("See"),
            TagNode("a", {"href": "/view/FrontPage"}, ParseTree([TextNode("Front Page")])),
            TextNode(". Then"),
            TagNode("b", {}, ParseTree([TextNode("stop")])),
        )
        self.assertEqual(
            generate_tree_string(tree),
            '<p>\n  See <a href="/view/FrontPage">Front Page</a>. Then <b>stop</b>\n</p>\n',
        )

    def test_preformatted_text_is_not_wrapped(self) -> None:
        tree = paragraph(TagNode("pre", {}, ParseTree([TextNode("Literal\nText on\nmultiple lines")])))
        self.assertEqual(
            generate_tree_string(tree),
            "<p>\n  \n  <pre>\n    Literal\nText on\nmultiple lines\n  </pre>\n  \n</p>\n",
        )

    def test_narrow_wrap_width(self) -> None:
        tree = paragraph(TextNode("one two three four"))
        self.assertEqual(
            generate_tree_string(tree, wrap_width=10),
            "<p>\n  one two three\n  four\n</p>\n",
        )


if __name__ == "__main__":
    unittest.main()
