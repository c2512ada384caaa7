import io
import unittest

import pytest

from core.wikilang.code_writer import CodeWriterError, StandardCodeWriter


def make_writer(width: int = 80):
    out = io.StringIO()
    return out, StandardCodeWriter(out, wrap_width=width)


class TestStandardCodeWriter(unittest.TestCase):
    def test_fresh_line_only_breaks_after_content(self) -> None:
        out, writer = make_writer()
        writer.fresh_line()
        self.assertEqual(out.getvalue(), "")

        writer.write("abc")
        writer.fresh_line()
        writer.fresh_line()
        self.assertEqual(out.getvalue(), "abc\n")

    def test_new_line_writes_indentation(self) -> None:
        out, writer = make_writer()
        writer.change_indentation(2)
        writer.write("x")
        writer.new_line()
        writer.write("y")
        self.assertEqual(out.getvalue(), "x\n  y")
        self.assertEqual(writer.indentation, 2)

    def test_negative_indentation_raises(self) -> None:
        _, writer = make_writer()
        writer.change_indentation(2)
        with self.assertRaises(CodeWriterError):
            writer.change_indentation(-4)
        self.assertEqual(writer.indentation, 2)

    def test_wraps_at_whitespace_and_drops_break_space(self) -> None:
        out, writer = make_writer(10)
        writer.change_indentation(2)
        writer.write("aaaa bbbbb cc")
        self.assertEqual(out.getvalue(), "aaaa bbbbb\n  cc")

    def test_words_longer_than_the_line_are_not_split(self) -> None:
        out, writer = make_writer(4)
        writer.write("abcdefgh ij")
        self.assertEqual(out.getvalue(), "abcdefgh\nij")

    def test_literal_text_is_written_verbatim(self) -> None:
        out, writer = make_writer(4)
        writer.change_indentation(2)
        writer.literal_text(True)
        writer.write("a  long line\n  kept")
        writer.literal_text(False)
        self.assertEqual(out.getvalue(), "a  long line\n  kept")

    def test_write_returns_consumed_length(self) -> None:
        _, writer = make_writer()
        self.assertEqual(writer.write("hello world"), 11)


def test_rejects_tiny_wrap_width() -> None:
    with pytest.raises(ValueError):
        StandardCodeWriter(io.StringIO(), wrap_width=1)


def test_indentation_is_capped_below_wrap_width() -> None:
    out = io.StringIO()
    writer = StandardCodeWriter(out, wrap_width=4)
    writer.change_indentation(10)
    writer.new_line()
    assert out.getvalue() == "\n   "
