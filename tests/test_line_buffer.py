"""Tests for Line spans and the LineBuffer arena."""

import unittest

from oneginsort import Line, LineBuffer


class TestSplitting(unittest.TestCase):

    def test_trailing_newline_adds_no_line(self):
        self.assertEqual([l.text for l in LineBuffer("a\nb\n").lines()], ["a", "b"])

    def test_last_line_without_newline(self):
        self.assertEqual([l.text for l in LineBuffer("a\nb").lines()], ["a", "b"])

    def test_blank_lines_are_kept(self):
        lines = LineBuffer("a\n\n\nb\n").lines()
        self.assertEqual([len(l) for l in lines], [1, 0, 0, 1])

    def test_crlf(self):
        self.assertEqual([l.text for l in LineBuffer("a\r\nb\r\n").lines()], ["a", "b"])

    def test_empty_buffer(self):
        self.assertEqual(LineBuffer("").lines(), [])

    def test_only_newline(self):
        lines = LineBuffer("\n").lines()
        self.assertEqual(len(lines), 1)
        self.assertEqual(lines[0].text, "")

    def test_lines_are_cached(self):
        buffer = LineBuffer("x\ny\n")
        self.assertIs(buffer.lines(), buffer.lines())

    def test_from_lines(self):
        buffer = LineBuffer.from_lines(["one", "", "three"])
        self.assertEqual(buffer.text, "one\n\nthree\n")
        self.assertEqual([l.text for l in buffer.lines()], ["one", "", "three"])
        self.assertEqual(LineBuffer.from_lines([]).lines(), [])


class TestLineView(unittest.TestCase):

    def setUp(self):
        self.buffer = LineBuffer("first\nsecond\n")
        self.first, self.second = self.buffer.lines()

    def test_span(self):
        self.assertIs(self.second.buffer, self.buffer)
        self.assertEqual(self.second.start, 6)
        self.assertEqual(len(self.second), 6)

    def test_indexing(self):
        self.assertEqual(self.second[0], "s")
        self.assertEqual(self.second[-1], "d")
        with self.assertRaises(IndexError):
            self.first[5]
        with self.assertRaises(IndexError):
            self.first[-6]

    def test_str_and_repr(self):
        self.assertEqual(str(self.first), "first")
        self.assertEqual(repr(self.first), "Line('first')")

    def test_span_outside_buffer(self):
        with self.assertRaises(ValueError):
            Line(self.buffer, 10, 10)

    def test_of(self):
        line = Line.of("solo")
        self.assertEqual(line.text, "solo")
        self.assertEqual(line.buffer.text, "solo")

    def test_identity_not_content(self):
        a, b = LineBuffer("same\nsame\n").lines()
        self.assertEqual(a.text, b.text)
        self.assertNotEqual(a, b)


if __name__ == "__main__":
    unittest.main()
