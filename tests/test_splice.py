import re

import pytest

from html_patcher.splice import (
    find_line_block,
    find_region,
    find_single,
    insert_before_last,
    insert_line_before,
    insert_lines_after_line,
    newline_of,
    replace_region,
    with_newlines,
)
from html_patcher.utils import PatchError

CSS = "a {\n}\n#content {\n    width: 1px;\n}\nb {\n}\n"


def test_find_line_block_locates_closing_brace():
    start, close = find_line_block(CSS, "#content {")
    assert CSS[start:].startswith("#content {")
    assert CSS[close:close + 2] == "}\n"
    assert CSS[start:close] == "#content {\n    width: 1px;\n"


def test_find_line_block_ignores_selectors_that_only_start_alike():
    css = "#content {\n}\n#content img {\n}\n"
    start, _ = find_line_block(css, "#content {")
    assert start == 0


@pytest.mark.parametrize("css, expected", [
    ("a {\n}\n", "found 0"),
    ("#content {\n}\n#content {\n}\n", "found 2"),
])
def test_find_line_block_requires_exactly_one(css, expected):
    with pytest.raises(PatchError, match=expected):
        find_line_block(css, "#content {")


def test_find_line_block_unclosed():
    with pytest.raises(PatchError, match="no closing brace"):
        find_line_block("#content {\n  width: 1px;\n", "#content {")


def test_find_line_block_tolerates_crlf():
    css = "#content {\r\n    width: 1px;\r\n}\r\n"
    start, close = find_line_block(css, "#content {")
    assert css[close] == "}"


@pytest.mark.parametrize("opening", ["#content { ", "#content {\t", "#content { /* main */"])
def test_find_line_block_accepts_trailing_text_on_opening_line(opening):
    css = "a {\n}\n" + opening + "\n    width: 1px;\n}\n"
    start, close = find_line_block(css, "#content {")
    assert start == len("a {\n}\n")
    assert css[close:] == "}\n"


def test_newline_helpers():
    assert newline_of("a\nb") == "\n"
    assert newline_of("a\r\nb") == "\r\n"
    assert with_newlines("x\ny", "a\r\n") == "x\r\ny"
    assert with_newlines("x\ny", "a\n") == "x\ny"
    assert insert_line_before("one\r\ntwo\r\n", 5, "mid") == "one\r\nmid\r\ntwo\r\n"
    assert insert_lines_after_line("one\r\ntwo\r\n", 0, "x\ny") == "one\r\nx\r\ny\r\ntwo\r\n"


def test_find_single_returns_match():
    m = find_single("x1 y2", re.compile(r"y\d"), "digit")
    assert m.group(0) == "y2"


def test_insert_helpers():
    text = "one\ntwo\n"
    assert insert_line_before(text, 4, "mid") == "one\nmid\ntwo\n"
    assert insert_lines_after_line(text, 0, "x\ny") == "one\nx\ny\ntwo\n"
    assert insert_lines_after_line("last", 0, "x") == "last\nx"


def test_find_region_and_replace():
    html = "<html><head><title>t</title></head><body></body></html>"
    span = find_region(html, "<head>", "</head>")
    assert html[span[0]:span[1]] == "<head><title>t</title></head>"
    assert replace_region(html, span, "<head></head>") == "<html><head></head><body></body></html>"


@pytest.mark.parametrize("html", [
    "<html><body></body></html>",
    "<html><head><title>t</title><body></body></html>",
    "<html></head><head></html>",
])
def test_find_region_missing_markers(html):
    assert find_region(html, "<head>", "</head>") is None


def test_insert_before_last():
    assert insert_before_last("a</body>", "</body>", "X") == "aX</body>"
    assert insert_before_last("a", "</body>", "X") is None
