#!/usr/bin/env python3
"""
Pure text splice operations.
Every function takes content and returns new content; nothing touches the disk.
"""
import re
from typing import Optional, Tuple

from .utils import PatchError


def find_single(content: str, pattern: "re.Pattern[str]", what: str) -> "re.Match[str]":
    """Return the only match of pattern, raising PatchError on zero or many."""
    matches = list(pattern.finditer(content))
    if len(matches) != 1:
        raise PatchError(f"Expected exactly one {what}, found {len(matches)}")
    return matches[0]


def find_line_block(content: str, opening_line: str) -> Tuple[int, int]:
    """
    Locate a block whose opening line starts with opening_line and ends
    at the first following line consisting only of "}".

    Returns (start, close) where close is the offset of the closing brace.
    """
    opening = re.compile(r'^' + re.escape(opening_line) + r'[^\n]*$', re.MULTILINE)
    m = find_single(content, opening, f"'{opening_line}' block")
    closing = re.compile(r'^\}\r?$', re.MULTILINE).search(content, m.end())
    if not closing:
        raise PatchError(f"Block '{opening_line}' has no closing brace")
    return m.start(), closing.start()


def newline_of(content: str) -> str:
    return "\r\n" if "\r\n" in content else "\n"


def with_newlines(text: str, content: str) -> str:
    """Convert LF line breaks in text to the line ending content uses."""
    nl = newline_of(content)
    return text if nl == "\n" else text.replace("\n", nl)


def insert_line_before(content: str, pos: int, line: str) -> str:
    """Insert line as its own line at pos, which must be a line start."""
    return content[:pos] + line + newline_of(content) + content[pos:]


def insert_lines_after_line(content: str, pos: int, text: str) -> str:
    """Insert text as new line(s) after the line containing pos."""
    nl = newline_of(content)
    text = with_newlines(text, content)
    eol = content.find("\n", pos)
    if eol == -1:
        return content + nl + text
    return content[:eol + 1] + text + nl + content[eol + 1:]


def find_region(content: str, start_marker: str, end_marker: str) -> Optional[Tuple[int, int]]:
    """
    Span of start_marker ... end_marker inclusive, or None when either
    marker is missing or they are out of order.
    """
    start = content.find(start_marker)
    if start == -1:
        return None
    end = content.find(end_marker, start + len(start_marker))
    if end == -1:
        return None
    return start, end + len(end_marker)


def replace_region(content: str, span: Tuple[int, int], replacement: str) -> str:
    start, end = span
    return content[:start] + replacement + content[end:]


def insert_before_last(content: str, marker: str, text: str) -> Optional[str]:
    """Insert text immediately before the last marker; None when it is absent."""
    pos = content.rfind(marker)
    if pos == -1:
        return None
    return content[:pos] + text + content[pos:]
