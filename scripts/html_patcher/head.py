#!/usr/bin/env python3
"""
Head modernization patch.

Upgrades the converter's HTML 4.01 markup to an HTML5 baseline:
    - legacy DOCTYPE -> <!DOCTYPE html>
    - <html> gets the document language
    - main page: the whole <head> is replaced by the generated metadata block
    - other pages: charset/viewport/generator lines are injected after <head>
      and the legacy stylesheet link spelling is normalized

The main page's <head> is owned by the patcher; on every other page the
existing head contents are preserved.
"""
import re

from . import config
from .metadata import build_main_head
from .patches import Patch
from .splice import find_region, replace_region, with_newlines
from .utils import PatchError

HEAD_OPEN = "<head>"
HEAD_CLOSE = "</head>"

BASIC_HEAD_LINES = "\n".join([
    '<meta charset="UTF-8">',
    '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
    f'<meta name="generator" content="{config.GENERATOR}">',
])

_HTML_TAG = re.compile(r'<html(?:\s+lang="[^"]*")?\s*>', re.IGNORECASE)


def modernize_doctype(html: str) -> str:
    return html.replace(config.LEGACY_DOCTYPE, config.MODERN_DOCTYPE)


def set_lang(html: str, lang: str) -> str:
    return _HTML_TAG.sub(f'<html lang="{lang}">', html, count=1)


def _is_tagged(html: str, lang: str) -> bool:
    return config.LEGACY_DOCTYPE not in html and f'<html lang="{lang}">' in html


def _head(html: str):
    span = find_region(html, HEAD_OPEN, HEAD_CLOSE)
    return None if span is None else html[span[0]:span[1]]


# --- main page ---

def has_main_head(html: str, lang: str) -> bool:
    return _is_tagged(html, lang) and _head(html) == with_newlines(build_main_head(lang), html)


def install_main_head(html: str, lang: str) -> str:
    """Replace the entire <head> region. Raises PatchError if it cannot be found."""
    if find_region(html, HEAD_OPEN, HEAD_CLOSE) is None:
        raise PatchError("Main page has no <head>...</head> region")
    new_head = with_newlines(build_main_head(lang), html)
    html = set_lang(modernize_doctype(html), lang)
    return replace_region(html, find_region(html, HEAD_OPEN, HEAD_CLOSE), new_head)


# --- other pages ---

def _basic_prefix(html: str) -> str:
    return with_newlines(HEAD_OPEN + "\n" + BASIC_HEAD_LINES, html)


def has_basic_head(html: str, lang: str) -> bool:
    head = _head(html)
    return (
        _is_tagged(html, lang)
        and head is not None
        and head.startswith(_basic_prefix(html))
        and config.LEGACY_STYLESHEET_LINK not in html
    )


def install_basic_head(html: str, lang: str) -> str:
    if find_region(html, HEAD_OPEN, HEAD_CLOSE) is None:
        # Not the structure we know; leave the page exactly as it is
        return html
    html = set_lang(modernize_doctype(html), lang)
    start, end = find_region(html, HEAD_OPEN, HEAD_CLOSE)
    head = html[start:end]
    prefix = _basic_prefix(html)
    if not head.startswith(prefix):
        head = prefix + head[len(HEAD_OPEN):]
        html = replace_region(html, (start, end), head)
    return html.replace(config.LEGACY_STYLESHEET_LINK, config.MODERN_STYLESHEET_LINK)


def head_patch(lang: str, is_main: bool) -> Patch:
    if is_main:
        return Patch(f"main-head[{lang}]",
                     lambda html: has_main_head(html, lang),
                     lambda html: install_main_head(html, lang))
    return Patch(f"basic-head[{lang}]",
                 lambda html: has_basic_head(html, lang),
                 lambda html: install_basic_head(html, lang))
