#!/usr/bin/env python3
"""
Post-run verification of a patched document set.

Checks are advisory: each failed check yields a problem string and the
caller decides what to do with it. Nothing here modifies files.
"""
from pathlib import Path
from typing import List

from bs4 import BeautifulSoup
from pypdf import PdfReader
from pypdf.errors import PyPdfError

from . import config
from .catalog import Document, DocumentSet
from .utils import read_text


def check_main_page(html: str) -> List[str]:
    problems = []
    soup = BeautifulSoup(html, 'html.parser')

    heads = soup.find_all('head')
    if len(heads) != 1:
        return [f"expected one <head>, found {len(heads)}"]
    head = heads[0]

    titles = head.find_all('title')
    if len(titles) != 1:
        problems.append(f"expected one <title>, found {len(titles)}")

    alternates = head.find_all('link', rel='alternate', hreflang=True)
    langs = sorted(link['hreflang'] for link in alternates)
    expected = sorted([config.PRIMARY_LANG, config.SECONDARY_LANG, 'x-default'])
    if langs != expected:
        problems.append(f"hreflang alternates {langs} != {expected}")

    if not head.find('meta', property='og:title'):
        problems.append("missing og:title")
    return problems


def check_download_button(html: str) -> List[str]:
    soup = BeautifulSoup(html, 'html.parser')
    buttons = soup.find_all('a', class_=config.BUTTON_CLASS)
    if len(buttons) != 1:
        return [f"expected one download button, found {len(buttons)}"]
    return []


def check_pdf(pdf_path: Path) -> List[str]:
    if not pdf_path.is_file():
        return [f"download target missing: {pdf_path}"]
    try:
        pages = len(PdfReader(str(pdf_path)).pages)
    except (PyPdfError, OSError, ValueError) as e:
        return [f"download target unreadable: {pdf_path} ({e})"]
    if pages < 1:
        return [f"download target has no pages: {pdf_path}"]
    return []


def verify_document_set(doc_set: DocumentSet) -> List[str]:
    """Return a list of human-readable problems; empty means the set looks right."""
    problems: List[str] = []

    def _check(doc: Document, checks) -> None:
        if not doc.path.is_file():
            problems.append(f"{doc.path.name}: missing")
            return
        html = read_text(doc.path)
        for check in checks:
            problems.extend(f"{doc.path.name}: {p}" for p in check(html))

    _check(doc_set.main, [check_main_page, check_download_button])
    _check(doc_set.landing, [check_download_button])
    for page in doc_set.secondary_pages():
        _check(page, [check_download_button])

    if doc_set.stylesheet_path.is_file():
        count = read_text(doc_set.stylesheet_path).count(config.CSS_MARKER)
        if count != 1:
            problems.append(f"{doc_set.stylesheet}: image rules present {count} times")
    else:
        problems.append(f"{doc_set.stylesheet}: missing")

    for name in config.ASSET_FILES:
        if not (doc_set.directory / name).is_file():
            problems.append(f"asset missing: {name}")

    problems.extend(check_pdf(doc_set.directory / config.PDF_HREF))
    return problems
