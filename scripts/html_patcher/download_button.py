#!/usr/bin/env python3
"""
Download-button patch: a floating link to the PDF, placed before </body>.
"""
from . import config
from .patches import Patch
from .splice import insert_before_last, newline_of


def button_text(lang: str) -> str:
    return config.BUTTON_TEXT.get(lang, config.BUTTON_TEXT[config.PRIMARY_LANG])


def button_html(lang: str) -> str:
    return (f'<a href="{config.PDF_HREF}" class="{config.BUTTON_CLASS}" download>'
            f'{button_text(lang)}</a>')


def has_download_button(html: str) -> bool:
    return config.BUTTON_CLASS in html


def download_button_patch(lang: str) -> Patch:
    def add_button(html: str) -> str:
        patched = insert_before_last(html, "</body>", button_html(lang) + newline_of(html))
        # No closing body marker: nothing to anchor on, leave the page alone
        return html if patched is None else patched

    return Patch(f"download-button[{lang}]", has_download_button, add_button)
