#!/usr/bin/env python3
"""
Stylesheet patch: image centering, per-image spacing and the floating download button.
"""
from . import config
from .patches import Patch
from .splice import find_line_block, insert_line_before, insert_lines_after_line, newline_of


def has_image_rules(css: str) -> bool:
    return config.CSS_MARKER in css


def add_image_rules(css: str) -> str:
    """
    Centre #content and append the image/button rules right after its block.
    Raises PatchError unless the '#content {' block occurs exactly once.
    """
    _, close = find_line_block(css, config.CSS_ANCHOR_OPEN)
    css = insert_line_before(css, close, config.CSS_TEXT_ALIGN)
    close += len(config.CSS_TEXT_ALIGN) + len(newline_of(css))
    return insert_lines_after_line(css, close, config.CSS_IMAGE_RULES)


STYLESHEET_PATCH = Patch("image-rules", has_image_rules, add_image_rules)
