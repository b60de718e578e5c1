#!/usr/bin/env python3
"""
HTML Patcher
============

Run this AFTER regenerating the resume HTML from the .tex sources. The
converter overwrites every customization; this restores them:

    - HTML5 DOCTYPE and lang attribute on every page
    - SEO, Open Graph and Twitter Card meta tags on page1.html
    - Favicon links and language alternates (en/es)
    - Image centering and spacing rules in style.css
    - Fixed floating "Download PDF" button (language-aware)
    - Missing favicons, ray.png and index.html restored from git

Usage:
    python scripts/run_html_patcher.py              # From the repository root
    python scripts/run_html_patcher.py --root PATH  # Another checkout
"""

import sys
import os

# Ensure the scripts directory is in the path
script_dir = os.path.dirname(os.path.abspath(__file__))
if script_dir not in sys.path:
    sys.path.insert(0, script_dir)


def main():
    """Main entry point for the patcher."""
    from html_patcher import run_with_args
    return run_with_args()


if __name__ == "__main__":
    sys.exit(main())
