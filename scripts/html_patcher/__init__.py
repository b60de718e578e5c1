#!/usr/bin/env python3
"""
HTML Patcher Package
====================

Restores the customizations a LaTeX-to-HTML regeneration overwrites:
SEO/social metadata, favicons, language alternates, image-centering CSS
and the floating PDF download button. Every patch is idempotent, so the
patcher can be re-run after each regeneration.

Modules:
    - config: Catalog names, locale tables and inserted snippets
    - catalog: Document set descriptors
    - splice: Pure text splice helpers
    - patches: Patch primitive (presence predicate + application)
    - stylesheet / download_button / head / metadata: The patches
    - assets: Snapshot recovery of missing files
    - verify: Post-run checks
    - core: Orchestration

Usage:
    from html_patcher import run
    run()                 # Current directory is the working-tree root
    run(root="site")
"""

__version__ = "1.0.0"

import sys
from pathlib import Path


def run(root: str = ".", verify: bool = True) -> int:
    """Patch the catalog rooted at root. Returns the process exit status."""
    from . import core
    return core.main(Path(root), verify=verify)


def run_with_args(argv=None) -> int:
    """
    Run the patcher with command-line arguments.
    This is the CLI entry point.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Restore SEO, favicon, CSS and download-button customizations in regenerated HTML.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m html_patcher                # Run from the repository root
    python -m html_patcher --root ../cv   # Patch another checkout
        """
    )
    parser.add_argument("--root", default=".", help="Working-tree root holding the HTML directories")
    parser.add_argument("--no-verify", action="store_true", help="Skip post-run verification")
    args = parser.parse_args(argv)

    try:
        return run(root=args.root, verify=not args.no_verify)
    except PatchError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


from .utils import PatchError, log

from .patches import Patch, apply_patches

from .catalog import (
    Document,
    DocumentSet,
    Role,
    default_catalog,
)

from .stylesheet import STYLESHEET_PATCH
from .download_button import download_button_patch
from .head import head_patch
from .metadata import build_main_head

from .assets import (
    GitSnapshot,
    restore_assets,
    restore_landing_page,
)

from .verify import verify_document_set


__all__ = [
    # Main entry points
    'run',
    'run_with_args',
    # Errors / output
    'PatchError',
    'log',
    # Patches
    'Patch',
    'apply_patches',
    'STYLESHEET_PATCH',
    'download_button_patch',
    'head_patch',
    'build_main_head',
    # Catalog
    'Document',
    'DocumentSet',
    'Role',
    'default_catalog',
    # Assets
    'GitSnapshot',
    'restore_assets',
    'restore_landing_page',
    # Verification
    'verify_document_set',
]
