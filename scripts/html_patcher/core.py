#!/usr/bin/env python3
"""
Orchestrator.

Walks the catalog and, per document set:
    1) restores missing assets and the landing page from the snapshot
    2) patches the stylesheet
    3) installs the full metadata head on the main page
    4) adds the download button to the main page and the landing page
    5) modernizes the head of every other page and adds its download button
    6) verifies the result (warnings only)

Each file is read once, patched in memory and written back only when every
patch for it succeeded and the content actually changed.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from tqdm import tqdm

from .assets import GitSnapshot, restore_assets, restore_landing_page
from .catalog import DocumentSet, default_catalog
from .download_button import download_button_patch
from .head import head_patch
from .patches import Patch, apply_patches
from .stylesheet import STYLESHEET_PATCH
from .utils import PatchError, log, read_text, write_text
from .verify import verify_document_set


def patch_file(path: Path, patches: Iterable[Patch]) -> bool:
    """Apply patches to one file. Returns True if the file was rewritten."""
    if not path.is_file():
        raise PatchError(f"Required file missing: {path}")
    original = read_text(path)
    try:
        patched = apply_patches(original, patches)
    except PatchError as e:
        raise PatchError(f"{path}: {e}") from e
    if patched == original:
        return False
    write_text(path, patched)
    return True


@dataclass
class SetReport:
    name: str
    missing_assets: List[str] = field(default_factory=list)
    changed: List[str] = field(default_factory=list)
    problems: List[str] = field(default_factory=list)


def process_document_set(doc_set: DocumentSet, snapshot, verify: bool = True) -> SetReport:
    """Patch one localized document set."""
    report = SetReport(doc_set.name)
    report.missing_assets = restore_assets(doc_set, snapshot)
    has_landing = restore_landing_page(doc_set, snapshot)

    def _patch(path: Path, patches: List[Patch]) -> bool:
        if patch_file(path, patches):
            report.changed.append(path.name)
            return True
        return False

    log(f"Updating CSS: {doc_set.stylesheet_path}")
    if _patch(doc_set.stylesheet_path, [STYLESHEET_PATCH]):
        log("  Added image centering and spacing CSS rules")
    else:
        log("  CSS already contains image centering rules, skipping...")

    button = download_button_patch(doc_set.lang)

    main = doc_set.main
    log(f"Processing: {main.path}")
    if _patch(main.path, [head_patch(main.lang, is_main=True), button]):
        log("  Added full SEO meta tags")

    if has_landing:
        _patch(doc_set.landing.path, [button])
    else:
        log(f"  [Warn] Skipping download button, {doc_set.landing_page} not available")

    pages = doc_set.secondary_pages()
    basic_head = head_patch(doc_set.lang, is_main=False)
    for page in tqdm(pages, desc=f"{doc_set.name} pages", unit="page", leave=False):
        if _patch(page.path, [basic_head, button]):
            log(f"  Patched {page.path.name}")

    if verify:
        report.problems = verify_document_set(doc_set)
        for p in report.problems:
            log(f"  [Verify] {p}")
    return report


def run_catalog(catalog: List[DocumentSet], snapshot, verify: bool = True) -> List[SetReport]:
    reports: List[SetReport] = []
    for doc_set in catalog:
        if not doc_set.required and not doc_set.directory.is_dir():
            log(f"--> {doc_set.name} version not found, skipping")
            continue
        log("")
        log(f"=== Processing {doc_set.name} Version ===")
        reports.append(process_document_set(doc_set, snapshot, verify=verify))
    return reports


def print_summary(reports: List[SetReport]) -> None:
    log("")
    log("✓ Post-processing complete!")
    log("")
    log("Changes made:")
    for r in reports:
        if r.changed:
            log(f"  - {r.name}: patched {len(r.changed)} file(s): {', '.join(r.changed)}")
        else:
            log(f"  - {r.name}: already up to date")
        if r.missing_assets:
            log(f"    still missing: {', '.join(r.missing_assets)}")
    problems = sum(len(r.problems) for r in reports)
    if problems:
        log("")
        log(f"[WARNING] {problems} verification problem(s), see above.")


def main(root: Path = Path("."), snapshot=None, verify: bool = True,
         catalog: Optional[List[DocumentSet]] = None) -> int:
    root = Path(root)
    if snapshot is None:
        snapshot = GitSnapshot(root)
    if catalog is None:
        catalog = default_catalog(root)

    log(">>> Starting HTML post-processing...")
    reports = run_catalog(catalog, snapshot, verify=verify)
    print_summary(reports)
    log(">>> Done.")
    return 0
