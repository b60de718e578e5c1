#!/usr/bin/env python3
"""
Asset recovery.
Restores accidentally deleted binary assets and the landing page from the last commit.
"""
import subprocess
from pathlib import Path
from typing import List

from . import config
from .catalog import DocumentSet
from .utils import log


class GitSnapshot:
    """Snapshot source backed by `git checkout HEAD -- <path>`."""

    def __init__(self, repo_root: Path, revision: str = "HEAD"):
        self.repo_root = Path(repo_root)
        self.revision = revision

    def restore(self, rel_path: Path) -> bool:
        cmd = ["git", "checkout", self.revision, "--", Path(rel_path).as_posix()]
        try:
            proc = subprocess.run(
                cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            log(f"    [debug] git not runnable: {e}")
            return False
        return proc.returncode == 0


def restore_file(doc_set: DocumentSet, name: str, snapshot) -> bool:
    """Restore one file of the set if it is missing. Returns True if the file is present afterwards."""
    if (doc_set.directory / name).is_file():
        return True
    log(f"  Restoring {name} from snapshot...")
    if snapshot.restore(doc_set.relative(name)) and (doc_set.directory / name).is_file():
        return True
    log(f"  [Warn] Could not restore {name}")
    return False


def restore_assets(doc_set: DocumentSet, snapshot, names=config.ASSET_FILES) -> List[str]:
    """Restore every missing asset; returns the names still missing."""
    log(f"Checking images in {doc_set.rel_dir.as_posix()}...")
    return [name for name in names if not restore_file(doc_set, name, snapshot)]


def restore_landing_page(doc_set: DocumentSet, snapshot) -> bool:
    return restore_file(doc_set, doc_set.landing_page, snapshot)
