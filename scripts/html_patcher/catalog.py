#!/usr/bin/env python3
"""
Document catalog.
Describes the localized document sets explicitly instead of relying on the working directory.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List

from . import config


class Role(Enum):
    MAIN = "main"
    SECONDARY = "secondary"
    LANDING = "landing"


@dataclass(frozen=True)
class Document:
    path: Path
    lang: str
    role: Role


@dataclass(frozen=True)
class DocumentSet:
    name: str
    lang: str
    root: Path          # working-tree root, snapshot paths are relative to it
    rel_dir: Path       # directory of the set, relative to root
    required: bool = True
    main_page: str = config.MAIN_PAGE
    landing_page: str = config.LANDING_PAGE
    stylesheet: str = config.STYLESHEET
    page_glob: str = config.PAGE_GLOB

    @property
    def directory(self) -> Path:
        return self.root / self.rel_dir

    @property
    def stylesheet_path(self) -> Path:
        return self.directory / self.stylesheet

    @property
    def main(self) -> Document:
        return Document(self.directory / self.main_page, self.lang, Role.MAIN)

    @property
    def landing(self) -> Document:
        return Document(self.directory / self.landing_page, self.lang, Role.LANDING)

    def secondary_pages(self) -> List[Document]:
        """Other pages in glob order; the main page is excluded."""
        return [
            Document(p, self.lang, Role.SECONDARY)
            for p in self.directory.glob(self.page_glob)
            if p.name != self.main_page and p.is_file()
        ]

    def relative(self, name: str) -> Path:
        return self.rel_dir / name


def default_catalog(root: Path) -> List[DocumentSet]:
    root = Path(root)
    return [
        DocumentSet("English", config.PRIMARY_LANG, root, config.PRIMARY_DIR, required=True),
        DocumentSet("Spanish", config.SECONDARY_LANG, root, config.SECONDARY_DIR, required=False),
    ]
