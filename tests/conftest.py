import pytest
from pathlib import Path

from pypdf import PdfWriter

from html_patcher import config

LEGACY_PAGE = """<!DOCTYPE HTML PUBLIC '-//W3C//DTD HTML 4.01 Transitional//EN'>
<html>
<head>
<title>Ray-Winkelman</title>
<meta http-equiv="Content-Type" content="text/html; charset=UTF-8">
<link rel=StyleSheet href='style.css' type='text/css'>
</head>
<body>
<div id="content">
<img src='image1.png'>
<p>Experience</p>
</div>
</body>
</html>
"""

LEGACY_CSS = """body {
    margin: 0;
}
#content {
    width: 210mm;
    margin: auto;
}
p {
    margin: 0;
}
"""

LANDING_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<title>Ray Winkelman</title>
<script type="application/ld+json">{"@type": "Person", "name": "Ray Winkelman"}</script>
</head>
<body>
<h1>Ray Winkelman</h1>
</body>
</html>
"""


class FakeSnapshot:
    """In-memory snapshot source: relative posix path -> bytes."""

    def __init__(self, root: Path, files=None):
        self.root = Path(root)
        self.files = dict(files or {})
        self.requests = []

    def restore(self, rel_path) -> bool:
        key = Path(rel_path).as_posix()
        self.requests.append(key)
        if key not in self.files:
            return False
        target = self.root / key
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.files[key])
        return True


def write_pdf(path: Path) -> None:
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        writer.write(f)


def build_set(directory: Path, pages: int = 3) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / config.STYLESHEET).write_text(LEGACY_CSS, encoding="utf-8")
    for n in range(1, pages + 1):
        (directory / f"page{n}.html").write_text(LEGACY_PAGE, encoding="utf-8")
    (directory / config.LANDING_PAGE).write_text(LANDING_PAGE, encoding="utf-8")
    for i, name in enumerate(config.ASSET_FILES):
        (directory / name).write_bytes(bytes([0x89, 0x50, 0x4E, 0x47, i]) + name.encode())
    write_pdf(directory / config.PDF_HREF)


@pytest.fixture
def legacy_page():
    return LEGACY_PAGE


@pytest.fixture
def legacy_css():
    return LEGACY_CSS


@pytest.fixture
def landing_page():
    return LANDING_PAGE


@pytest.fixture
def snapshot_factory():
    return FakeSnapshot


@pytest.fixture
def site(tmp_path):
    """A working tree with both document sets, every asset and the PDFs."""
    build_set(tmp_path / config.PRIMARY_DIR)
    build_set(tmp_path / config.SECONDARY_DIR)
    return tmp_path


def snapshot_tree(root: Path) -> dict:
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}


@pytest.fixture
def tree_state():
    return snapshot_tree
