from html_patcher import config
from html_patcher.catalog import default_catalog
from html_patcher.head import head_patch
from html_patcher.verify import check_download_button, check_main_page, check_pdf, verify_document_set


def test_check_main_page_on_generated_head(legacy_page):
    assert check_main_page(head_patch("en", is_main=True)(legacy_page)) == []


def test_check_main_page_on_legacy_head(legacy_page):
    problems = check_main_page(legacy_page)
    assert any("hreflang" in p for p in problems)
    assert "missing og:title" in problems


def test_check_download_button_counts(legacy_page):
    assert check_download_button(legacy_page) == ["expected one download button, found 0"]


def test_check_pdf(tmp_path):
    assert check_pdf(tmp_path / "cv.pdf")[0].startswith("download target missing")

    garbage = tmp_path / "bad.pdf"
    garbage.write_bytes(b"not a pdf")
    assert check_pdf(garbage)[0].startswith("download target unreadable")


def test_check_pdf_valid(site):
    assert check_pdf(site / "Ray-Winkelman.pdf") == []


def test_unpatched_set_reports_problems(site):
    problems = verify_document_set(default_catalog(site)[0])
    assert "page1.html: missing og:title" in problems
    assert "index.html: expected one download button, found 0" in problems
    assert f"{config.STYLESHEET}: image rules present 0 times" in problems
