#!/usr/bin/env python3
"""
Patcher configuration.
Fixed catalog names, locale tables and the literal snippets the patches insert.
"""
from pathlib import Path

# --- CATALOG ---
PRIMARY_LANG = "en"
SECONDARY_LANG = "es"

HTML_DIR_NAME = "Ray-Winkelman_html"
PRIMARY_DIR = Path(HTML_DIR_NAME)
SECONDARY_DIR = Path(SECONDARY_LANG) / HTML_DIR_NAME

MAIN_PAGE = "page1.html"
LANDING_PAGE = "index.html"
STYLESHEET = "style.css"
PAGE_GLOB = "page*.html"

# Binary assets referenced by the generated head; not produced by the patcher
ASSET_FILES = (
    "favicon.ico",
    "favicon-16x16.png",
    "favicon-32x32.png",
    "apple-touch-icon.png",
    "android-chrome-192x192.png",
    "android-chrome-512x512.png",
    "ray.png",
)

# --- DOWNLOAD BUTTON ---
PDF_HREF = "../Ray-Winkelman.pdf"
BUTTON_CLASS = "download-button"
BUTTON_TEXT = {
    PRIMARY_LANG: "Download PDF",
    SECONDARY_LANG: "Descargar PDF",
}

# --- SITE METADATA ---
SITE_URL = "https://raywinkelman.com/"
PERSON_NAME = "Ray Winkelman"
PORTRAIT_URL = SITE_URL + "ray.png"
PORTRAIT_ALT = f"{PERSON_NAME} - Professional Photo"
SITE_NAME = f"{PERSON_NAME} Resume"
GENERATOR = "TeXstudio (http://texstudio.sourceforge.net/)"
KEYWORDS = (
    "Ray Winkelman, Software Engineer, CEO, Shadow Software LLC, .NET, React, AWS, "
    "Azure, Google Cloud, Tampa Bay, Software Architecture, Executive Leadership"
)

# Exactly two entries; the main-page head generator refuses anything else
LOCALES = {
    PRIMARY_LANG: {
        "base_url": SITE_URL,
        "locale": "en_US",
        "title_suffix": "Software Engineering Leader | CEO Shadow Software LLC",
        "description": (
            "Technology business leader with expertise in software architecture, "
            "executive leadership, and SDLC. CEO of Shadow Software LLC, delivering "
            "applications processing millions of e-commerce transactions for global "
            "brands including McDonalds, Subway, and Dairy Queen."
        ),
    },
    SECONDARY_LANG: {
        "base_url": SITE_URL + "es/",
        "locale": "es_ES",
        "title_suffix": "Líder en Ingeniería de Software | CEO Shadow Software LLC",
        "description": (
            "Líder tecnológico empresarial con experiencia en arquitectura de software, "
            "liderazgo ejecutivo y SDLC. CEO de Shadow Software LLC, entregando "
            "aplicaciones que procesan millones de transacciones de comercio electrónico "
            "para marcas globales como McDonalds, Subway y Dairy Queen."
        ),
    },
}

# --- LEGACY MARKUP ---
LEGACY_DOCTYPE = "<!DOCTYPE HTML PUBLIC '-//W3C//DTD HTML 4.01 Transitional//EN'>"
MODERN_DOCTYPE = "<!DOCTYPE html>"
LEGACY_STYLESHEET_LINK = "<link rel=StyleSheet href='style.css' type='text/css'>"
MODERN_STYLESHEET_LINK = '<link rel="stylesheet" href="style.css" type="text/css">'

# --- STYLESHEET ---
CSS_ANCHOR_OPEN = "#content {"
CSS_MARKER = "#content img {"
CSS_TEXT_ALIGN = "    text-align: center;"

CSS_IMAGE_RULES = """#content img {
    display: block;
    margin-left: auto;
    margin-right: auto;
    margin-top: 9mm;
    margin-bottom: 9mm;
    max-width: 100%;
    height: auto;
}
/* Adjust spacing between specific images */
#content img[src='image1.png'] {
    margin-bottom: 6.5mm;
}
#content img[src='image2.png'] {
    margin-top: 6.5mm;
    margin-bottom: 12.5mm;
}
#content img[src='image3.png'] {
    margin-top: 12.5mm;
}
/* Fixed floating download button */
.download-button {
    position: fixed;
    bottom: 30px;
    right: 30px;
    background-color: #22437f;
    color: white !important;
    padding: 15px 25px;
    border-radius: 50px;
    text-decoration: none !important;
    font-weight: bold;
    font-size: 16px;
    box-shadow: 0 4px 12px rgba(0, 0, 0, 0.3);
    transition: all 0.3s ease;
    z-index: 1000;
    display: inline-block;
    line-height: 1.4;
}
.download-button:hover {
    background-color: #1a3460;
    box-shadow: 0 6px 16px rgba(0, 0, 0, 0.4);
    transform: translateY(-2px);
    color: white !important;
}
.download-button::before {
    content: "⬇ ";
    font-size: 18px;
}"""
