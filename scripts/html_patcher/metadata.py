#!/usr/bin/env python3
"""
Main-page <head> generator.
Builds the SEO, social-sharing, favicon and language-alternate block for one locale.
"""
from . import config
from .utils import PatchError


def get_locale(lang: str) -> dict:
    """Look up the per-language values; only the two catalog languages are known."""
    try:
        return config.LOCALES[lang]
    except KeyError:
        raise PatchError(f"No metadata table entry for language '{lang}'") from None


def build_main_head(lang: str) -> str:
    loc = get_locale(lang)
    title = f"{config.PERSON_NAME} - {loc['title_suffix']}"
    description = loc["description"]
    base_url = loc["base_url"]
    primary_url = config.LOCALES[config.PRIMARY_LANG]["base_url"]
    secondary_url = config.LOCALES[config.SECONDARY_LANG]["base_url"]

    return f"""<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<meta name="generator" content="{config.GENERATOR}">

<!-- Primary Meta Tags -->
<title>{title}</title>
<meta name="title" content="{title}">
<meta name="description" content="{description}">
<meta name="keywords" content="{config.KEYWORDS}">
<meta name="author" content="{config.PERSON_NAME}">
<meta name="robots" content="index, follow">

<!-- Favicons -->
<link rel="icon" type="image/x-icon" href="favicon.ico">
<link rel="icon" type="image/png" sizes="16x16" href="favicon-16x16.png">
<link rel="icon" type="image/png" sizes="32x32" href="favicon-32x32.png">
<link rel="apple-touch-icon" sizes="180x180" href="apple-touch-icon.png">
<link rel="icon" type="image/png" sizes="192x192" href="android-chrome-192x192.png">
<link rel="icon" type="image/png" sizes="512x512" href="android-chrome-512x512.png">

<!-- Open Graph / Facebook -->
<meta property="og:type" content="profile">
<meta property="og:url" content="{base_url}">
<meta property="og:title" content="{title}">
<meta property="og:description" content="{description}">
<meta property="og:image" content="{config.PORTRAIT_URL}">
<meta property="og:image:alt" content="{config.PORTRAIT_ALT}">
<meta property="og:locale" content="{loc['locale']}">
<meta property="og:site_name" content="{config.SITE_NAME}">

<!-- Twitter Card -->
<meta name="twitter:card" content="summary_large_image">
<meta name="twitter:url" content="{base_url}">
<meta name="twitter:title" content="{title}">
<meta name="twitter:description" content="{description}">
<meta name="twitter:image" content="{config.PORTRAIT_URL}">
<meta name="twitter:image:alt" content="{config.PORTRAIT_ALT}">

<!-- Alternate Language Links -->
<link rel="alternate" hreflang="{config.PRIMARY_LANG}" href="{primary_url}">
<link rel="alternate" hreflang="{config.SECONDARY_LANG}" href="{secondary_url}">
<link rel="alternate" hreflang="x-default" href="{primary_url}">

{config.MODERN_STYLESHEET_LINK}
</head>"""
