"""
Article ability — fetch a URL and pick the date, title and body text
out of arbitrary HTML.

Uses requests + BeautifulSoup. Each field is found by an ordered list of
strategies; the first one that yields a non-empty value wins. No JS
rendering, so pages that build their content client-side come back
mostly empty.
"""

from __future__ import annotations
import copy
import logging
import re
from typing import Callable, Iterable, Optional

import requests
from bs4 import BeautifulSoup, Tag

from errors import ApiError, FETCH_ERROR, FETCH_FAILED, FETCH_TIMEOUT
from models import ParsedArticle

log = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

Strategy = Callable[[BeautifulSoup], Optional[str]]

DATE_META_SELECTORS = [
    'meta[property="article:published_time"]',
    'meta[name="article:published_time"]',
    'meta[name="pubdate"]',
    'meta[name="date"]',
]
DATE_CLASS_SELECTORS = [
    ".post-date",
    ".entry-date",
    ".article-date",
    ".date",
    '[class*="date"]',
]
MIN_DATE_TEXT = 6  # rejects icon-only / empty date widgets

CONTENT_SELECTORS = [
    "article",
    "main article",
    "main",
    ".post",
    ".post-content",
    ".article-content",
    ".entry-content",
    ".content",
    '[itemprop="articleBody"]',
]
MIN_CONTENT_CHARS = 100  # skips containers holding just a "read more" link
NOISE = "script, style, nav, footer, header, noscript"
# html.parser adds no <body> when the tag is omitted; drop the head instead
HEADLESS_NOISE = NOISE + ", head, title"

_SPACE_BEFORE_NEWLINE = re.compile(r"\s+\n")
_BLANK_LINES = re.compile(r"\n{3,}")


# ── Strategy builders ───────────────────────────────────────────

def _clean_value(value) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _attr_of(selector: str, attr: str) -> Strategy:
    def strategy(soup: BeautifulSoup) -> Optional[str]:
        tag = soup.select_one(selector)
        return _clean_value(tag.get(attr)) if tag else None
    return strategy


def _text_of(selector: str, min_length: int = 0) -> Strategy:
    def strategy(soup: BeautifulSoup) -> Optional[str]:
        tag = soup.select_one(selector)
        if not tag:
            return None
        text = tag.get_text().strip()
        return text if len(text) > min_length else None
    return strategy


def first_match(soup: BeautifulSoup, strategies: Iterable[Strategy]) -> Optional[str]:
    """Run strategies in order, stopping at the first non-empty result."""
    return next((v for v in (s(soup) for s in strategies) if v), None)


DATE_STRATEGIES: list[Strategy] = (
    [_attr_of("time[datetime]", "datetime")]
    + [_attr_of(sel, "content") for sel in DATE_META_SELECTORS]
    + [_text_of(sel, MIN_DATE_TEXT) for sel in DATE_CLASS_SELECTORS]
)

TITLE_STRATEGIES: list[Strategy] = [
    _attr_of('meta[property="og:title"]', "content"),
    _attr_of('meta[name="twitter:title"]', "content"),
    _text_of("h1"),
    _text_of("title"),
]


# ── Extractors ──────────────────────────────────────────────────

def extract_date(soup: BeautifulSoup) -> Optional[str]:
    return first_match(soup, DATE_STRATEGIES)


def extract_title(soup: BeautifulSoup) -> Optional[str]:
    return first_match(soup, TITLE_STRATEGIES)


def clean_text(text: str) -> str:
    """Collapse any whitespace ending in a newline, blank lines included, to one newline."""
    text = _SPACE_BEFORE_NEWLINE.sub("\n", text)
    text = _BLANK_LINES.sub("\n\n", text)
    return text.strip()


def container_text(tag: Tag, noise_selector: str = NOISE) -> str:
    """Cleaned text of `tag` without scripts, styles and page chrome.

    Works on a copy so the parsed document is left untouched.
    """
    clone = copy.copy(tag)
    for noise in clone.select(noise_selector):
        # a nested match is already gone with its decomposed ancestor
        if not noise.decomposed:
            noise.decompose()
    return clean_text(clone.get_text())


def extract_content(soup: BeautifulSoup) -> Optional[str]:
    for selector in CONTENT_SELECTORS:
        tag = soup.select_one(selector)
        if tag is None:
            continue
        text = container_text(tag)
        if len(text) > MIN_CONTENT_CHARS:
            log.debug(f"Content matched {selector!r} ({len(text)} chars)")
            return text

    # Fallback: whatever the page body holds, however short.
    if soup.body is not None:
        return container_text(soup.body) or None
    return container_text(soup, HEADLESS_NOISE) or None


def parse_article(html: str) -> ParsedArticle:
    soup = BeautifulSoup(html, "html.parser")
    return ParsedArticle(
        date=extract_date(soup),
        title=extract_title(soup),
        content=extract_content(soup),
    )


# ── Network ─────────────────────────────────────────────────────

def fetch_html(url: str, timeout: Optional[float] = None) -> str:
    """GET a page and return its HTML, mapping failures to ApiError kinds."""
    try:
        resp = requests.get(url, headers=HEADERS, timeout=timeout)
    except requests.Timeout as e:
        log.warning(f"Fetch timed out after {timeout}s: {url} ({e})")
        raise ApiError(FETCH_TIMEOUT) from e
    except requests.RequestException as e:
        log.warning(f"Fetch failed: {url} ({e})")
        raise ApiError(FETCH_ERROR) from e

    if not resp.ok:
        log.warning(f"Fetch returned HTTP {resp.status_code}: {url}")
        raise ApiError(FETCH_FAILED)
    return resp.text
