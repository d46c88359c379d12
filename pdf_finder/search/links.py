"""
Purpose:
- Pull candidate document links out of an HTML page.
- selectolax is lenient: broken markup degrades to fewer links, never an exception.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Union
from urllib.parse import urljoin, urlparse
from selectolax.parser import HTMLParser

logger = logging.getLogger(__name__)


def _resolve(href: str, base_url: str) -> Optional[str]:
    """Resolve href against base_url; None if the result is not an absolute http(s) URL."""
    try:
        absolute = urljoin(base_url, href.strip())
        parsed = urlparse(absolute)
        # .hostname/.port raise on malformed netlocs, e.g. "http://[::1"
        host = parsed.hostname
        _ = parsed.port
    except ValueError:
        return None
    if parsed.scheme not in ("http", "https") or not host:
        return None
    return absolute


def extract_pdf_links(html: Union[str, bytes], base_url: str, suffix: str = ".pdf") -> List[str]:
    """
    Return absolute URLs of every <a href> whose resolved path ends with suffix,
    in document order. Duplicates are kept.
    """
    parser = HTMLParser(html)
    links: List[str] = []
    for node in parser.css("a[href]"):
        href = node.attributes.get("href")
        if not href:
            continue
        url = _resolve(href, base_url)
        if url is None:
            logger.debug("Skipping malformed href %r", href)
            continue
        if not urlparse(url).path.endswith(suffix):
            continue
        links.append(url)
    return links
