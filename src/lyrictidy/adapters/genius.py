"""Adapter for genius.com song lyrics pages.

URL pattern: genius.com/<Artist-slug>-<song-slug>-lyrics

Page structure:
    <title>Artist – Song Title Lyrics | Genius Lyrics</title>
    <div data-lyrics-container="true">
        [Verse 1]<br/>
        First line<br/>
        <a href="/annotation"><span>Annotated line</span></a><br/>
        <div data-exclude-from-selection="true">(ads, headers)</div>
        ...
    </div>
    <div data-lyrics-container="true">...</div>   (long songs are split)

Lyrics are flattened into a raw blob: each <br> and each container boundary
becomes the literal ``\\n`` escape, and section markers are left in place
for :func:`lyrictidy.parser.parse_lyrics` to strip.
"""

import logging
import re

import httpx
from bs4 import BeautifulSoup, NavigableString, Tag

from ..exceptions import FetchError, ParseError
from ..models import Song
from ..parser import LINE_BREAK
from .base import SiteAdapter

logger = logging.getLogger(__name__)

_FETCH_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

# "Artist – Song Title Lyrics | Genius Lyrics" (en dash or hyphen)
_PAGE_TITLE_RE = re.compile(r"^(?P<artist>.+?)\s+[–-]\s+(?P<title>.+?)\s+Lyrics\b")

_URL_RE = re.compile(r"genius\.com/[^/?#]+-lyrics/?(?:[?#].*)?$")


class GeniusAdapter(SiteAdapter):
    """Adapter for genius.com lyrics pages."""

    @classmethod
    def can_handle(cls, url: str) -> bool:
        return bool(_URL_RE.search(url))

    def fetch(self, url: str) -> str:
        """GET the page with browser-like headers."""
        logger.info("Fetching %s", url)
        try:
            resp = httpx.get(
                url,
                headers=_FETCH_HEADERS,
                follow_redirects=True,
                timeout=15,
            )
        except httpx.RequestError as exc:
            raise FetchError(url, 0) from exc
        if resp.status_code != 200:
            raise FetchError(url, resp.status_code)
        return resp.text

    def extract(self, html: str, url: str) -> Song:
        soup = BeautifulSoup(html, "html.parser")

        containers = soup.find_all("div", attrs={"data-lyrics-container": True})
        if not containers:
            raise ParseError(url, "Could not find a lyrics container")

        lyrics = LINE_BREAK.join(_container_text(div) for div in containers)
        artist, title = _artist_and_title(soup, url)
        logger.debug("Extracted %d lyric containers for %r", len(containers), title)

        return Song(title=title, artist=artist, lyrics=lyrics, source_url=url)


def _container_text(container: Tag) -> str:
    """Flatten one lyrics container into a raw blob.

    ``<br>`` becomes the ``\\n`` escape; elements marked
    ``data-exclude-from-selection`` (inline ads, contributor headers) are
    skipped with everything inside them.
    """
    parts: list[str] = []
    _collect(container, parts)
    return "".join(parts)


def _collect(element: Tag, parts: list[str]) -> None:
    for child in element.children:
        if isinstance(child, NavigableString):
            # Source newlines are markup formatting, not rendered line breaks.
            parts.append(str(child).replace("\n", " "))
        elif isinstance(child, Tag):
            if child.name == "br":
                parts.append(LINE_BREAK)
            elif not child.has_attr("data-exclude-from-selection"):
                _collect(child, parts)


def _artist_and_title(soup: BeautifulSoup, url: str) -> tuple[str, str]:
    """Read artist and title from the <title> tag, falling back to the URL."""
    if soup.title and soup.title.string:
        m = _PAGE_TITLE_RE.match(soup.title.string.strip())
        if m:
            return m.group("artist").strip(), m.group("title").strip()
    return "", _title_from_url(url)


def _title_from_url(url: str) -> str:
    """Derive a title from the URL slug as a last-resort fallback."""
    slug = url.split("?")[0].split("#")[0].rstrip("/").split("/")[-1]
    slug = re.sub(r"-lyrics$", "", slug)
    return slug.replace("-", " ").strip()
