"""Raw lyrics → ordered LyricLine records.

Scraped lyrics arrive as one string per song, with line breaks stored as the
literal two-character escape ``\\n`` and section headers mixed in with the
content::

    [Verse 1]\\nLine one\\nLine two\\n[Chorus]\\nLine three

The pipeline:

  1. split_segments()        — split on the ``\\n`` escape
  2. strip_section_marker()  — drop one ``[Verse 1]`` style header, then one
                               ``[Chorus]`` style header
  3. parse_lyrics()          — drop empty segments and number the rest 1..N

Markers are recognised by shape, not by a list of known section names.
Anything that does not look like a marker is kept as lyric text.
"""

import re
from collections.abc import Iterable

from .models import LyricLine

# Literal backslash + "n", not a newline character.
LINE_BREAK = "\\n"

# [Verse 1], [Part 12], [Hook 2]
NUMBERED_MARKER_RE = re.compile(r"\[[^\d\[\]]+\d+\]")

# [Chorus], [Instrumental Break], [Pre-Chorus]
UNNUMBERED_MARKER_RE = re.compile(r"\[[^\d\[\]]+\]")


def split_segments(blob: str) -> list[str]:
    """Split a raw lyrics blob on the literal ``\\n`` escape.

    True newlines are left untouched.  An empty blob yields ``[""]``.
    """
    return blob.split(LINE_BREAK)


def strip_section_marker(segment: str) -> str:
    """Remove at most one numbered and one un-numbered section marker.

    The numbered pass runs first; the second pass catches markers with no
    digits at all.  Text around the marker is kept::

        strip_section_marker("[Verse 1]Hello")  -> "Hello"
        strip_section_marker("[Chorus]")        -> ""
    """
    segment = NUMBERED_MARKER_RE.sub("", segment, count=1)
    return UNNUMBERED_MARKER_RE.sub("", segment, count=1)


def parse_lyrics(blob: str) -> list[LyricLine]:
    """Parse a raw lyrics blob into numbered :class:`LyricLine` records.

    Segments that are empty or whitespace-only after marker removal are
    dropped and do not consume a line number.  Surviving text is trimmed.
    Never raises: input with no markers or no breaks is ordinary content.
    """
    texts = (strip_section_marker(seg).strip() for seg in split_segments(blob))
    return [
        LyricLine(line_number=n, text=text)
        for n, text in enumerate((t for t in texts if t), start=1)
    ]


def join_lines(lines: Iterable[LyricLine]) -> str:
    """Encode lines back into a raw blob using the ``\\n`` escape."""
    return LINE_BREAK.join(line.text for line in lines)
