from dataclasses import dataclass


@dataclass(frozen=True)
class LyricLine:
    """A single cleaned line of lyrics.

    Example: LyricLine(line_number=1, text="Line one")
    line_number is 1-based and counts only lines that survived cleaning.
    """

    line_number: int
    text: str


@dataclass
class Song:
    """Canonical representation of a song, source-agnostic."""

    title: str
    artist: str
    lyrics: str = ""  # raw blob, line breaks encoded as a literal "\n" escape
    source_url: str = ""
