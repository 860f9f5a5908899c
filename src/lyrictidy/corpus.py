"""CSV corpus input and tidy-table output.

A corpus is a CSV with one song per row::

    artist,title,lyrics[,source_url]
    The Band,The Weight,[Verse 1]\\nI pulled into Nazareth\\n...

The ``lyrics`` cell is a raw blob (literal ``\\n`` escapes between lines),
the form scraped lyrics are usually saved in.
"""

import logging
from pathlib import Path

import pandas as pd

from .exceptions import CorpusError
from .models import Song

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("artist", "title", "lyrics")


def load_songs(path: str | Path) -> list[Song]:
    """Read a corpus CSV into :class:`Song` objects, in file order.

    Raises CorpusError if the file is missing, unreadable, or lacks a
    required column.
    """
    path = Path(path)
    try:
        table = pd.read_csv(path, dtype=str, keep_default_na=False)
    except FileNotFoundError as exc:
        raise CorpusError(str(path), "file not found") from exc
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise CorpusError(str(path), f"unreadable CSV ({exc})") from exc

    missing = [col for col in REQUIRED_COLUMNS if col not in table.columns]
    if missing:
        raise CorpusError(str(path), f"missing column(s): {', '.join(missing)}")

    if "source_url" not in table.columns:
        table["source_url"] = ""

    songs = [
        Song(
            title=row.title,
            artist=row.artist,
            lyrics=row.lyrics,
            source_url=row.source_url,
        )
        for row in table.itertuples(index=False)
    ]
    logger.debug("Loaded %d songs from %s", len(songs), path)
    return songs


def write_frame(frame: pd.DataFrame, dest: str | Path) -> None:
    """Write a tidy table to *dest* as UTF-8 CSV without the index."""
    frame.to_csv(dest, index=False, encoding="utf-8")
