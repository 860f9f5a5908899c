"""Tidy tables built from parsed lyrics.

Every table is a pandas DataFrame with one observation per row:

  lines table   artist, title, line_number, text
  words table   artist, title, line_number, word

Usage::

    lines = lines_frame(songs)
    words = remove_stop_words(unnest_words(lines), stop_words)
    counts = count_words(words, by=["artist"])
"""

import re
from collections.abc import Iterable

import pandas as pd

from .models import Song
from .parser import parse_lyrics

LINE_COLUMNS = ["artist", "title", "line_number", "text"]
WORD_COLUMNS = ["artist", "title", "line_number", "word"]

# don't, rock'n'roll, 1989
WORD_RE = re.compile(r"[^\W_]+(?:'[^\W_]+)*")

_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "`": "'"})


def tokenize(text: str) -> list[str]:
    """Lower-case *text* and return its words in order, punctuation dropped."""
    return WORD_RE.findall(text.lower().translate(_APOSTROPHES))


def lines_frame(songs: Iterable[Song]) -> pd.DataFrame:
    """Parse each song's raw lyrics and return the lines table."""
    rows = [
        (song.artist, song.title, line.line_number, line.text)
        for song in songs
        for line in parse_lyrics(song.lyrics)
    ]
    return pd.DataFrame(rows, columns=LINE_COLUMNS).astype({"line_number": "int64"})


def unnest_words(lines: pd.DataFrame) -> pd.DataFrame:
    """Explode a lines table into one row per word.

    The ``text`` column is replaced by ``word``; every other column is
    carried along.  Lines with no words (pure punctuation) disappear.
    """
    words = lines.assign(word=lines["text"].map(tokenize)).drop(columns="text")
    words = words.explode("word", ignore_index=True)
    return words.dropna(subset=["word"]).reset_index(drop=True)


def remove_stop_words(words: pd.DataFrame, stop_words: Iterable[str]) -> pd.DataFrame:
    """Drop rows whose ``word`` appears in *stop_words*."""
    stop_words = frozenset(stop_words)
    return words[~words["word"].isin(stop_words)].reset_index(drop=True)


def count_words(words: pd.DataFrame, by: list[str] | None = None) -> pd.DataFrame:
    """Return word frequencies as ``[*by, word, n]``, most frequent first."""
    by = list(by or [])
    counts = words.groupby([*by, "word"], sort=False).size().reset_index(name="n")
    return counts.sort_values(
        ["n", *by, "word"], ascending=[False] + [True] * (len(by) + 1)
    ).reset_index(drop=True)
