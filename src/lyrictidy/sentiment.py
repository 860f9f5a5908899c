"""Lexicon-based sentiment scoring over a tidy words table.

Categorical lexicons are scored by counting ``positive`` and ``negative``
words per group (``sentiment = positive - negative``).  Numeric lexicons are
scored by summing ``value`` per group.
"""

import pandas as pd

from .lexicons import CATEGORICAL, lexicon_kind


def join_sentiment(words: pd.DataFrame, lexicon: pd.DataFrame) -> pd.DataFrame:
    """Inner-join *words* with *lexicon* on ``word``.

    Words missing from the lexicon are dropped; original row order is kept.
    """
    return words.merge(lexicon, on="word", how="inner", sort=False)


def add_chunk_index(frame: pd.DataFrame, chunk_size: int) -> pd.DataFrame:
    """Add an ``index`` column grouping every *chunk_size* lines together.

    Lines 1..chunk_size get index 0, the next chunk_size lines index 1, ...
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
    return frame.assign(index=(frame["line_number"] - 1) // chunk_size)


def net_sentiment(scored: pd.DataFrame, by: list[str]) -> pd.DataFrame:
    """Aggregate a joined words table into one sentiment score per group."""
    if lexicon_kind(scored) == CATEGORICAL:
        return _net_categorical(scored, by)
    totals = scored.groupby(by, sort=False)["value"].sum().reset_index(name="sentiment")
    return totals


def _net_categorical(scored: pd.DataFrame, by: list[str]) -> pd.DataFrame:
    if scored.empty:
        return pd.DataFrame(columns=[*by, "positive", "negative", "sentiment"])
    counts = scored.groupby([*by, "sentiment"], sort=False).size().unstack(fill_value=0)
    for label in ("positive", "negative"):
        if label not in counts.columns:
            counts[label] = 0
    summary = counts[["positive", "negative"]].reset_index()
    summary.columns.name = None
    summary["sentiment"] = summary["positive"] - summary["negative"]
    return summary
