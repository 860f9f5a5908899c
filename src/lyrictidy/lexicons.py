"""Loaders for externally supplied reference tables.

Stop-word lists and sentiment lexicons are plain CSV files with a ``word``
column.  A sentiment lexicon carries one scoring column:

  ``sentiment``  categorical label (``positive`` / ``negative``), Bing style
  ``value``      numeric score (-5..5), AFINN style
"""

import logging
from pathlib import Path

import pandas as pd

from .exceptions import LexiconError

logger = logging.getLogger(__name__)

CATEGORICAL = "categorical"
NUMERIC = "numeric"

_SCORE_COLUMNS = {"sentiment": CATEGORICAL, "value": NUMERIC}


def _read_word_table(path: str | Path) -> pd.DataFrame:
    path = Path(path)
    try:
        table = pd.read_csv(path, dtype={"word": str}, keep_default_na=False)
    except FileNotFoundError as exc:
        raise LexiconError(str(path), "file not found") from exc
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise LexiconError(str(path), f"unreadable CSV ({exc})") from exc
    if "word" not in table.columns:
        raise LexiconError(str(path), "missing 'word' column")
    table["word"] = table["word"].str.strip().str.lower()
    return table[table["word"] != ""]


def load_stop_words(path: str | Path) -> frozenset[str]:
    """Return the set of stop words listed in the CSV at *path*."""
    words = frozenset(_read_word_table(path)["word"])
    logger.debug("Loaded %d stop words from %s", len(words), path)
    return words


def load_lexicon(path: str | Path) -> pd.DataFrame:
    """Load a sentiment lexicon as a two-column ``word`` + score DataFrame.

    Duplicate words keep their first entry so a join never multiplies rows.

    Raises LexiconError if the file has no usable scoring column.
    """
    table = _read_word_table(path)
    present = [col for col in _SCORE_COLUMNS if col in table.columns]
    if len(present) != 1:
        raise LexiconError(
            str(path), "expected exactly one of 'sentiment' or 'value' columns"
        )
    score = present[0]
    lexicon = table[["word", score]].copy()

    if score == "value":
        values = pd.to_numeric(lexicon["value"], errors="coerce")
        if values.isna().any():
            raise LexiconError(str(path), "non-numeric entries in 'value' column")
        lexicon["value"] = values
    else:
        lexicon["sentiment"] = lexicon["sentiment"].astype(str).str.strip().str.lower()

    deduped = lexicon.drop_duplicates(subset="word", keep="first").reset_index(drop=True)
    if len(deduped) < len(lexicon):
        logger.debug("Dropped %d duplicate words from %s", len(lexicon) - len(deduped), path)
    logger.debug("Loaded %s lexicon with %d words from %s", score, len(deduped), path)
    return deduped


def lexicon_kind(lexicon: pd.DataFrame) -> str:
    """Return ``"categorical"`` or ``"numeric"`` for a loaded lexicon."""
    for col, kind in _SCORE_COLUMNS.items():
        if col in lexicon.columns:
            return kind
    raise ValueError("lexicon has neither a 'sentiment' nor a 'value' column")
