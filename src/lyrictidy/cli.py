import logging
import re
import sys
from pathlib import Path

import click
import pandas as pd

from .corpus import load_songs, write_frame
from .exceptions import (
    CorpusError,
    FetchError,
    LexiconError,
    ParseError,
    UnsupportedSiteError,
)
from .lexicons import load_lexicon, load_stop_words
from .models import Song
from .registry import get_adapter
from .sentiment import add_chunk_index, join_sentiment, net_sentiment
from .tidy import lines_frame, remove_stop_words, unnest_words

logger = logging.getLogger(__name__)


def _slugify(text: str) -> str:
    """Convert a string to a lowercase hyphenated slug suitable for filenames."""
    text = text.lower()
    text = re.sub(r"[^\w\s-]", "", text)   # drop punctuation
    text = re.sub(r"[\s_]+", "-", text)     # spaces/underscores → hyphens
    text = re.sub(r"-{2,}", "-", text)      # collapse multiple hyphens
    return text.strip("-")


def _default_filename(stem: str, command: str) -> str:
    return f"{stem or 'lyrics'}-{command}.csv"


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _load_source(source: str) -> tuple[list[Song], str]:
    """Return the songs named by *source* and a slug for default filenames.

    *source* is either a lyrics page URL or the path of a corpus CSV.
    """
    if not source.startswith(("http://", "https://")):
        try:
            songs = load_songs(source)
        except CorpusError as exc:
            _fail(str(exc))
        return songs, _slugify(Path(source).stem)

    try:
        adapter = get_adapter(source)
    except UnsupportedSiteError as exc:
        click.echo(f"Error: {exc}", err=True)
        click.echo("Supported sites: genius.com", err=True)
        sys.exit(1)

    try:
        song = adapter.scrape(source)
    except FetchError as exc:
        msg = f"Error: Could not fetch {exc.url}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        if exc.status_code == 403:
            msg += " — save the page lyrics into a corpus CSV and pass its path instead"
        click.echo(msg, err=True)
        sys.exit(1)
    except ParseError as exc:
        _fail(str(exc))

    stem = "-".join(part for part in (_slugify(song.artist), _slugify(song.title)) if part)
    return [song], stem


def _load_stop_words(path: str | None) -> frozenset[str]:
    if path is None:
        return frozenset()
    try:
        return load_stop_words(path)
    except LexiconError as exc:
        _fail(str(exc))


def _emit(frame: pd.DataFrame, stem: str, command: str, output_path: str | None,
          stdout: bool) -> None:
    if stdout:
        click.echo(frame.to_csv(index=False), nl=False)
        return

    dest = Path(output_path) if output_path else Path(_default_filename(stem, command))
    write_frame(frame, dest)
    click.echo(f"Written to {dest}")


def _output_options(func):
    func = click.option("--stdout", is_flag=True, default=False,
                        help="Print CSV to stdout instead of writing a file.")(func)
    func = click.option("-o", "--output", "output_path", default=None, metavar="PATH",
                        help="Output file path (default: <source>-<command>.csv)")(func)
    return func


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log progress to stderr.")
def main(verbose: bool) -> None:
    """Turn song lyrics into tidy tables for text analysis.

    \b
    SOURCE is either a lyrics page URL or a corpus CSV with
    artist, title and lyrics columns.
    Supported sites:
      - genius.com
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


@main.command()
@click.argument("source")
@_output_options
def lines(source: str, output_path: str | None, stdout: bool) -> None:
    """One row per lyric line, section headers and blank lines removed."""
    songs, stem = _load_source(source)
    frame = lines_frame(songs)
    logger.info("Parsed %d lines from %d songs", len(frame), len(songs))
    _emit(frame, stem, "lines", output_path, stdout)


@main.command()
@click.argument("source")
@click.option("--stop-words", "stop_words_path", default=None, metavar="PATH",
              help="CSV with a 'word' column of words to drop.")
@_output_options
def words(source: str, stop_words_path: str | None, output_path: str | None,
          stdout: bool) -> None:
    """One row per word, optionally with stop words removed."""
    songs, stem = _load_source(source)
    stop_words = _load_stop_words(stop_words_path)
    frame = remove_stop_words(unnest_words(lines_frame(songs)), stop_words)
    logger.info("Kept %d words from %d songs", len(frame), len(songs))
    _emit(frame, stem, "words", output_path, stdout)


@main.command()
@click.argument("source")
@click.option("--lexicon", "lexicon_path", required=True, metavar="PATH",
              help="CSV with 'word' and either 'sentiment' or 'value' columns.")
@click.option("--stop-words", "stop_words_path", default=None, metavar="PATH",
              help="CSV with a 'word' column of words to drop before scoring.")
@click.option("--chunk-size", default=None, type=click.IntRange(min=1), metavar="N",
              help="Score each song in chunks of N lines instead of as a whole.")
@_output_options
def sentiment(source: str, lexicon_path: str, stop_words_path: str | None,
              chunk_size: int | None, output_path: str | None, stdout: bool) -> None:
    """Net lexicon sentiment per song (or per chunk of lines)."""
    songs, stem = _load_source(source)
    stop_words = _load_stop_words(stop_words_path)
    try:
        lexicon = load_lexicon(lexicon_path)
    except LexiconError as exc:
        _fail(str(exc))

    words_table = remove_stop_words(unnest_words(lines_frame(songs)), stop_words)
    by = ["artist", "title"]
    if chunk_size:
        words_table = add_chunk_index(words_table, chunk_size)
        by.append("index")

    frame = net_sentiment(join_sentiment(words_table, lexicon), by=by)
    _emit(frame, stem, "sentiment", output_path, stdout)
