from lyrictidy.models import Song
from lyrictidy.tidy import (
    LINE_COLUMNS,
    WORD_COLUMNS,
    count_words,
    lines_frame,
    remove_stop_words,
    tokenize,
    unnest_words,
)

BR = "\\n"


def _songs() -> list[Song]:
    return [
        Song(
            title="The Weight",
            artist="The Band",
            lyrics=BR.join(["[Verse 1]", "I pulled into Nazareth", "[Chorus]", "Take a load off, Fanny"]),
        ),
        Song(
            title="Dark Star",
            artist="Grateful Dead",
            lyrics=BR.join(["[Intro]", "Dark star crashes", "", "Pouring its light"]),
        ),
    ]


# ---------------------------------------------------------------------------
# tokenize
# ---------------------------------------------------------------------------


def test_tokenize_lowercases_and_drops_punctuation():
    assert tokenize("Take a load off, Fanny!") == ["take", "a", "load", "off", "fanny"]


def test_tokenize_keeps_contractions():
    assert tokenize("Don't you know") == ["don't", "you", "know"]


def test_tokenize_normalises_curly_apostrophes():
    assert tokenize("I’m feelin’ fine") == ["i'm", "feelin", "fine"]


def test_tokenize_keeps_digits_and_unicode():
    assert tokenize("Café 1989") == ["café", "1989"]


def test_tokenize_punctuation_only():
    assert tokenize("...!?") == []


# ---------------------------------------------------------------------------
# lines_frame
# ---------------------------------------------------------------------------


def test_lines_frame_columns_and_rows():
    frame = lines_frame(_songs())
    assert list(frame.columns) == LINE_COLUMNS
    assert frame["text"].tolist() == [
        "I pulled into Nazareth",
        "Take a load off, Fanny",
        "Dark star crashes",
        "Pouring its light",
    ]


def test_lines_frame_numbers_restart_per_song():
    frame = lines_frame(_songs())
    assert frame["line_number"].tolist() == [1, 2, 1, 2]
    assert frame["title"].tolist() == ["The Weight", "The Weight", "Dark Star", "Dark Star"]


def test_lines_frame_empty_corpus():
    frame = lines_frame([])
    assert frame.empty
    assert list(frame.columns) == LINE_COLUMNS


def test_lines_frame_song_without_lyrics():
    frame = lines_frame([Song(title="Silence", artist="Nobody")])
    assert frame.empty


# ---------------------------------------------------------------------------
# unnest_words
# ---------------------------------------------------------------------------


def test_unnest_words_one_row_per_word():
    words = unnest_words(lines_frame(_songs()[:1]))
    assert list(words.columns) == WORD_COLUMNS
    assert words["word"].tolist() == [
        "i", "pulled", "into", "nazareth", "take", "a", "load", "off", "fanny",
    ]
    assert words["line_number"].tolist() == [1, 1, 1, 1, 2, 2, 2, 2, 2]


def test_unnest_words_drops_punctuation_only_lines():
    words = unnest_words(lines_frame([Song(title="t", artist="a", lyrics="..." + BR + "hey")]))
    assert words["word"].tolist() == ["hey"]
    assert words["line_number"].tolist() == [2]


def test_unnest_words_empty():
    words = unnest_words(lines_frame([]))
    assert words.empty


# ---------------------------------------------------------------------------
# remove_stop_words
# ---------------------------------------------------------------------------


def test_remove_stop_words():
    words = unnest_words(lines_frame(_songs()[:1]))
    kept = remove_stop_words(words, {"i", "a", "into", "off"})
    assert kept["word"].tolist() == ["pulled", "nazareth", "take", "load", "fanny"]
    assert kept.index.tolist() == list(range(len(kept)))


def test_remove_stop_words_empty_set_keeps_everything():
    words = unnest_words(lines_frame(_songs()))
    assert len(remove_stop_words(words, set())) == len(words)


# ---------------------------------------------------------------------------
# count_words
# ---------------------------------------------------------------------------


def test_count_words_most_frequent_first():
    lines = lines_frame([Song(title="t", artist="a", lyrics=BR.join(["load load", "fanny load", "fanny"]))])
    counts = count_words(unnest_words(lines))
    assert list(counts.columns) == ["word", "n"]
    assert counts.values.tolist() == [["load", 3], ["fanny", 2]]


def test_count_words_ties_sorted_alphabetically():
    lines = lines_frame([Song(title="t", artist="a", lyrics="zed apple")])
    counts = count_words(unnest_words(lines))
    assert counts["word"].tolist() == ["apple", "zed"]


def test_count_words_grouped():
    counts = count_words(unnest_words(lines_frame(_songs())), by=["artist"])
    assert list(counts.columns) == ["artist", "word", "n"]
    dark = counts[counts["word"] == "dark"]
    assert dark["artist"].tolist() == ["Grateful Dead"]
