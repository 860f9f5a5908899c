import dataclasses

import pytest

from lyrictidy.models import LyricLine, Song


def test_lyric_line_stores_fields():
    line = LyricLine(line_number=3, text="Take a load off, Fanny")
    assert line.line_number == 3
    assert line.text == "Take a load off, Fanny"


def test_lyric_line_is_frozen():
    line = LyricLine(line_number=1, text="a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        line.line_number = 2


def test_lyric_lines_compare_by_value():
    assert LyricLine(1, "a") == LyricLine(1, "a")
    assert LyricLine(1, "a") != LyricLine(2, "a")


def test_song_defaults():
    song = Song(title="The Weight", artist="The Band")
    assert song.lyrics == ""
    assert song.source_url == ""


def test_song_all_fields():
    song = Song(
        title="The Weight",
        artist="The Band",
        lyrics="[Verse 1]\\nI pulled into Nazareth",
        source_url="https://genius.com/The-band-the-weight-lyrics",
    )
    assert song.lyrics.startswith("[Verse 1]")
    assert song.source_url == "https://genius.com/The-band-the-weight-lyrics"
