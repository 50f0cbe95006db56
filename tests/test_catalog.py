import pytest

from wayangwave.catalog import (
    MAX_ALBUMS,
    MAX_ARTISTS,
    Album,
    Artist,
    Catalog,
    DuplicateSongError,
)


@pytest.fixture
def catalog():
    c = Catalog()
    c.add_artist("Sheila")
    c.add_album("Kisah")
    c.add_song("Dan")
    c.add_song("Sephia")
    c.add_artist("Dewa")
    c.add_album("Bintang")
    c.add_song("Kangen")
    return c


def test_current_entries_follow_last_added(catalog):
    assert catalog.current_artist() == "Dewa"
    assert catalog.current_album() == "Bintang"
    assert catalog.current_song() == "Kangen"


def test_artist_index(catalog):
    assert catalog.artist_index("Sheila") == 0
    assert catalog.artist_index("Dewa") == 1


def test_artist_index_missing(catalog):
    with pytest.raises(KeyError):
        catalog.artist_index("Nobody")


def test_album_index(catalog):
    assert catalog.album_index(0, "Kisah") == 0
    with pytest.raises(KeyError):
        catalog.album_index(0, "Bintang")


def test_song_index_is_next_position(catalog):
    assert catalog.song_index(0, 0, "Baru") == len(catalog.artists[0].albums[0].songs)


def test_song_index_duplicate(catalog):
    with pytest.raises(DuplicateSongError):
        catalog.song_index(0, 0, "Dan")


def test_add_song_duplicate_leaves_album_unchanged(catalog):
    before = list(catalog.artists[1].albums[0].songs)
    with pytest.raises(DuplicateSongError):
        catalog.add_song("Kangen")
    assert catalog.artists[1].albums[0].songs == before


def test_structure(catalog):
    assert catalog.artists[0] == Artist("Sheila", [Album("Kisah", ["Dan", "Sephia"])])
    assert len(catalog) == 2


def test_add_album_without_artist():
    with pytest.raises(LookupError):
        Catalog().add_album("Kisah")


def test_current_song_on_empty_album():
    c = Catalog()
    c.add_artist("A")
    c.add_album("B")
    with pytest.raises(LookupError):
        c.current_song()


def test_artist_limit():
    c = Catalog()
    for i in range(MAX_ARTISTS):
        c.add_artist(f"a{i}")
    with pytest.raises(OverflowError):
        c.add_artist("extra")
    assert len(c) == MAX_ARTISTS


def test_album_limit():
    c = Catalog()
    c.add_artist("A")
    for i in range(MAX_ALBUMS):
        c.add_album(f"b{i}")
    with pytest.raises(OverflowError):
        c.add_album("extra")
    assert len(c.artists[0].albums) == MAX_ALBUMS