import pytest

from wayangwave.playlists import PlaylistCollection
from wayangwave.songlist import Song


def test_new_collection_is_empty():
    collection = PlaylistCollection()
    assert len(collection) == 0
    assert list(collection) == []


def test_add_creates_empty_playlist():
    collection = PlaylistCollection()
    songs = collection.add("Favorit")
    assert len(collection) == 1
    assert len(songs) == 0
    assert collection.get(0) is songs


def test_iteration_keeps_order():
    collection = PlaylistCollection()
    collection.add("Pagi")
    collection.add("Malam")
    assert [name for name, _ in collection] == ["Pagi", "Malam"]


def test_index_of():
    collection = PlaylistCollection()
    collection.add("Pagi")
    collection.add("Malam")
    assert collection.index_of("Malam") == 1
    assert collection.index_of("Pagi") == 0


def test_index_of_missing_raises():
    collection = PlaylistCollection()
    collection.add("Pagi")
    with pytest.raises(KeyError):
        collection.index_of("Siang")


def test_get_out_of_range_raises():
    collection = PlaylistCollection()
    with pytest.raises(IndexError):
        collection.get(0)
    collection.add("Pagi")
    with pytest.raises(IndexError):
        collection.get(-1)


def test_playlists_are_independent():
    collection = PlaylistCollection()
    first = collection.add("A")
    second = collection.add("B")
    first.append(Song("X", "Y", "Z"))
    assert len(collection.get(0)) == 1
    assert len(second) == 0