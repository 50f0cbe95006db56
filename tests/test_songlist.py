import pytest

from wayangwave.songlist import Song, SongList


@pytest.fixture
def songs():
    return [
        Song("Artist A", "Album A", "Song 1"),
        Song("Artist A", "Album A", "Song 2"),
        Song("Artist B", "Album B", "Song 3"),
    ]


def test_empty_list(songs):
    playlist = SongList()
    assert len(playlist) == 0
    assert list(playlist) == []
    assert songs[0] not in playlist


def test_empty_str():
    assert str(SongList()) == "[]"


def test_str_format(songs):
    playlist = SongList(songs[:2])
    assert str(playlist) == "[{Artist A, Album A, Song 1},{Artist A, Album A, Song 2}]"


def test_append_and_prepend_order(songs):
    playlist = SongList()
    playlist.append(songs[1])
    playlist.append(songs[2])
    playlist.prepend(songs[0])
    assert list(playlist) == songs


def test_insert_after(songs):
    playlist = SongList([songs[0], songs[2]])
    playlist.insert_after(0, songs[1])
    assert list(playlist) == songs


def test_insert_after_invalid_index(songs):
    playlist = SongList()
    with pytest.raises(IndexError):
        playlist.insert_after(0, songs[0])


def test_pop_first_and_last(songs):
    playlist = SongList(songs)
    assert playlist.pop_first() == songs[0]
    assert playlist.pop_last() == songs[2]
    assert list(playlist) == [songs[1]]


def test_pop_last_single_element_empties(songs):
    playlist = SongList([songs[0]])
    assert playlist.pop_last() == songs[0]
    assert len(playlist) == 0


def test_pop_from_empty_raises():
    with pytest.raises(IndexError):
        SongList().pop_first()
    with pytest.raises(IndexError):
        SongList().pop_last()


def test_remove_at(songs):
    playlist = SongList(songs)
    removed = playlist.remove_at(1)
    assert removed == songs[1]
    assert list(playlist) == [songs[0], songs[2]]


def test_remove_at_out_of_range(songs):
    playlist = SongList(songs)
    with pytest.raises(IndexError):
        playlist.remove_at(3)
    assert len(playlist) == 3


def test_contains_requires_all_fields(songs):
    playlist = SongList(songs)
    assert Song("Artist A", "Album A", "Song 1") in playlist
    assert Song("Artist B", "Album A", "Song 1") not in playlist


def test_constructor_copies_input(songs):
    source = list(songs)
    playlist = SongList(source)
    source.clear()
    assert len(playlist) == 3