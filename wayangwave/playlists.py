"""A user's collection of named playlists."""

from __future__ import annotations

from typing import Iterator

from wayangwave.songlist import SongList

INITIAL_SIZE = 10


class PlaylistCollection:
    """Named playlists kept in creation order."""

    def __init__(self):
        self._names: list[str] = []
        self._lists: list[SongList] = []

    def add(self, name: str) -> SongList:
        """Create an empty playlist with the given name and return it."""
        songs = SongList()
        self._names.append(name)
        self._lists.append(songs)
        return songs

    def get(self, index: int) -> SongList:
        """Return the playlist at ``index``."""
        if not 0 <= index < len(self._lists):
            raise IndexError(f"Tidak ada playlist dengan ID {index + 1}")
        return self._lists[index]

    def index_of(self, name: str) -> int:
        """Return the index of the playlist with this name."""
        try:
            return self._names.index(name)
        except ValueError:
            raise KeyError(f"Tidak ada playlist dengan nama \"{name}\"") from None

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[tuple[str, SongList]]:
        return zip(self._names, self._lists)