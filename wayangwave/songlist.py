"""Ordered list of songs, as used for user playlists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Song:
    """A song identified by its artist, album and title."""

    artist: str
    album: str
    title: str

    def __str__(self) -> str:
        return f"{{{self.artist}, {self.album}, {self.title}}}"


class SongList:
    """A sequence of songs that keeps insertion order."""

    def __init__(self, songs: Iterable[Song] | None = None):
        self._songs: list[Song] = list(songs) if songs is not None else []

    def append(self, song: Song) -> None:
        """Add a song as the new last element."""
        self._songs.append(song)

    def prepend(self, song: Song) -> None:
        """Add a song as the new first element."""
        self._songs.insert(0, song)

    def insert_after(self, index: int, song: Song) -> None:
        """Insert a song directly after the element at ``index``."""
        if not 0 <= index < len(self._songs):
            raise IndexError(f"no song at position {index}")
        self._songs.insert(index + 1, song)

    def pop_first(self) -> Song:
        """Remove and return the first song."""
        if not self._songs:
            raise IndexError("pop from an empty song list")
        return self._songs.pop(0)

    def pop_last(self) -> Song:
        """Remove and return the last song."""
        if not self._songs:
            raise IndexError("pop from an empty song list")
        return self._songs.pop()

    def remove_at(self, index: int) -> Song:
        """Remove and return the song at ``index``."""
        if not 0 <= index < len(self._songs):
            raise IndexError(f"Tidak ada lagu dengan urutan {index}")
        return self._songs.pop(index)

    def __contains__(self, song: object) -> bool:
        return song in self._songs

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs)

    def __str__(self) -> str:
        return "[" + ",".join(str(song) for song in self._songs) + "]"