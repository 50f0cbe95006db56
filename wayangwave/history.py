"""Stack of recently played songs."""

from __future__ import annotations

from wayangwave.songlist import Song

CAPACITY = 15


class SongHistory:
    """Recently played songs, newest on top; pushes beyond capacity are dropped."""

    def __init__(self):
        self._songs: list[Song] = []

    def push(self, song: Song) -> None:
        """Put a song on top unless the history is full."""
        if len(self._songs) < CAPACITY:
            self._songs.append(song)

    def pop(self) -> Song:
        """Remove and return the song on top."""
        if not self._songs:
            raise IndexError("pop from an empty history")
        return self._songs.pop()

    def top(self) -> Song:
        """Return the song on top without removing it."""
        if not self._songs:
            raise IndexError("history is empty")
        return self._songs[-1]

    def __len__(self) -> int:
        return len(self._songs)