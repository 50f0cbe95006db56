"""Bounded first-in first-out queue of songs to play."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from wayangwave.songlist import Song

CAPACITY = 20


class QueueFullError(OverflowError):
    """Raised when a song is added to a full queue."""


class SongQueue:
    """Songs waiting to be played, at most CAPACITY of them."""

    def __init__(self):
        self._songs: deque[Song] = deque()

    def is_empty(self) -> bool:
        return not self._songs

    def is_full(self) -> bool:
        return len(self._songs) == CAPACITY

    def enqueue(self, song: Song) -> None:
        """Add a song at the tail."""
        if self.is_full():
            raise QueueFullError(f"queue holds at most {CAPACITY} songs")
        self._songs.append(song)

    def dequeue(self) -> Song:
        """Remove and return the song at the head."""
        if not self._songs:
            raise IndexError("dequeue from an empty queue")
        return self._songs.popleft()

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(list(self._songs))