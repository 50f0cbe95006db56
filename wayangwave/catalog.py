"""Catalog of artists, their albums and the songs on each album."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_ARTISTS = 20
MAX_ALBUMS = 10
MAX_SONGS = 20


class DuplicateSongError(ValueError):
    """Raised when a song is already on the album it is added to."""


@dataclass
class Album:
    """An album and the titles of its songs, in insertion order."""

    name: str
    songs: list[str] = field(default_factory=list)


@dataclass
class Artist:
    """An artist and the albums they own, in insertion order."""

    name: str
    albums: list[Album] = field(default_factory=list)


class Catalog:
    """Artists, albums and songs built up in order.

    New albums go to the most recently added artist and new songs to the
    most recently added album of that artist.
    """

    def __init__(self):
        self.artists: list[Artist] = []

    def __len__(self) -> int:
        return len(self.artists)

    def __iter__(self):
        return iter(self.artists)

    def _last_artist(self) -> Artist:
        if not self.artists:
            raise LookupError("catalog has no artists")
        return self.artists[-1]

    def _last_album(self) -> Album:
        artist = self._last_artist()
        if not artist.albums:
            raise LookupError(f"artist {artist.name!r} has no albums")
        return artist.albums[-1]

    def add_artist(self, name: str) -> Artist:
        """Add an artist as the last one and return it."""
        if len(self.artists) >= MAX_ARTISTS:
            raise OverflowError(f"catalog holds at most {MAX_ARTISTS} artists")
        artist = Artist(name)
        self.artists.append(artist)
        return artist

    def add_album(self, name: str) -> Album:
        """Add an album to the current artist and return it."""
        artist = self._last_artist()
        if len(artist.albums) >= MAX_ALBUMS:
            raise OverflowError(f"an artist holds at most {MAX_ALBUMS} albums")
        album = Album(name)
        artist.albums.append(album)
        return album

    def add_song(self, title: str) -> None:
        """Add a song to the current album; duplicates are refused."""
        artist_index = len(self.artists) - 1
        album = self._last_album()
        album_index = len(self.artists[artist_index].albums) - 1
        position = self.song_index(artist_index, album_index, title)
        if position >= MAX_SONGS:
            raise OverflowError(f"an album holds at most {MAX_SONGS} songs")
        album.songs.append(title)

    def current_artist(self) -> str:
        """Return the name of the most recently added artist."""
        return self._last_artist().name

    def current_album(self) -> str:
        """Return the name of the current artist's last album."""
        return self._last_album().name

    def current_song(self) -> str:
        """Return the title of the last song on the current album."""
        album = self._last_album()
        if not album.songs:
            raise LookupError(f"album {album.name!r} has no songs")
        return album.songs[-1]

    def artist_index(self, name: str) -> int:
        """Return the index of the artist with this name."""
        for index, artist in enumerate(self.artists):
            if artist.name == name:
                return index
        raise KeyError("Penyanyi tidak terdaftar.")

    def album_index(self, artist_index: int, name: str) -> int:
        """Return the index of an album of the artist at ``artist_index``."""
        for index, album in enumerate(self.artists[artist_index].albums):
            if album.name == name:
                return index
        raise KeyError("Album tidak terdaftar.")

    def song_index(self, artist_index: int, album_index: int, title: str) -> int:
        """Return the position a new song would take on the album.

        Raises DuplicateSongError if the album already has this title.
        """
        album = self.artists[artist_index].albums[album_index]
        if title in album.songs:
            raise DuplicateSongError(
                f"Lagu {title} sudah ada di dalam album {album.name}."
            )
        return len(album.songs)