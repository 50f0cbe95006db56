"""Interactive listings of the catalog and of a user's playlists."""

from __future__ import annotations

import re
from typing import Callable

from wayangwave.animation import animate_list
from wayangwave.catalog import Catalog
from wayangwave.colors import GREEN, RED, WHITE, YELLOW
from wayangwave.linereader import read_input
from wayangwave.playlists import PlaylistCollection

Ask = Callable[[str], str]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _prompt(text: str) -> str:
    print(text, end="", flush=True)
    return read_input()


def _to_int(text: str) -> int:
    """Parse a leading integer the way atoi does; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _error(message: str) -> None:
    print(f"\n{RED}ERROR: {WHITE}{message}")


def display_default(catalog: Catalog, ask: Ask | None = None) -> None:
    """List artists, then optionally an artist's albums and an album's songs.

    ``ask`` shows a prompt and returns the user's answer; standard input is
    used by default.
    """
    ask = ask or _prompt
    animate_list()
    print(f"{GREEN}Daftar Penyanyi :")
    for number, artist in enumerate(catalog.artists, 1):
        print(f"  {WHITE}{number}. {artist.name} ")

    if ask(f"\n{WHITE}Ingin melihat album yang ada? (Y/N): {GREEN}") != "Y":
        return

    artist_name = ask(f"{WHITE}Pilih penyanyi untuk melihat album mereka: {GREEN}")
    try:
        artist_index = catalog.artist_index(artist_name)
    except KeyError:
        _error("Penyanyi tidak terdaftar.")
        return

    artist = catalog.artists[artist_index]
    print(f"\n{GREEN}Daftar Album oleh {YELLOW}{artist_name} :")
    for number, album in enumerate(artist.albums, 1):
        print(f"  {WHITE}{number}. {album.name} ")

    if ask(f"\n{WHITE}Ingin melihat lagu yang ada? (Y/N): {GREEN}") != "Y":
        return

    album_name = ask(f"{WHITE}Masukkan Nama Album yang dipilih: {GREEN}")
    try:
        album_index = catalog.album_index(artist_index, album_name)
    except KeyError:
        _error("Album tidak terdaftar.")
        return

    print(f"\n{GREEN}Daftar Lagu di {YELLOW}{album_name}:")
    for number, title in enumerate(artist.albums[album_index].songs, 1):
        print(f"  {WHITE}{number}. {title} ")


def display_playlists(collection: PlaylistCollection, ask: Ask | None = None) -> None:
    """List the user's playlists and optionally the songs of one of them.

    ``ask`` shows a prompt and returns the user's answer; standard input is
    used by default.
    """
    ask = ask or _prompt
    animate_list()
    print(f"{GREEN}Daftar Playlist yang kamu miliki:")
    if len(collection) == 0:
        print(f"{WHITE}Kamu tidak memiliki playlist.")
        return

    for number, (name, _) in enumerate(collection, 1):
        print(f"  {WHITE}{number}. {name} ")

    answer = ask(f"\nIngin cek isi lagu dari sebuah playlist? (Y/N): {GREEN}")
    if not answer.startswith("Y"):
        return

    playlist_id = _to_int(ask(f"{WHITE}Input ID playlist: {GREEN}"))
    if not 1 <= playlist_id <= len(collection):
        _error(f"Tidak ada playlist dengan ID {playlist_id}.")
        return

    names = [name for name, _ in collection]
    songs = collection.get(playlist_id - 1)
    print(
        f"\n{GREEN}Daftar lagu dalam playlist {YELLOW}\"{names[playlist_id - 1]}\":"
        f"{WHITE}"
    )
    if len(songs) == 0:
        print(f"{WHITE}Tidak ada lagu.")
        return
    for number, song in enumerate(songs, 1):
        print(f"  {WHITE}{number}. {song.artist} - {song.title} ")