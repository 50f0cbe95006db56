"""ASCII-art animations shown between the player's screens."""

from __future__ import annotations

import subprocess
import time
from pathlib import Path
from typing import TextIO

from wayangwave.colors import GREEN

MAX_LEN = 5000
DELAY_UNIT = 0.5
FRAME_DIR = "Spesifikasi_Program/Inisialisasi"


def _frames(folder: str, *names: str) -> tuple[str, ...]:
    return tuple(f"{FRAME_DIR}/{folder}/{name}.txt" for name in names)


# name -> (frame files in display order, delay units after each frame)
_ANIMATIONS: dict[str, tuple[tuple[str, ...], int]] = {
    "wayang": (_frames("wayang", "wayang3", "wayang2", "wayang1", "wayang"), 1),
    "load": (_frames("load", "load3", "load2", "load1"), 2),
    "save": (_frames("save", "save3", "save2", "save1"), 2),
    "quit": (_frames("quit", "quit1", "quit2", "quit3"), 2),
    "help": (_frames("help", "help1"), 1),
    "status": (_frames("status", "status1", "status2", "status3", "status4"), 1),
    "list": (_frames("list", "list1", "list2", "list3", "list4"), 1),
    "play-song": (
        _frames("play-song", *(f"playing {i}" for i in range(1, 6))),
        1,
    ),
    "song-next": (_frames("song", "song1", "song2", "song3", "song4"), 1),
    "song-prev": (_frames("song", "song6", "song3", "song2", "song1", "song5"), 1),
    "play-playlist": (
        _frames("play-playlist", *(f"playing {i}" for i in range(1, 6))),
        1,
    ),
    "queue-song": (_frames("queue", "queue1", "queue2", "queue3", "queue4"), 1),
    "queue-playlist": (_frames("queue", "queue1", "queue2", "queue3", "queue5"), 1),
    "swap": (_frames("swap", *(f"swap{i}" for i in range(1, 6))), 1),
    "create-playlist": (
        _frames("playlist", "playlist1", "playlist2", "playlist3"),
        1,
    ),
    "delete-playlist": (
        _frames("playlist", "playlist3", "playlist4", "playlist5", "playlist6"),
        1,
    ),
    "playlist-add": (
        _frames("playlist-add", *(f"playlist-add{i}" for i in range(1, 7))),
        1,
    ),
    "playlist-enhance": (
        _frames("playlist-add", *(f"playlist-add{i}" for i in range(1, 7))),
        1,
    ),
    "playlist-remove": (
        _frames(
            "playlist-remove",
            *(f"playlist-remove{i}" for i in range(6, 0, -1)),
            "playlist-remove",
        ),
        1,
    ),
    "register": (_frames("register", "register3", "register2", "register1"), 2),
    "login": (_frames("login", "login3", "login2", "login1"), 1),
    "logout": (_frames("logout", "logout", "logout1", "logout2", "logout3"), 1),
}


def delay(seconds: int) -> None:
    """Pause for ``seconds`` delay units."""
    time.sleep(DELAY_UNIT * seconds)


def print_image(stream: TextIO) -> None:
    """Print every line of a stream in green, then an empty line."""
    for line in stream:
        print(f"{GREEN}{line}", end="")
    print()


def clear_screen() -> None:
    """Clear the terminal."""
    subprocess.run("cls || clear", shell=True, check=False)


def frame_paths(name: str) -> list[str]:
    """Return the frame files of an animation, relative to the base directory."""
    try:
        frames, _ = _ANIMATIONS[name]
    except KeyError:
        raise KeyError(f"unknown animation {name!r}") from None
    return list(frames)


def play_animation(name: str, base_dir=None) -> None:
    """Show each frame of an animation, pausing after every frame."""
    frames = frame_paths(name)
    pause = _ANIMATIONS[name][1]
    base = Path(".") if base_dir is None else Path(base_dir)
    clear_screen()
    for frame in frames:
        path = base / frame
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as stream:
                clear_screen()
                print_image(stream)
        except OSError:
            print(f"error opening {path}")
        delay(pause)


def splash() -> None:
    """Show the start-up animation."""
    play_animation("wayang")


def animate_load() -> None:
    play_animation("load")


def animate_save() -> None:
    play_animation("save")


def animate_quit() -> None:
    play_animation("quit")


def animate_help() -> None:
    play_animation("help")


def animate_status() -> None:
    play_animation("status")


def animate_list() -> None:
    play_animation("list")


def animate_song_next() -> None:
    play_animation("song-next")


def animate_song_prev() -> None:
    play_animation("song-prev")


def animate_play_song() -> None:
    play_animation("play-song")


def animate_play_playlist() -> None:
    play_animation("play-playlist")


def animate_queue_song() -> None:
    play_animation("queue-song")


def animate_queue_playlist() -> None:
    play_animation("queue-playlist")


def animate_swap() -> None:
    play_animation("swap")


def animate_create_playlist() -> None:
    play_animation("create-playlist")


def animate_delete_playlist() -> None:
    play_animation("delete-playlist")


def animate_playlist_add() -> None:
    play_animation("playlist-add")


def animate_playlist_enhance() -> None:
    play_animation("playlist-enhance")


def animate_playlist_remove() -> None:
    play_animation("playlist-remove")


def animate_register() -> None:
    play_animation("register")


def animate_login() -> None:
    play_animation("login")


def animate_logout() -> None:
    play_animation("logout")