"""Help menu listing the commands available in each state of the player."""

from __future__ import annotations

from wayangwave.animation import animate_help
from wayangwave.colors import GREEN, WHITE, YELLOW

_HEADER = (
    "-----------------------------------------[ Menu Help WayangWave ]"
    "---------------------------------------------"
)

# (command, argument placeholder or None, tab padding, description)
_BEFORE_LOAD = (
    ("START", None, "\t\t\t", "Untuk masuk sesi baru."),
    ("LOAD", "<filename>", "\t\t",
     "Untuk memulai sesi berdasarkan file konfigurasi."),
    ("QUIT", None, "\t\t\t", "Untuk keluar dari sesi aplikasi WayangWave."),
)

_BEFORE_LOGIN = (
    ("REGISTER", None, "\t\t\t", "Untuk membuat akun WayangWave."),
    ("LOGIN", None, "\t\t\t", "Untuk masuk ke dalam akun WayangWave."),
    ("LOGOUT", None, "\t\t\t", "Untuk keluar dari akun WayangWave."),
    ("QUIT", None, "\t\t\t", "Untuk keluar dari sesi aplikasi WayangWave."),
)

_IN_SESSION = (
    ("LIST DEFAULT", None, "\t\t",
     "Untuk melihat list penyanyi yang ada, album dari penyanyi yang dipilih "
     "dan lagu yang ada dari album yang dipilih."),
    ("LIST PLAYLIST", None, "\t\t",
     "Untuk menampilkan playlist yang ada pada pengguna."),
    ("PLAY SONG", None, "\t\t\t",
     "Untuk memainkan lagu berdasarkan masukan nama penyanyi, nama album, "
     "dan id lagu."),
    ("PLAY PLAYLIST", None, "\t\t",
     "Untuk memainkan lagu berdasarkan id playlist."),
    ("QUEUE SONG", None, "\t\t\t", "Untuk menambahkan lagu ke dalam queue."),
    ("QUEUE PLAYLIST", None, "\t\t",
     "Untuk menambahkan lagu yang ada dalam playlist ke dalam queue."),
    ("QUEUE SWAP", "<x> <y>", "\t\t",
     "Untuk menukar lagu pada urutan ke x dan juga urutan ke y."),
    ("QUEUE REMOVE", "<id>", "\t\t",
     "Untuk menghapus lagu dari queue sesuai id lagu yang diinginkan."),
    ("QUEUE CLEAR", None, "\t\t\t", "Untuk mengosongkan queue."),
    ("SONG NEXT", None, "\t\t\t",
     "Untuk memutar lagu yang berada di dalam queue."),
    ("SONG PREVIOUS", None, "\t\t",
     "Untuk memutar lagu yang terakhir kali diputar."),
    ("PLAYLIST CREATE", None, "\t\t",
     "Untuk membuat playlist baru dan ditambahkan pada daftar playlist "
     "pengguna."),
    ("PLAYLIST ADD SONG", None, "\t\t",
     "Untuk menambahkan lagu pada suatu playlist yang telah ada sebelumnya "
     "pada daftar playlist pengguna."),
    ("PLAYLIST ADD ALBUM", None, "\t\t",
     "Untuk menambahkan album pada suatu playlist yang telah ada sebelumnya "
     "pada daftar playlist pengguna."),
    ("PLAYLIST SWAP", "<id> <x> <y>", "\t",
     "Untuk menukar lagu pada urutan ke x dan juga urutan ke y di playlist "
     "dengan urutan ke id."),
    ("PLAYLIST REMOVE", "<id> <n>", "\t",
     "Untuk menghapus lagu dengan urutan n pada playlist dengan index id."),
    ("PLAYLIST DELETE", None, "\t\t",
     "Untuk melakukan penghapusan suatu existing playlist dalam daftar "
     "playlist pengguna."),
    ("STATUS", None, "\t\t\t",
     "Untuk menampilkan lagu yang sedang dimainkan beserta queue song yang "
     "ada dan dari playlist mana lagu itu diputar."),
    ("FOLLOW USER", None, "\t\t\t",
     "Untuk mem-follow user lain di dalam WayangWave."),
    ("FOLLOW LIST", None, "\t\t\t",
     "Untuk menampilkan user yang sudah difollow beserta playlist yang "
     "mereka miliki."),
    ("SAVE", "<filename>", "\t\t",
     "Untuk menyimpan state aplikasi terbaru ke dalam suatu file."),
    ("QUIT", None, "\t\t\t", "Untuk keluar dari sesi aplikasi WayangWave."),
)


def _render(entries) -> str:
    lines = [f"{GREEN}{_HEADER}\n\n"]
    for number, (command, argument, tabs, description) in enumerate(entries, 1):
        label = f"{number}.".ljust(4)
        shown = command if argument is None else f"{command} {YELLOW}{argument}"
        lines.append(f"{WHITE}{label}{GREEN}{shown}{tabs}{WHITE}-> {description}\n")
    lines.append("\n")
    return "".join(lines)


def help_text(session: bool, loaded: bool) -> str:
    """Return the help menu for the current state.

    ``loaded`` tells whether a session was started or loaded; ``session``
    whether a user is logged in.
    """
    if not loaded:
        return _render(_BEFORE_LOAD)
    if not session:
        return _render(_BEFORE_LOGIN)
    return _render(_IN_SESSION)


def show_help(session: bool, loaded: bool) -> None:
    """Play the help animation and print the help menu."""
    animate_help()
    print(help_text(session, loaded), end="")