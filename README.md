# wayangwave

Data structures and terminal screens for an interactive music-player
session. The package uses only the standard library and needs Python 3.10 or
newer.

## Modules

- `wayangwave.catalog`: the artist → album → song catalog (`Catalog`,
  `Artist`, `Album`). New albums go to the artist added last, new songs to
  that artist's last album. Adding a title that is already on the album
  raises `DuplicateSongError`; going past 20 artists, 10 albums per artist or
  20 songs per album raises `OverflowError`. Unknown names passed to
  `artist_index` or `album_index` raise `KeyError`.
- `wayangwave.songlist`: `Song` (artist, album, title) and `SongList`, an
  ordered list of songs with `append`, `prepend`, `insert_after`,
  `pop_first`, `pop_last` and `remove_at`.
- `wayangwave.playlists`: `PlaylistCollection`, a user's named playlists in
  creation order (`add`, `get`, `index_of`).
- `wayangwave.songqueue`: `SongQueue`, a first-in first-out queue of at most
  20 songs; `enqueue` on a full queue raises `QueueFullError`.
- `wayangwave.history`: `SongHistory`, a stack of recently played songs.
  It holds at most 15; further pushes are ignored.
- `wayangwave.graph`: `FollowGraph`, which user follows which, with nodes and
  successors kept in insertion order.
- `wayangwave.linereader`: `CharTape` and `LineMachine` read input and files
  character by character into lines, commands, words and `;`-separated
  records. `read_input` reads one line from standard input (or a given
  stream); `start_file` opens a file and reads its first line;
  `directory_path` prefixes a name with `Data/`.
- `wayangwave.wordreader`: `WordMachine` and `read_words` split input into
  blank-separated words up to `;` or the end of the line.
- `wayangwave.colors`: ANSI colour codes and `print_red`, `print_green`,
  `print_blue`.
- `wayangwave.animation`: ASCII-art animations (`splash`, `animate_load`,
  `animate_list`, … and the general `play_animation(name, base_dir)`).
- `wayangwave.helpmenu`: `help_text(session, loaded)` and `show_help`.
- `wayangwave.listing`: `display_default(catalog, ask)` and
  `display_playlists(collection, ask)`, the interactive listing screens.

## Building a catalog

```python
from wayangwave.catalog import Catalog

catalog = Catalog()
catalog.add_artist("Sheila On 7")
catalog.add_album("Kisah Klasik")
catalog.add_song("Sahabat Sejati")

catalog.current_song()                          # "Sahabat Sejati"
artist = catalog.artist_index("Sheila On 7")    # 0
catalog.album_index(artist, "Kisah Klasik")     # 0
```

## Playlists, queue and history

```python
from wayangwave.playlists import PlaylistCollection
from wayangwave.songlist import Song
from wayangwave.songqueue import SongQueue
from wayangwave.history import SongHistory

song = Song("Sheila On 7", "Kisah Klasik", "Sahabat Sejati")

playlists = PlaylistCollection()
favourites = playlists.add("Favourites")
favourites.append(song)
print(favourites)          # [{Sheila On 7, Kisah Klasik, Sahabat Sejati}]

queue = SongQueue()
queue.enqueue(song)
history = SongHistory()
history.push(queue.dequeue())
```

## Following other users

```python
from wayangwave.graph import FollowGraph

graph = FollowGraph(0)
graph.add_node(1)
graph.add_node(2)
graph.add_edge(1, 2)      # user 1 follows user 2
graph.successors(1)       # [2]
print(graph)
```

## Screens

`help_text(session, loaded)` returns the menu that fits the current state:
the START / LOAD / QUIT menu before anything is loaded, the account menu
before login, and the full command menu once logged in. `show_help` plays
the help animation and prints it.

The listing screens ask their questions through the `ask` callable, which
takes the prompt and returns the answer; by default they read standard input:

```python
from wayangwave.listing import display_playlists

answers = iter(["Y", "1"])
display_playlists(playlists, ask=lambda prompt: next(answers))
```

Animations read their frames as text files under
`Spesifikasi_Program/Inisialisasi/` relative to the current directory (or
`base_dir` for `play_animation`), clear the terminal between frames and
pause after each one. A frame that cannot be opened prints an
`error opening …` line instead.

## What the package does not do

There is no command to start a player session, and there is no command loop
that dispatches the commands listed in the help menu. The package does not
play audio. It does not load or save session files, keep user accounts or
handle login. The animation frame files are not included.

## Tests

The test suite uses pytest and lives in `tests/`. Install the `test` extra
to run it.