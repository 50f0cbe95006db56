"""Music-player data structures and terminal screens: catalog, playlists, queue, history, follow graph."""

__version__ = "0.1.0"