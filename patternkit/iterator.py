"""Iterator: walking a playlist one song at a time."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

_DEFAULT_SONGS = ["Shape of You", "Blinding Lights", "Believer", "Perfect"]


class Playlist:
    """An ordered collection of song titles."""

    def __init__(self, songs: Iterable[str]) -> None:
        self.songs = list(songs)

    def create_iterator(self) -> PlaylistIterator:
        """Return a fresh iterator positioned at the first song."""
        return PlaylistIterator(self)

    def __iter__(self) -> PlaylistIterator:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self.songs)


class PlaylistIterator:
    """Steps through a playlist's songs in order."""

    def __init__(self, playlist: Playlist) -> None:
        self._playlist = playlist
        self._index = 0

    def has_next(self) -> bool:
        """Tell whether another song remains."""
        return self._index < len(self._playlist.songs)

    def __iter__(self) -> PlaylistIterator:
        return self

    def __next__(self) -> str:
        if not self.has_next():
            raise StopIteration
        song = self._playlist.songs[self._index]
        self._index += 1
        return song


def main(argv=None) -> int:
    """Play the given songs, or a default playlist, in order."""
    parser = argparse.ArgumentParser(description="Play a playlist.")
    parser.add_argument("songs", nargs="*", default=_DEFAULT_SONGS)
    args = parser.parse_args(argv)

    print("Playing Playlist:")
    for song in Playlist(args.songs):
        print(song)
    return 0