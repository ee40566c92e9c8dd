"""Singleton: one printing press shared by every reporter."""

from __future__ import annotations

import argparse
import threading
from pathlib import Path
from typing import ClassVar, TextIO


class PrintingPress:
    """The single press that appends news to a paper file.

    Obtain it with ``get_instance``; constructing it directly is refused.
    """

    DEFAULT_PATH: ClassVar[str] = "newspaper.txt"
    _instance: ClassVar[PrintingPress | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    _path: Path
    _paper: TextIO
    _lock: threading.Lock

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError("use PrintingPress.get_instance()")

    @classmethod
    def get_instance(cls, path=None) -> PrintingPress:
        """Return the press, opening its paper on first use.

        A path that differs from the open press's path raises ValueError.
        """
        with cls._instance_lock:
            press = cls._instance
            if press is None:
                press = object.__new__(cls)
                press._path = Path(path if path is not None else cls.DEFAULT_PATH)
                press._paper = open(press._path, "a", encoding="utf-8")
                press._lock = threading.Lock()
                cls._instance = press
            elif path is not None and Path(path) != press._path:
                raise ValueError(f"press already prints to {press._path}")
            return press

    @property
    def path(self) -> Path:
        return self._path

    def print_news(self, reporter_name: str, news: str) -> None:
        """Append one line of news, safe to call from several threads."""
        with self._lock:
            if self._paper.closed:
                raise ValueError("the printing press is closed")
            self._paper.write(f"[{reporter_name}] {news}\n")
            self._paper.flush()

    def close(self) -> None:
        """Close the paper; the next get_instance opens a new press."""
        cls = type(self)
        with cls._instance_lock:
            with self._lock:
                self._paper.close()
            if cls._instance is self:
                cls._instance = None


def main(argv=None) -> int:
    """Have three reporters print their news through the one press."""
    parser = argparse.ArgumentParser(description="Print the news.")
    parser.add_argument("--path", default=PrintingPress.DEFAULT_PATH)
    args = parser.parse_args(argv)

    stories = [
        ("Reporter A", "Election results announced"),
        ("Reporter B", "Stock market hits new high"),
        ("Reporter C", "Weather alert issued"),
    ]
    press = PrintingPress.get_instance(args.path)
    try:
        for reporter, news in stories:
            PrintingPress.get_instance().print_news(reporter, news)
    finally:
        press.close()
    return 0