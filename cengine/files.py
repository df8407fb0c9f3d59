"""Reading asset files relative to the working directory."""

from __future__ import annotations

import os


def get_file_path(local_file: str) -> str:
    """Join the current working directory with a path that starts with a separator."""
    return os.getcwd() + local_file


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of a file, read in binary mode and decoded as UTF-8."""
    with open(path, "rb") as handle:
        data = handle.read()
    return data.decode("utf-8")


def read_local(local_file: str) -> str:
    """Read a file given relative to the current working directory."""
    return read_file(get_file_path(local_file))