"""Finding the program search path in an environment."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pipex.libft.strings import split


def _entries(envp: Mapping[str, str] | Iterable[str]) -> Iterable[str]:
    if isinstance(envp, Mapping):
        return (f"{key}={value}" for key, value in envp.items())
    return envp


def search_path(envp: Mapping[str, str] | Iterable[str]) -> list[str] | None:
    """Directories of the first entry whose name starts with ``PATH``.

    ``envp`` holds ``NAME=value`` strings or is a mapping. Empty directory
    entries are dropped. Returns None when no such entry exists.
    """
    for entry in _entries(envp):
        if entry.startswith("PATH"):
            _, _, value = entry.partition("=")
            return split(value, ":")
    return None