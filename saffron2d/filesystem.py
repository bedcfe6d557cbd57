"""File helpers: directory listings, writing, copying and existence checks."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from saffron2d.wrapper_buffer import WrapperBuffer

_log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Filter:
    """A file dialog filter: a description and its glob patterns."""

    description: str = ""
    extensions: list[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> Filter:
        """The filter that matches every file."""
        return cls("All Files", ["*.*"])


def all_files(directory: PathLike, extension: str = "") -> list[Path]:
    """Entries of ``directory`` whose suffix equals ``extension`` (``""`` means none)."""
    try:
        with os.scandir(directory) as entries:
            return [Path(entry.path) for entry in entries if Path(entry.name).suffix == extension]
    except OSError as error:
        _log.warning("Failed to get files from directory: %s with file extension: %s. What: %s",
                     directory, extension, error)
        return []


def file_count(directory: PathLike, extension: str = "") -> int:
    """Number of entries in ``directory``, all of them when ``extension`` is empty.

    Without an extension, errors reading the directory propagate; with one,
    they are logged and 0 is returned.
    """
    if not extension:
        with os.scandir(directory) as entries:
            return sum(1 for _ in entries)
    try:
        with os.scandir(directory) as entries:
            return sum(1 for entry in entries if Path(entry.name).suffix == extension)
    except OSError as error:
        _log.warning("Failed to get file count from directory: %s with file extension: %s. What: %s",
                     directory, extension, error)
        return 0


def write(data: Any, filepath: PathLike, overwrite: bool = True) -> int:
    """Write bytes or a :class:`WrapperBuffer` to ``filepath``; return bytes written."""
    if isinstance(data, WrapperBuffer):
        payload = bytes(data.data() or b"")
    else:
        payload = bytes(data)
    if file_exists(filepath) and not overwrite:
        return 0
    try:
        with open(filepath, "wb") as stream:
            return stream.write(payload)
    except OSError:
        _log.warning("Failed to open file: %s", filepath)
        return 0


def create_directories(path: PathLike) -> bool:
    """Create ``path`` and its parents; True only if something was created."""
    target = Path(path)
    if target.exists():
        return False
    try:
        target.mkdir(parents=True)
    except OSError:
        return False
    return True


def file_exists(path: PathLike) -> bool:
    try:
        return Path(path).exists()
    except OSError:
        return False


def copy(source: PathLike, destination: PathLike) -> bool:
    """Copy a file without overwriting; returns True if the copy failed."""
    try:
        if Path(destination).exists():
            return True
        shutil.copyfile(source, destination)
    except OSError:
        return True
    return False