"""Filesystem helpers used by the disk persistor.

Every helper raises the underlying ``OSError`` unchanged. Python already maps
``EACCES``/``EPERM`` to :class:`PermissionError`, so callers can branch on the
exception type instead of inspecting errno values.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def file_exists(path: PathLike) -> bool:
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def make_dirs(path: PathLike, mode: int) -> None:
    """Create ``path`` and any missing ancestors, each with ``mode``.

    ``os.makedirs`` only applies the mode to the leaf directory, so the
    ancestors are created one by one here.
    """

    path = Path(path)
    if path.is_dir():
        return
    if path.parent != path:
        make_dirs(path.parent, mode)
    try:
        path.mkdir(mode=mode)
    except FileExistsError:
        # Another process may have won the race; a regular file is still an error.
        if not path.is_dir():
            raise


def file_size(path: PathLike) -> int:
    return os.stat(path).st_size


def read_file(path: PathLike) -> bytes:
    with open(path, "rb") as fh:
        return fh.read()


def write_file(path: PathLike, payload: bytes, mode: int) -> None:
    """Replace the content of ``path`` with ``payload``.

    ``mode`` only applies when the file is created. Existing content is
    truncated in place; there is no temp-file-and-rename staging.
    """

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as fh:
        fh.write(payload)
