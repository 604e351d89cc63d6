"""Disk persistence for a single configuration object.

Several instances of the command line tool may run at the same time and read
or rewrite the same file without any lock. ``DiskPersistor.load`` therefore
compares the size reported by ``stat`` with the number of bytes it actually
read: a mismatch means another process was caught in the middle of a rewrite,
which is reported as :class:`UnexpectedFileLengthError` and left alone.

Any other read or decode failure is treated as a broken file and healed by
writing the caller's in-memory value over it. Permission errors are never
healed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from . import file_helpers

log = logging.getLogger(__name__)

FILE_PERMISSIONS = 0o600
DIR_PERMISSIONS = 0o700


class UnexpectedFileLengthError(OSError):
    """The read returned a different number of bytes than ``stat`` reported."""

    def __init__(self, path: Path, expected: int, actual: int):
        super().__init__(
            f"read operation returned an unexpected number of bytes "
            f"({actual} instead of {expected}): {path}"
        )
        self.path = path
        self.expected = expected
        self.actual = actual


class ConfigData(Protocol):
    """Anything that can turn itself into bytes and back.

    Both methods signal malformed content by raising ``ValueError``.
    """

    def marshal(self) -> bytes: ...

    def unmarshal(self, raw: bytes) -> None: ...


class Persistor(Protocol):
    def exists(self) -> bool: ...

    def load(self, data: ConfigData) -> None: ...

    def save(self, data: ConfigData) -> None: ...


@dataclass(frozen=True)
class DiskPersistor:
    """Persist a :class:`ConfigData` value to ``path``.

    Construction does no I/O. The parent directory is created on demand with
    mode 0700 and the file itself is written with mode 0600.
    """

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def exists(self) -> bool:
        return file_helpers.file_exists(self.path)

    def load(self, data: ConfigData) -> None:
        """Populate ``data`` from the file, rewriting the file if it is broken.

        Raises the stat error (e.g. ``FileNotFoundError``) when the file cannot
        be stat'ed, ``PermissionError`` unchanged, and
        :class:`UnexpectedFileLengthError` when a concurrent rewrite was
        observed. Other read or decode failures are repaired with ``save(data)``
        and only raise if that write fails.
        """

        file_helpers.make_dirs(self.path.parent, DIR_PERMISSIONS)
        expected = file_helpers.file_size(self.path)

        try:
            self._read(data, expected)
        except (PermissionError, UnexpectedFileLengthError):
            raise
        except (OSError, ValueError) as exc:
            log.debug("Rewriting unreadable config %s (%s)", self.path, exc)
            self.save(data)

    def save(self, data: ConfigData) -> None:
        payload = data.marshal()
        file_helpers.make_dirs(self.path.parent, DIR_PERMISSIONS)
        file_helpers.write_file(self.path, payload, FILE_PERMISSIONS)

    def _read(self, data: ConfigData, expected: int) -> None:
        raw = file_helpers.read_file(self.path)

        # Another process truncating and rewriting the file between our stat
        # and read shows up as a short (usually empty) read.
        if len(raw) != expected:
            log.debug("Size mismatch on %s: stat=%d read=%d", self.path, expected, len(raw))
            raise UnexpectedFileLengthError(self.path, expected, len(raw))

        data.unmarshal(raw)
