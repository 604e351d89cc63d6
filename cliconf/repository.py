from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Callable, Dict, Optional, TypeVar

from .data import JSONConfigData
from .persistor import Persistor

log = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigRepository:
    """Thread-safe access to a persisted :class:`JSONConfigData`.

    The file is loaded lazily on first access and every mutation is saved
    straight away. The lock only covers threads of this process; other
    processes are handled by the persistor's own read protocol.

    Persistence errors go to ``on_error`` when given, otherwise they raise.
    """

    def __init__(
        self,
        persistor: Persistor,
        data: Optional[JSONConfigData] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        self.persistor = persistor
        self.data = data if data is not None else JSONConfigData()
        self.on_error = on_error
        self._lock = threading.RLock()
        self._loaded = False

    def _report(self, exc: Exception) -> None:
        if self.on_error is None:
            raise exc
        self.on_error(exc)

    def _init(self) -> None:
        if self._loaded:
            return
        # A missing file just means the defaults are in effect.
        if self.persistor.exists():
            try:
                self.persistor.load(self.data)
            except (OSError, ValueError) as exc:
                # Without a handler the next access retries, so a transient
                # size mismatch never lets defaults overwrite the real file.
                if self.on_error is None:
                    raise
                self.on_error(exc)
        self._loaded = True

    def _read(self, cb: Callable[[], T]) -> T:
        with self._lock:
            self._init()
            return cb()

    def _write(self, cb: Callable[[], T]) -> T:
        with self._lock:
            self._init()
            result = cb()
            try:
                self.persistor.save(self.data)
            except (OSError, ValueError) as exc:
                self._report(exc)
            return result

    # Public API ----------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        def cb() -> Any:
            if key in self.data.values:
                return copy.deepcopy(self.data.values[key])
            return default

        return self._read(cb)

    def all(self) -> Dict[str, Any]:
        return self._read(lambda: copy.deepcopy(self.data.values))

    def set(self, key: str, value: Any) -> None:
        self._write(lambda: self.data.set(key, copy.deepcopy(value)))

    def update(self, patch: Dict[str, Any]) -> None:
        self._write(lambda: self.data.values.update(copy.deepcopy(patch)))

    def unset(self, key: str) -> bool:
        with self._lock:
            self._init()
            if not self.data.is_set(key):
                return False
            return self._write(lambda: self.data.unset(key))

    def reset(self) -> None:
        log.info("Resetting config at %s to defaults", getattr(self.persistor, "path", "<persistor>"))
        self._write(self.data.reset)
