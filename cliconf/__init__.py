"""Persistent configuration for command line tools.

A single JSON object is stored in one file under the user's home folder.
Several copies of the tool may read and rewrite that file at the same time
without a lock; see :mod:`cliconf.persistor` for how reads cope with that.
"""

__version__ = "0.1.0"

from .data import JSONConfigData
from .persistor import (
    DIR_PERMISSIONS,
    FILE_PERMISSIONS,
    ConfigData,
    DiskPersistor,
    Persistor,
    UnexpectedFileLengthError,
)
from .repository import ConfigRepository

__all__ = [
    "ConfigData",
    "ConfigRepository",
    "DIR_PERMISSIONS",
    "DiskPersistor",
    "FILE_PERMISSIONS",
    "JSONConfigData",
    "Persistor",
    "UnexpectedFileLengthError",
    "__version__",
]
