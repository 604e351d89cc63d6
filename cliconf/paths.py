from __future__ import annotations

import os
from pathlib import Path

ENV_HOME = "CLICONF_HOME"
CONFIG_FILENAME = "config.json"


def config_home() -> Path:
    """Folder holding the tool's state.

    ``$CLICONF_HOME`` wins when set; otherwise ``~/.cliconf``.
    """

    env = (os.environ.get(ENV_HOME) or "").strip()
    if env:
        return Path(env).expanduser()
    return Path.home() / ".cliconf"


def default_config_path() -> Path:
    return config_home() / CONFIG_FILENAME
