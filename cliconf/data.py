"""JSON configuration model.

The model intentionally keeps values as a plain dict so that keys written by a
newer version of the tool survive a load/save cycle in an older one.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class JSONConfigData:
    """Configuration values stored as a single JSON object.

    ``defaults`` fill in keys that the file does not contain; unknown keys in
    the file are kept.
    """

    defaults: Dict[str, Any] = field(default_factory=dict)
    values: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        merged = copy.deepcopy(self.defaults)
        merged.update(self.values)
        self.values = merged

    def marshal(self) -> bytes:
        try:
            txt = json.dumps(self.values, indent=2, sort_keys=True)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"config is not JSON serializable: {exc}") from exc
        return (txt + "\n").encode("utf-8")

    def unmarshal(self, raw: bytes) -> None:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        try:
            data = json.loads(raw.decode("utf-8"))
        except RecursionError as exc:
            raise ValueError("config is not valid JSON: nested too deeply") from exc
        if not isinstance(data, dict):
            raise ValueError("config root is not an object")

        merged = copy.deepcopy(self.defaults)
        merged.update(data)
        self.values = merged

    def reset(self) -> None:
        self.values = copy.deepcopy(self.defaults)

    # Convenience helpers -------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value

    def is_set(self, key: str) -> bool:
        """True when ``key`` holds something other than its default."""
        if key not in self.values:
            return False
        return key not in self.defaults or self.values[key] != self.defaults[key]

    def unset(self, key: str) -> bool:
        """Drop ``key``, falling back to its default when it has one."""
        if not self.is_set(key):
            return False
        if key in self.defaults:
            self.values[key] = copy.deepcopy(self.defaults[key])
        else:
            del self.values[key]
        return True
