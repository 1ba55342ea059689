# core/hooks/keymap.py
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from core.hooks.events import InputEvent
from core.terminal.interfaces import RawKey

DEFAULT_PRESS_KEYS = ("x", "b")

@dataclass(frozen=True)
class Keymap:
    """Read-only mapping from raw terminal keys to semantic input events."""
    mapping: Mapping[RawKey, InputEvent] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "mapping", MappingProxyType(dict(self.mapping)))

    @classmethod
    def from_keys(cls, keys: Iterable[RawKey], event: InputEvent = InputEvent.PRESS) -> "Keymap":
        return cls({k: event for k in keys})

    @classmethod
    def default(cls) -> "Keymap":
        return cls.from_keys(DEFAULT_PRESS_KEYS)

    def lookup(self, key: RawKey) -> Optional[InputEvent]:
        return self.mapping.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.mapping

    def __len__(self) -> int:
        return len(self.mapping)
