from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any
import time
from datetime import datetime, timezone

# --- timing helpers ---
def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")

def mono_ts() -> float:
    # Monotonic high-res timestamp (immune to system clock changes)
    return time.perf_counter()

# --- semantic input ---
class InputEvent(Enum):
    """Decoded input, independent of which physical key produced it."""
    PRESS = "press"

@dataclass(frozen=True)
class SemanticEvent:
    """Keymap-translated input event, stamped when it was captured."""
    kind: InputEvent = InputEvent.PRESS
    t_mono: float = field(default_factory=mono_ts)
    t_utc: Optional[str] = None                  # lazy; materialized on serialize

    def to_record(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "t_utc": self.t_utc or utc_iso(),
            "t_mono": self.t_mono,
        }
