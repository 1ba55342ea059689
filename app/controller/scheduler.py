# app/controller/scheduler.py
from __future__ import annotations
from enum import Enum
from typing import Dict, FrozenSet, List, Protocol, Sequence, Set, Tuple
import structlog

from app.controller.context_state import SharedResources, StageResources

log = structlog.get_logger()

class SchedulerState(Enum):
    IDLE = "idle"
    CAPTURING = "capturing"
    AGGREGATING = "aggregating"
    PRESENTING = "presenting"

class Stage(Protocol):
    name: str
    phase: SchedulerState
    after: Tuple[str, ...]
    reads: FrozenSet[str]
    writes: FrozenSet[str]

    def run(self, res: StageResources) -> None: ...

class StageGraphError(ValueError):
    """The declared stages cannot be run in a safe, fixed order."""

def _ancestors(stages: Sequence[Stage]) -> Dict[str, Set[str]]:
    deps = {s.name: set(s.after) for s in stages}
    memo: Dict[str, Set[str]] = {}

    def visit(name: str, path: Tuple[str, ...]) -> Set[str]:
        if name in path:
            cycle = " -> ".join(path[path.index(name):] + (name,))
            raise StageGraphError(f"dependency cycle: {cycle}")
        if name not in memo:
            out: Set[str] = set()
            for d in deps[name]:
                out.add(d)
                out |= visit(d, path + (name,))
            memo[name] = out
        return memo[name]

    for s in stages:
        visit(s.name, ())
    return memo

def order_stages(stages: Sequence[Stage], resources: FrozenSet[str]) -> List[Stage]:
    """
    Validate the stage graph and return the execution order.
    Order is topological; ties keep declaration order. Any two stages that
    touch the same resource, where at least one writes it, must be ordered
    by the dependency relation.
    """
    names = [s.name for s in stages]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise StageGraphError(f"duplicate stage names: {dupes}")
    known = set(names)
    for s in stages:
        missing = [d for d in s.after if d not in known]
        if missing:
            raise StageGraphError(f"stage {s.name!r} depends on unknown stages {missing}")
        undeclared = sorted((s.reads | s.writes) - resources)
        if undeclared:
            raise StageGraphError(f"stage {s.name!r} declares unknown resources {undeclared}")

    anc = _ancestors(stages)

    for i, a in enumerate(stages):
        for b in stages[i + 1:]:
            shared = (a.writes & (b.reads | b.writes)) | (b.writes & a.reads)
            if shared and a.name not in anc[b.name] and b.name not in anc[a.name]:
                raise StageGraphError(
                    f"stages {a.name!r} and {b.name!r} both touch {sorted(shared)} "
                    f"with a writer but are not ordered"
                )

    ordered: List[Stage] = []
    done: Set[str] = set()
    remaining = list(stages)
    while remaining:
        ready = next(s for s in remaining if set(s.after) <= done)
        ordered.append(ready)
        done.add(ready.name)
        remaining.remove(ready)
    return ordered

class TickScheduler:
    """Runs every stage once per tick, in dependency order, on the calling thread."""
    def __init__(self, stages: Sequence[Stage], resources: SharedResources):
        self.resources = resources
        self._order = order_stages(stages, resources.names())
        self._views = {
            s.name: StageResources(s.name, resources, frozenset(s.reads), frozenset(s.writes))
            for s in self._order
        }
        self.state = SchedulerState.IDLE
        self.ticks = 0

    @property
    def order(self) -> List[str]:
        return [s.name for s in self._order]

    def tick(self) -> None:
        try:
            for stage in self._order:
                self.state = stage.phase
                try:
                    stage.run(self._views[stage.name])
                except Exception:
                    log.exception("stage.error", stage=stage.name, tick=self.ticks)
                    raise
        finally:
            self.state = SchedulerState.IDLE

        leftover = self.resources.events.drain()
        if leftover:
            log.warning("tick.events.dropped", count=len(leftover), tick=self.ticks)
        self.ticks += 1
