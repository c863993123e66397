from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from stoch.model.solution import Solution


READY = "ready"
RUNNING = "running"
COMPLETE = "complete"


@dataclass(frozen=True)
class IterationRecord:
    iteration: int
    value: float
    best_value: float
    temperature: float
    acceptance_probability: float
    accepted: bool = True
    bits: Optional[Tuple[int, ...]] = None


@dataclass(frozen=True)
class AnnealingState:
    """
    Snapshot of an annealing run after some number of steps. Stepping never mutates a snapshot; it returns a new one
    whose `history` extends the previous tuple, so a driver can keep old snapshots around (e.g. to rewind a display)
    without them changing underneath it.
    """

    current: Optional[Solution]
    current_cost: float
    best: Optional[Solution]
    best_cost: float
    temperature: float
    iteration: int = 0
    history: Tuple[IterationRecord, ...] = field(default_factory=tuple)
    accepted_worse: int = 0
    complete: bool = False

    @property
    def status(self) -> str:
        if self.complete:
            return COMPLETE
        return READY if self.iteration == 0 else RUNNING

    @property
    def values(self):
        return [record.value for record in self.history]

    @property
    def best_values(self):
        return [record.best_value for record in self.history]

    def advance(self, record: IterationRecord, **changes):
        """New snapshot with `record` appended to the history and the given fields replaced"""
        return replace(self, history=self.history + (record,), **changes)

    def stopped(self):
        return self if self.complete else replace(self, complete=True)
