"""Tracing system for the Diver policy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .types import Phase


@dataclass
class TraceEntry:
    """One decision taken by the diver."""

    phase: Phase
    kind: str  # move, backtrack, target, abort, return, done
    node: Optional[int] = None
    detail: str = ""


@dataclass
class TraceLog:
    """Collects trace information during one seek or scram call."""

    entries: list[TraceEntry] = field(default_factory=list)

    def move(self, phase: Phase, node: int, detail: str = "") -> None:
        self.entries.append(TraceEntry(phase=phase, kind="move", node=node, detail=detail))

    def backtrack(self, node: int, detail: str = "") -> None:
        self.entries.append(TraceEntry(phase=Phase.SEEK, kind="backtrack", node=node, detail=detail))

    def target(self, node: int, detail: str = "") -> None:
        """Record the candidate chosen by a scram iteration."""
        self.entries.append(TraceEntry(phase=Phase.SCRAM, kind="target", node=node, detail=detail))

    def abort(self, node: int, detail: str = "") -> None:
        """Record a candidate path abandoned for the safe return."""
        self.entries.append(TraceEntry(phase=Phase.SCRAM, kind="abort", node=node, detail=detail))

    def done(self, phase: Phase, detail: str = "") -> None:
        self.entries.append(TraceEntry(phase=phase, kind="done", detail=detail))

    def count(self, kind: str) -> int:
        return sum(1 for e in self.entries if e.kind == kind)

    def format_lines(self, level: int) -> list[str]:
        """Format the trace.

        Level 1: one summary line per phase
        Level 2: every decision
        Level 3: every decision with its detail (scores, budgets)
        """
        if level <= 1:
            return [self._format_entry(e, with_detail=True) for e in self.entries if e.kind == "done"]
        return [self._format_entry(e, with_detail=level >= 3 or e.kind == "done") for e in self.entries]

    @staticmethod
    def _format_entry(entry: TraceEntry, with_detail: bool) -> str:
        node = f" {entry.node}" if entry.node is not None else ""
        detail = f" ({entry.detail})" if with_detail and entry.detail else ""
        return f"{entry.phase.value}:{entry.kind}{node}{detail}"
