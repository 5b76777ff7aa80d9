# nfafront/automaton/__init__.py
"""Single-pattern NFA over single-character labels.

The automaton keeps its live configuration as a plain set of state ids and
recomputes it on every `apply` (subset construction on demand). Nothing is
determinized or cached ahead of time.

API
---
- `add_state(s, is_start=False, is_accept=False)`
- `add_transition(src, label, dst)`
- `reset()` / `apply(label)`
- `accepts() -> bool`
- `has_transitions(label) -> bool`   # probe, never mutates
"""

from __future__ import annotations
from typing import Dict, Iterable, Set, Tuple


class Automaton:
    def __init__(self) -> None:
        self.states: Set[int] = set()
        self.start_states: Set[int] = set()
        self.accept_states: Set[int] = set()
        # (state, label) -> destination states
        self.transitions: Dict[Tuple[int, str], Set[int]] = {}
        # empty until the first reset()
        self.current_states: Set[int] = set()

    # ---- Construction ----
    def add_state(self, s: int, is_start: bool = False, is_accept: bool = False) -> None:
        """Register `s`. Flags only accumulate; passing False never clears one."""
        self.states.add(s)
        if is_start:
            self.start_states.add(s)
        if is_accept:
            self.accept_states.add(s)

    def add_transition(self, src: int, label: str, dst: int) -> None:
        self.states.add(src)
        self.states.add(dst)
        self.transitions.setdefault((src, label), set()).add(dst)

    def add_transitions(self, src: int, labels: Iterable[str], dst: int) -> None:
        """Same edge for every label in `labels` (a character class)."""
        for label in labels:
            self.add_transition(src, label, dst)

    # ---- Simulation ----
    def reset(self) -> None:
        self.current_states = set(self.start_states)

    def apply(self, label: str) -> None:
        next_states: Set[int] = set()
        for s in self.current_states:
            dst = self.transitions.get((s, label))
            if dst:
                next_states |= dst
        self.current_states = next_states

    def accepts(self) -> bool:
        return not self.current_states.isdisjoint(self.accept_states)

    def has_transitions(self, label: str) -> bool:
        return any(self.transitions.get((s, label)) for s in self.current_states)

    def __repr__(self) -> str:
        return (
            f"Automaton(states={len(self.states)}, start={sorted(self.start_states)}, "
            f"accept={sorted(self.accept_states)}, current={sorted(self.current_states)})"
        )
