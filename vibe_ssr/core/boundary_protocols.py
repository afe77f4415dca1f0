"""Boundary Protocols — contracts for the non-deterministic inputs core needs.

Invariants:
    - Core never reads the wall clock or a global RNG itself
    - Implementations live in infrastructure/ and are injected by the shell

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
"""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current instant. Must return an aware datetime."""
    def now(self) -> datetime: ...


class UptimeSource(Protocol):
    """Source of the uptime figure reported by the health snapshot."""
    def uptime(self) -> int: ...
