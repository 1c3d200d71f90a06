"""
Action variants.

Every action is an immutable value. Two actions are equal when they have
the same variant and the same payload, so resolved actions can be compared
directly in tests and used as dict keys.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NoOp:
    """Does nothing. Result of blank or empty workflow commands."""


@dataclass(frozen=True)
class Launch:
    """Open a file or program with the OS shell-open mechanism."""
    path: str


@dataclass(frozen=True)
class Shell:
    """Run a command through the shell interpreter."""
    command: str


@dataclass(frozen=True)
class Composite:
    """Ordered steps executed one after another, non-atomically."""
    steps: tuple = ()

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "steps", tuple(self.steps))


Action = Union[NoOp, Launch, Shell, Composite]
