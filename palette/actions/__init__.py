"""
Actions package - Command strings to executable actions.

A configuration command string is resolved once into an immutable Action
and executed on demand by the ActionExecutor.
"""

from .executor import ActionExecutor, Outcome, can_execute, execute
from .models import Action, Composite, Launch, NoOp, Shell
from .resolver import resolve

__all__ = [
    "Action",
    "NoOp",
    "Launch",
    "Shell",
    "Composite",
    "resolve",
    "ActionExecutor",
    "Outcome",
    "execute",
    "can_execute",
]
