"""
Command Resolver - Turns configuration command strings into Actions.

Grammar (prefixes are case-insensitive):
  ""  or whitespace            → NoOp
  shell:<command>              → Shell(command.strip())
  workflow:<a> && <b> && ...   → Composite of each step resolved again
  anything else                → Launch(raw)

Workflow steps go through the same grammar, except that a step starting
with "workflow:" is not expanded a second time. It is treated as a literal
path like any other unrecognised string.
"""

from typing import Optional

from loguru import logger

from palette.actions.models import Action, Composite, Launch, NoOp, Shell

SHELL_PREFIX = "shell:"
WORKFLOW_PREFIX = "workflow:"
WORKFLOW_DELIMITER = "&&"


def _has_prefix(raw: str, prefix: str) -> bool:
    return raw[:len(prefix)].lower() == prefix


def resolve(raw: Optional[str]) -> Action:
    """
    Resolve a raw command string into an Action.

    Never raises. Unrecognised input falls through to Launch with the raw
    string kept verbatim.

    Args:
        raw: Command string from the configuration document

    Returns:
        The resolved Action
    """
    return _resolve(raw, allow_workflow=True)


def _resolve(raw: Optional[str], allow_workflow: bool) -> Action:
    if raw is None or not raw.strip():
        return NoOp()

    if _has_prefix(raw, SHELL_PREFIX):
        return Shell(raw[len(SHELL_PREFIX):].strip())

    if allow_workflow and _has_prefix(raw, WORKFLOW_PREFIX):
        return _parse_workflow(raw[len(WORKFLOW_PREFIX):])

    return Launch(raw)


def _parse_workflow(body: str) -> Action:
    """Split a workflow body on '&&' and resolve each non-empty step."""
    segments = [segment.strip() for segment in body.strip().split(WORKFLOW_DELIMITER)]
    segments = [segment for segment in segments if segment]

    if not segments:
        return NoOp()

    steps = []
    for segment in segments:
        if _has_prefix(segment, WORKFLOW_PREFIX):
            logger.debug(f"Nested workflow step treated as a path: {segment}")
        steps.append(_resolve(segment, allow_workflow=False))

    return Composite(tuple(steps))
