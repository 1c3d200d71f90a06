"""
Action Executor - Runs resolved actions with failure containment.

execute() never raises. Each attempted step produces an Outcome; the
outcomes are collected by run() and logged by execute(), so callers only
see side effects.

Preconditions:
  - NoOp, Shell: always runnable
  - Launch: target path is an existing file
  - Composite: advisory AND over all steps; each step is checked again
    right before it runs and skipped when its precondition fails
"""

import os
import shlex
import subprocess
import sys
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from palette.actions.models import Action, Composite, Launch, NoOp, Shell
from palette.utils.helpers import default_shell, load_settings

OK = "ok"
SKIPPED = "skipped"
FAILED = "failed"

DESKTOP_ENTRY_SUFFIX = ".desktop"


@dataclass
class Outcome:
    """Result of one attempted action step."""
    action: Action
    status: str = OK
    detail: str = ""
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status == OK


class ActionExecutor:
    """Execute actions using the OS shell-open mechanism and a shell interpreter."""

    def __init__(self, shell_program: Optional[str] = None, shell_args: Optional[list] = None):
        program, args = default_shell()
        self.shell_program = shell_program or program
        self.shell_args = list(shell_args) if shell_args is not None else args

    @classmethod
    def from_settings(cls, settings: dict) -> "ActionExecutor":
        shell = settings.get("shell", {})
        return cls(shell.get("program"), shell.get("args"))

    def can_execute(self, action: Action) -> bool:
        """Side-effect-free precondition check."""
        if isinstance(action, (NoOp, Shell)):
            return True
        if isinstance(action, Launch):
            return os.path.isfile(action.path)
        if isinstance(action, Composite):
            return all(self.can_execute(step) for step in action.steps)
        return False

    def execute(self, action: Action) -> None:
        """
        Execute an action and log every step that did not succeed.

        Args:
            action: Resolved action to run
        """
        for outcome in self.run(action):
            if outcome.status == SKIPPED:
                logger.warning(f"Skipped {_describe(outcome.action)}: {outcome.detail}")
            elif outcome.status == FAILED:
                logger.opt(exception=outcome.error).error(
                    f"Failed to run {_describe(outcome.action)}: {outcome.detail}"
                )
            else:
                logger.debug(f"Ran {_describe(outcome.action)}")

    def run(self, action: Action) -> list[Outcome]:
        """
        Execute an action and return one Outcome per attempted step.

        NoOp produces no outcome. Composite steps are flattened in order.
        """
        if isinstance(action, NoOp):
            return []

        if isinstance(action, Composite):
            outcomes = []
            for step in action.steps:
                if not self.can_execute(step):
                    outcomes.append(Outcome(step, SKIPPED, "precondition failed"))
                    continue
                outcomes.extend(self.run(step))
            return outcomes

        if isinstance(action, Launch):
            if not os.path.isfile(action.path):
                return [Outcome(action, SKIPPED, f"file not found: {action.path}")]
            return [self._attempt(action, self._open, action.path)]

        if isinstance(action, Shell):
            return [self._attempt(action, self._spawn_shell, action.command)]

        return [Outcome(action, FAILED, f"unsupported action type {type(action).__name__}")]

    def build_shell_command(self, command: str):
        """
        Build the interpreter invocation for a shell command.

        The command is wrapped in double quotes as-is. Embedded quotes are
        not escaped. Program and args stay intact even when they contain
        spaces.

        Returns:
            The raw command line on Windows, an argv list elsewhere
        """
        quoted_command = f'"{command}"'
        if os.name == "nt":
            interpreter = subprocess.list2cmdline([self.shell_program, *self.shell_args])
            return f"{interpreter} {quoted_command}"
        return [self.shell_program, *self.shell_args, *shlex.split(quoted_command)]

    def _attempt(self, action: Action, operation, argument: str) -> Outcome:
        try:
            operation(argument)
        except Exception as e:
            return Outcome(action, FAILED, str(e), e)
        return Outcome(action)

    def _open(self, path: str) -> None:
        """Open a file with the platform's default handler, fire-and-forget."""
        if sys.platform == "win32":
            os.startfile(path)
            return

        subprocess.Popen(
            open_command(path),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )

    def _spawn_shell(self, command: str) -> None:
        subprocess.Popen(
            self.build_shell_command(command),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=getattr(subprocess, "CREATE_NO_WINDOW", 0),
            start_new_session=True,
        )


def open_command(path: str) -> list[str]:
    """
    Get the argv that opens a path on macOS or Linux.

    Desktop entries are launched as applications through gio; xdg-open
    would open the entry file itself in an editor.
    """
    if sys.platform == "darwin":
        return ["open", path]
    if path.lower().endswith(DESKTOP_ENTRY_SUFFIX):
        return ["gio", "launch", path]
    return ["xdg-open", path]


def _describe(action: Action) -> str:
    if isinstance(action, Launch):
        return f"launch '{action.path}'"
    if isinstance(action, Shell):
        return f"shell command '{action.command}'"
    if isinstance(action, Composite):
        return f"workflow of {len(action.steps)} steps"
    return type(action).__name__


# Singleton accessor
_executor_instance = None


def get_executor() -> ActionExecutor:
    """
    Get the shared ActionExecutor configured from settings.toml.

    Returns:
        ActionExecutor: The global instance
    """
    global _executor_instance
    if _executor_instance is None:
        _executor_instance = ActionExecutor.from_settings(load_settings())
    return _executor_instance


def execute(action: Action) -> None:
    """Execute an action with the shared executor. Never raises."""
    get_executor().execute(action)


def can_execute(action: Action) -> bool:
    """Check an action's precondition with the shared executor."""
    return get_executor().can_execute(action)
