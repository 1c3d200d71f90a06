"""
Tests for the ActionExecutor.

Uses real files for Launch preconditions. Process spawning is patched so
nothing is started.
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from palette.actions import ActionExecutor, Composite, Launch, NoOp, Shell
from palette.actions.executor import FAILED, OK, SKIPPED, open_command
from palette.services.index import ShortcutIndexService

posix_only = pytest.mark.skipif(os.name == "nt", reason="POSIX command line splitting")


def _make_executor() -> ActionExecutor:
    executor = ActionExecutor(shell_program="sh", shell_args=["-c"])
    executor._open = MagicMock()
    return executor


class TestCanExecute:
    """Precondition checks."""

    def test_noop_and_shell_always_runnable(self):
        executor = _make_executor()
        assert executor.can_execute(NoOp()) is True
        assert executor.can_execute(Shell("anything")) is True

    def test_launch_requires_existing_file(self, existing_file, tmp_path):
        executor = _make_executor()
        assert executor.can_execute(Launch(str(existing_file))) is True
        assert executor.can_execute(Launch(str(tmp_path / "missing.exe"))) is False

    def test_launch_rejects_directories(self, tmp_path):
        executor = _make_executor()
        assert executor.can_execute(Launch(str(tmp_path))) is False

    def test_composite_is_and_of_steps(self, existing_file, tmp_path):
        executor = _make_executor()
        good = Launch(str(existing_file))
        bad = Launch(str(tmp_path / "missing.exe"))
        assert executor.can_execute(Composite((good, Shell("x")))) is True
        assert executor.can_execute(Composite((good, bad))) is False
        assert executor.can_execute(Composite(())) is True


class TestLaunch:
    """Launching files through the OS opener."""

    def test_existing_file_is_opened(self, existing_file):
        executor = _make_executor()
        outcomes = executor.run(Launch(str(existing_file)))
        assert [o.status for o in outcomes] == [OK]
        executor._open.assert_called_once_with(str(existing_file))

    def test_missing_file_is_skipped(self, tmp_path):
        executor = _make_executor()
        outcomes = executor.run(Launch(str(tmp_path / "missing.exe")))
        assert [o.status for o in outcomes] == [SKIPPED]
        executor._open.assert_not_called()

    def test_open_failure_is_contained(self, existing_file, log_messages):
        executor = _make_executor()
        executor._open.side_effect = OSError("no association")
        executor.execute(Launch(str(existing_file)))
        assert any(m.startswith("ERROR:") and "no association" in m for m in log_messages)

    def test_xdg_open_used_on_linux(self, existing_file):
        executor = ActionExecutor()
        with patch("palette.actions.executor.sys.platform", "linux"), \
                patch("palette.actions.executor.subprocess.Popen") as popen:
            executor.execute(Launch(str(existing_file)))
        assert popen.call_args[0][0] == ["xdg-open", str(existing_file)]

    def test_desktop_entry_launched_through_gio(self, tmp_path):
        applications = tmp_path / "applications"
        applications.mkdir()
        (applications / "firefox.desktop").write_text("[Desktop Entry]\nExec=firefox\n")

        service = ShortcutIndexService([str(applications)], ["*.desktop"])
        firefox = service.build_index()[0]

        with patch("palette.actions.executor.sys.platform", "linux"), \
                patch("palette.actions.executor.subprocess.Popen") as popen:
            ActionExecutor().execute(firefox.action)

        assert popen.call_args[0][0] == ["gio", "launch", str(applications / "firefox.desktop")]

    def test_open_command_per_platform(self):
        with patch("palette.actions.executor.sys.platform", "darwin"):
            assert open_command("/Apps/Notes.desktop") == ["open", "/Apps/Notes.desktop"]
        with patch("palette.actions.executor.sys.platform", "linux"):
            assert open_command("/apps/Code.DESKTOP") == ["gio", "launch", "/apps/Code.DESKTOP"]
            assert open_command("/docs/report.pdf") == ["xdg-open", "/docs/report.pdf"]


class TestShell:
    """Shell commands through the interpreter."""

    @posix_only
    def test_command_line_is_quoted(self):
        executor = _make_executor()
        assert executor.build_shell_command("echo hi") == ["sh", "-c", "echo hi"]

    @posix_only
    def test_embedded_quotes_are_not_escaped(self):
        executor = _make_executor()
        # sh -c "echo "hi"" splits the way a naive shell line would
        assert executor.build_shell_command('echo "hi"') == ["sh", "-c", "echo hi"]

    @posix_only
    def test_spawns_interpreter(self):
        executor = _make_executor()
        with patch("palette.actions.executor.subprocess.Popen") as popen:
            outcomes = executor.run(Shell("echo hi"))
        assert [o.status for o in outcomes] == [OK]
        assert popen.call_args[0][0] == ["sh", "-c", "echo hi"]

    @posix_only
    def test_unbalanced_quote_fails_without_spawning(self):
        executor = _make_executor()
        with patch("palette.actions.executor.subprocess.Popen") as popen:
            outcomes = executor.run(Shell('echo "hi'))
        assert [o.status for o in outcomes] == [FAILED]
        popen.assert_not_called()

    def test_spawn_failure_never_raises(self, log_messages):
        executor = _make_executor()
        with patch("palette.actions.executor.subprocess.Popen", side_effect=FileNotFoundError("sh")):
            executor.execute(Shell("echo hi"))
        assert any(m.startswith("ERROR:") for m in log_messages)

    @posix_only
    def test_program_path_with_spaces_stays_one_argument(self):
        executor = ActionExecutor(shell_program="/opt/My Tools/bash", shell_args=["-c", "-o x"])
        assert executor.build_shell_command("echo hi") == ["/opt/My Tools/bash", "-c", "-o x", "echo hi"]

    @posix_only
    def test_shell_spawn_detaches_from_session(self):
        executor = _make_executor()
        with patch("palette.actions.executor.subprocess.Popen") as popen:
            executor.run(Shell("echo hi"))
        assert popen.call_args.kwargs["start_new_session"] is True

    def test_windows_program_with_spaces_is_quoted(self):
        executor = ActionExecutor(shell_program="C:\\Program Files\\PowerShell\\pwsh.exe", shell_args=["-Command"])
        with patch("palette.actions.executor.os.name", "nt"):
            command_line = executor.build_shell_command("Get-Date")
        assert command_line == '"C:\\Program Files\\PowerShell\\pwsh.exe" -Command "Get-Date"'

    def test_windows_command_line_passed_verbatim(self):
        executor = ActionExecutor(shell_program="powershell.exe", shell_args=["-NoProfile", "-Command"])
        with patch("palette.actions.executor.os.name", "nt"):
            command_line = executor.build_shell_command("Get-Date")
        assert command_line == 'powershell.exe -NoProfile -Command "Get-Date"'


class TestComposite:
    """Workflow execution without abort-on-failure."""

    def test_failing_step_skipped_and_rest_runs(self, existing_file, tmp_path):
        executor = _make_executor()
        missing = Launch(str(tmp_path / "missing.exe"))
        present = Launch(str(existing_file))

        outcomes = executor.run(Composite((missing, present)))

        assert [o.status for o in outcomes] == [SKIPPED, OK]
        assert outcomes[0].action == missing
        executor._open.assert_called_once_with(str(existing_file))

    @posix_only
    def test_shell_step_runs_after_missing_launch(self, tmp_path):
        executor = _make_executor()
        with patch("palette.actions.executor.subprocess.Popen") as popen:
            executor.execute(Composite((Launch(str(tmp_path / "gone.exe")), Shell("echo hi"))))
        popen.assert_called_once()

    def test_precondition_checked_right_before_each_step(self, tmp_path):
        executor = _make_executor()
        target = tmp_path / "late.txt"

        # First step creates the file the second step needs
        executor._spawn_shell = MagicMock(side_effect=lambda _cmd: target.write_text(""))
        outcomes = executor.run(Composite((Shell("create"), Launch(str(target)))))

        assert [o.status for o in outcomes] == [OK, OK]
        executor._open.assert_called_once_with(str(target))

    def test_noop_produces_no_outcome(self):
        assert _make_executor().run(NoOp()) == []

    def test_skipped_steps_are_logged(self, tmp_path, log_messages):
        executor = _make_executor()
        executor.execute(Composite((Launch(str(tmp_path / "gone.exe")),)))
        assert any(m.startswith("WARNING:") and "gone.exe" in m for m in log_messages)


class TestFromSettings:
    def test_reads_shell_section(self):
        executor = ActionExecutor.from_settings({"shell": {"program": "bash", "args": ["-lc"]}})
        assert executor.shell_program == "bash"
        assert executor.shell_args == ["-lc"]

    def test_missing_section_uses_platform_default(self):
        executor = ActionExecutor.from_settings({})
        assert executor.shell_program in ("sh", "powershell.exe")
