"""Tests for CommandRunner (the only boundary to external programs)."""

import shlex
import sys

import pytest

from app.system.command_runner import CommandResult, CommandRunner
from app.system.dispatcher import render


class TestBuildArgv:

    def test_privileged_command_gets_sudo(self):
        runner = CommandRunner()
        assert runner.build_argv("systemctl restart nginx", privileged=True) == [
            "sudo", "systemctl", "restart", "nginx",
        ]

    def test_read_only_command_runs_without_sudo(self):
        runner = CommandRunner()
        assert runner.build_argv("systemctl is-active nginx") == ["systemctl", "is-active", "nginx"]

    def test_sudo_can_be_disabled(self):
        runner = CommandRunner(use_sudo=False)
        assert runner.build_argv("rm -f /tmp/x", privileged=True) == ["rm", "-f", "/tmp/x"]

    def test_rendered_parameter_stays_one_argument(self):
        command = render("a2dissite {conf}", conf="x.conf; rm -rf / #")
        assert CommandRunner().build_argv(command, privileged=True) == [
            "sudo", "a2dissite", "x.conf; rm -rf / #",
        ]


class TestRun:

    def test_combines_stdout_and_stderr(self):
        script = "import sys; print('out'); sys.stdout.flush(); print('err', file=sys.stderr); sys.exit(3)"
        command = f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"

        result = CommandRunner(use_sudo=False).run(command)

        assert result.exit_code == 3
        assert result.success is False
        assert "out" in result.output
        assert "err" in result.output

    def test_zero_exit_is_success(self):
        command = f"{shlex.quote(sys.executable)} -c {shlex.quote('print(42)')}"

        result = CommandRunner(use_sudo=False).run(command)

        assert result == CommandResult(0, "42")
        assert result.success is True

    def test_metacharacters_are_not_interpreted(self, tmp_path):
        marker = tmp_path / "pwned"
        payload = f"; touch {marker}"
        script = "import sys; print(sys.argv[1])"
        command = render("{python} -c {script} {payload}",
                         python=sys.executable, script=script, payload=payload)

        result = CommandRunner(use_sudo=False).run(command)

        assert result.output == payload
        assert not marker.exists()

    def test_invalid_utf8_output_is_replaced(self):
        script = "import sys; sys.stdout.buffer.write(b'\\xff\\xfe latin1 caf\\xe9\\n')"
        command = f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"

        result = CommandRunner(use_sudo=False).run(command)

        assert result.exit_code == 0
        assert "latin1 caf" in result.output
        assert "�" in result.output

    def test_missing_executable(self):
        result = CommandRunner(use_sudo=False).run("/nonexistent/bin/panel-tool --help")

        assert result.exit_code == 127
        assert result.success is False


@pytest.mark.parametrize("value", ["plain", "with space", "it's", "$HOME", "a\nb", ""])
def test_render_is_reversible(value):
    assert shlex.split(render("cmd {value}", value=value)) == ["cmd", value]
