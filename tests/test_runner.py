# tests/test_runner.py
import sys

from subadjust_core.io.runner import CommandRunner


def test_successful_command_returns_output(base_config, capture_log):
    lines, cb = capture_log
    runner = CommandRunner(base_config, cb)
    out = runner.run([sys.executable, '-c', 'print("hello")'])
    assert out is not None
    assert "hello" in out
    assert lines and lines[0].startswith('[')
    assert '$ ' in lines[0]


def test_failing_command_returns_none_and_logs_tail(base_config, capture_log):
    lines, cb = capture_log
    runner = CommandRunner(base_config, cb)
    out = runner.run([sys.executable, '-c', 'import sys; print("boom"); sys.exit(3)'])
    assert out is None
    log = "\n".join(lines)
    assert "exit code 3" in log
    assert "boom" in log


def test_missing_tool_returns_none(base_config, capture_log):
    lines, cb = capture_log
    runner = CommandRunner(base_config, cb)
    assert runner.run(['definitely-not-a-real-tool-xyz']) is None
    assert any("Failed to execute" in line for line in lines)


def test_tool_paths_override_command_name(base_config, capture_log):
    lines, cb = capture_log
    runner = CommandRunner(base_config, cb)
    out = runner.run(['python-alias', '-c', 'print("via alias")'], {'python-alias': sys.executable})
    assert "via alias" in out


def test_empty_command(base_config, capture_log):
    _lines, cb = capture_log
    assert CommandRunner(base_config, cb).run([]) is None
