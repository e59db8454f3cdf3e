"""
Property-based tests for the shell dispatch loop.

Tests correctness properties of Shell.process using hypothesis.

**Feature: shell-dispatch**
"""

import io

import allure
import pytest
from hypothesis import given, settings, strategies as st

from cmdshell import (
    Command,
    CommandError,
    CommandResult,
    InputClosedError,
    Shell,
    ShellIOError,
)


def make_shell(lines, commands, prefix=None):
    """Build a shell reading the given lines and writing to a buffer."""
    output = io.StringIO()
    shell = Shell(prefix, commands, input_stream=io.StringIO("".join(lines)), output_stream=output)
    return shell, output


class Recorder:
    """Handler that records every call and returns a fixed result."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result if result is not None else CommandResult.success()

    def __call__(self, args, commands):
        self.calls.append((list(args), commands))
        return self.result


class BrokenOutput:
    def write(self, text):
        return len(text)

    def flush(self):
        raise OSError("terminal gone")


class BrokenInput:
    def readline(self):
        raise OSError("read failed")


# **Feature: shell-dispatch, Property 1: Empty input**
@allure.feature("Shell Dispatch")
@allure.story("Empty input")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=50)
@given(line=st.text(alphabet=" \t", max_size=10))
def test_blank_line_returns_empty(line: str):
    """
    Property 1: Empty input

    For any input line that trims to the empty string, process SHALL return
    an EMPTY failure and invoke no handler.
    """
    recorder = Recorder()
    shell, _ = make_shell([line + "\n"], [Command("", "nameless", recorder)])

    result = shell.process()

    assert result.error is CommandError.EMPTY
    assert recorder.calls == []


# **Feature: shell-dispatch, Property 2: Unknown command**
@allure.feature("Shell Dispatch")
@allure.story("Unknown command")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(name=st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=10))
def test_unknown_command_returns_not_found(name: str):
    """
    Property 2: Unknown command

    For any name not registered, process SHALL return NOT_FOUND.
    """
    recorder = Recorder()
    shell, _ = make_shell([f"{name}\n"], [Command(name.upper() + "_", "", recorder)])

    assert shell.process().error is CommandError.NOT_FOUND
    assert recorder.calls == []


@allure.feature("Shell Dispatch")
@allure.story("Successful dispatch")
@allure.severity(allure.severity_level.CRITICAL)
def test_last_token_names_the_command():
    """Test that 'echo a b' runs 'b' with ['echo', 'a'] and leaves 'echo' alone."""
    echo = Recorder()
    b = Recorder()
    shell, _ = make_shell(["echo a b\n"], [Command("echo", "", echo), Command("b", "", b)])

    result = shell.process()

    assert result.is_success
    assert echo.calls == []
    assert [args for args, _ in b.calls] == [["echo", "a"]]


@allure.feature("Shell Dispatch")
@allure.story("Successful dispatch")
@allure.severity(allure.severity_level.NORMAL)
def test_echo_a_b_without_b_is_not_found():
    """Test that 'echo a b' does not fall back to the first token."""
    echo = Recorder()
    shell, _ = make_shell(["echo a b\n"], [Command("echo", "", echo)])

    assert shell.process().error is CommandError.NOT_FOUND
    assert echo.calls == []


@allure.feature("Shell Dispatch")
@allure.story("Tie-break on duplicate names")
@allure.severity(allure.severity_level.CRITICAL)
def test_duplicate_names_last_registered_wins():
    """Test that the last command registered under a name shadows earlier ones."""
    first = Recorder(CommandResult.success("first"))
    second = Recorder(CommandResult.success("second"))
    shell, _ = make_shell(["dup\n"], [Command("dup", "", first), Command("dup", "", second)])

    result = shell.process()

    assert result.message == "second"
    assert first.calls == []
    assert len(second.calls) == 1


@allure.feature("Shell Dispatch")
@allure.story("Handler failure propagation")
@allure.severity(allure.severity_level.CRITICAL)
def test_handler_failure_returned_unchanged():
    """Test that a failing handler's result reaches the caller as EXECUTION_ERROR."""
    failure = CommandResult.failure(CommandError.EXECUTION_ERROR, "disk full")
    shell, _ = make_shell(["save\n"], [Command("save", "", Recorder(failure))])

    result = shell.process()

    assert result is failure
    assert result.error is CommandError.EXECUTION_ERROR


@allure.feature("Shell Dispatch")
@allure.story("Registry visibility")
@allure.severity(allure.severity_level.CRITICAL)
def test_handler_sees_full_registry():
    """Test that the handler receives every command, itself included, in order."""
    seen = Recorder()
    commands = [
        Command("version", "", Recorder()),
        Command("help", "", seen),
        Command("quit", "", Recorder()),
    ]
    shell, _ = make_shell(["help\n"], commands)

    shell.process()

    _, registry = seen.calls[0]
    assert list(registry) == commands
    assert registry is shell.commands


# **Feature: shell-dispatch, Property 7: Independent shells**
@allure.feature("Shell Dispatch")
@allure.story("Idempotent construction")
@allure.severity(allure.severity_level.NORMAL)
@settings(max_examples=50)
@given(lines=st.lists(st.sampled_from(["", "a", "x a", "b", "a b", "zzz", "  "]), min_size=1, max_size=8))
def test_identical_shells_behave_identically(lines: list):
    """
    Property 7: Independent shells

    Two shells built from the same commands and prefix and fed the same
    lines SHALL produce the same sequence of results.
    """
    commands = [
        Command("a", "", lambda args, cmds: CommandResult.success(",".join(args))),
        Command("b", "", lambda args, cmds: CommandResult.failure(message=str(len(cmds)))),
    ]
    feed = [line + "\n" for line in lines]
    first, first_out = make_shell(feed, commands, prefix="$ ")
    second, second_out = make_shell(feed, commands, prefix="$ ")

    first_results = [first.process() for _ in lines]
    second_results = [second.process() for _ in lines]

    assert first_results == second_results
    assert first_out.getvalue() == second_out.getvalue() == "$ " * len(lines)


@allure.feature("Shell Prompt")
@allure.story("Default prompt")
@allure.severity(allure.severity_level.NORMAL)
def test_default_prefix_written_before_read():
    """Test that the default prompt is written when no prefix is given."""
    shell, output = make_shell(["\n"], [])

    shell.process()

    assert shell.prefix == "cmdshell> "
    assert output.getvalue() == "cmdshell> "


@allure.feature("Shell Prompt")
@allure.story("Custom prompt used literally")
@allure.severity(allure.severity_level.NORMAL)
def test_custom_prefix_used_literally():
    """Test that a custom prompt gets no separator appended."""
    shell, output = make_shell(["\n", "\n"], [], prefix=">>")

    shell.process()
    shell.process()

    assert output.getvalue() == ">>>>"


@allure.feature("Shell Prompt")
@allure.story("Empty custom prompt")
@allure.severity(allure.severity_level.MINOR)
def test_empty_prefix_is_not_default():
    """Test that an empty string prefix is kept rather than replaced."""
    shell, output = make_shell(["\n"], [], prefix="")

    shell.process()

    assert output.getvalue() == ""


@allure.feature("Shell I/O")
@allure.story("End of input")
@allure.severity(allure.severity_level.CRITICAL)
def test_end_of_input_raises():
    """Test that an exhausted input stream raises InputClosedError."""
    shell, _ = make_shell([], [])

    with pytest.raises(InputClosedError):
        shell.process()

    with pytest.raises(EOFError):
        shell.process()


@allure.feature("Shell I/O")
@allure.story("Unusable terminal")
@allure.severity(allure.severity_level.CRITICAL)
def test_flush_failure_is_fatal():
    """Test that a prompt that cannot be flushed raises ShellIOError."""
    shell = Shell(None, [], input_stream=io.StringIO("x\n"), output_stream=BrokenOutput())

    with pytest.raises(ShellIOError):
        shell.process()


@allure.feature("Shell I/O")
@allure.story("Unusable terminal")
@allure.severity(allure.severity_level.CRITICAL)
def test_read_failure_is_fatal():
    """Test that a failing read raises ShellIOError."""
    shell = Shell(None, [], input_stream=BrokenInput(), output_stream=io.StringIO())

    with pytest.raises(ShellIOError):
        shell.process()


@allure.feature("Shell Dispatch")
@allure.story("Recoverable errors")
@allure.severity(allure.severity_level.NORMAL)
def test_process_usable_after_every_error():
    """Test that the shell keeps working after each kind of failure."""
    ok = Recorder()
    failing = Recorder(CommandResult.failure())
    shell, _ = make_shell(
        ["\n", "missing\n", "fail\n", "ok\n"],
        [Command("ok", "", ok), Command("fail", "", failing)],
    )

    errors = [shell.process().error for _ in range(4)]

    assert errors == [
        CommandError.EMPTY,
        CommandError.NOT_FOUND,
        CommandError.EXECUTION_ERROR,
        None,
    ]
    assert len(ok.calls) == 1


@allure.feature("Shell Dispatch")
@allure.story("Execute an already read line")
@allure.severity(allure.severity_level.NORMAL)
def test_execute_skips_prompt():
    """Test that execute dispatches without touching the streams."""
    recorder = Recorder()
    shell, output = make_shell([], [Command("run", "", recorder)])

    assert shell.execute("x y run").is_success
    assert recorder.calls[0][0] == ["x", "y"]
    assert output.getvalue() == ""
