""" Execute parsed shell commands. """
import logging
import subprocess
import sys

from command import Command, CommandChain
from exceptions import CommandNotFoundError, ExternalCommandError, ShellError
from executables import find_executable
from redirection import open_target, redirect_stderr, redirect_stdout, resolve, writer_name
from shell_state import ShellState

logger = logging.getLogger(__name__)


def run_builtin(builtin, cmd: Command, shell_state: ShellState) -> int:
    with redirect_stdout(cmd.stdout, cmd.append):
        with redirect_stderr(cmd.stderr, cmd.stderr_append):
            return builtin.invoke(cmd.args, shell_state) or 0


def run_external(path: str, cmd: Command) -> int:
    stdout_handle = None
    stderr_handle = None
    try:
        if cmd.stdout is not None:
            stdout_handle = open_target(cmd.stdout, cmd.append)
        if cmd.stderr is not None:
            stderr_handle = open_target(cmd.stderr, cmd.stderr_append)

        # flush anything builtins buffered so output stays in order
        sys.stdout.flush()
        completed = subprocess.run(
            [cmd.name] + cmd.args,
            executable=path,
            stdout=stdout_handle,
            stderr=stderr_handle,
        )
    except OSError as e:
        raise ExternalCommandError(f"{cmd.name}: {e.strerror or e}") from e
    finally:
        for h in (stdout_handle, stderr_handle):
            if h:
                h.close()

    rc = completed.returncode
    if rc != 0:
        # killed by a signal: report 128 + signal number
        status = rc if rc > 0 else 128 - rc
        raise ExternalCommandError(f"{cmd.name}: exit status {status}", status)
    return 0


def execute_command(cmd: Command, shell_state: ShellState) -> int:
    """ Run one command and return its exit status. """
    try:
        cmd = resolve(cmd, shell_state.expand_path)
        logger.debug("%s: stdout=%s stderr=%s", cmd.name,
                     writer_name(cmd.stdout, "stdout"), writer_name(cmd.stderr, "stderr"))

        builtin = shell_state.builtins.lookup(cmd.name)
        if builtin is not None:
            logger.debug("%s: builtin %r", cmd.name, cmd.args)
            return run_builtin(builtin, cmd, shell_state)

        path = find_executable(cmd.name)
        if path is None:
            raise CommandNotFoundError(cmd.name)
        logger.debug("%s: external %s %r", cmd.name, path, cmd.args)
        return run_external(path, cmd)
    except ShellError as e:
        logger.debug("%s failed: %s", cmd.name, e)
        print(e, file=sys.stderr)
        return e.status


def execute_chain(chain: CommandChain, shell_state: ShellState) -> int:
    """ Run commands in order, stopping at the first nonzero status. """
    status = 0
    for cmd in chain:
        status = execute_command(cmd, shell_state)
        shell_state.set_status(status)
        if status != 0:
            if cmd.next is not None:
                logger.debug("chain stopped at %s (status %d)", cmd.name, status)
            break
    return status
