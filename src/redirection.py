""" Resolve output redirections in a command's arguments. """
import contextlib
import logging
import os
import sys

from command import Command
from constants import REDIRECT_OPERATORS
from exceptions import RedirectionError

logger = logging.getLogger(__name__)


def resolve(cmd: Command, expand_path=None) -> Command:
    """
    Return a copy of `cmd` with redirections moved out of its arguments.

    Only the first operator for each stream counts; an operator in the
    last position has no target and stays a literal argument.
    """
    targets = {}
    args = []

    i = 0
    while i < len(cmd.args):
        tok = cmd.args[i]
        redirect = REDIRECT_OPERATORS.get(tok)
        if redirect is not None and i + 1 < len(cmd.args):
            stream, append = redirect
            if stream not in targets:
                path = cmd.args[i + 1]
                if expand_path is not None:
                    path = expand_path(path)
                targets[stream] = (path, append)
                i += 2
                continue
        args.append(tok)
        i += 1

    stdout, append = targets.get("stdout", (cmd.stdout, cmd.append))
    stderr, stderr_append = targets.get("stderr", (cmd.stderr, cmd.stderr_append))
    return Command(cmd.name, args, stdout=stdout, append=append,
                   stderr=stderr, stderr_append=stderr_append)


def open_target(filename, append=False):
    """ Create the file's directory if needed and open it for writing. """
    directory = os.path.dirname(filename)
    logger.debug("opening %s (%s)", filename, "append" if append else "truncate")
    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise RedirectionError(f"{directory}: cannot create directory: {e.strerror or e}") from e

    try:
        return open(filename, "a" if append else "w")
    except OSError as e:
        raise RedirectionError(f"{filename}: cannot create file: {e.strerror or e}") from e


def writer_name(filename, default):
    return f"file({filename})" if filename else default


@contextlib.contextmanager
def redirect_stdout(filename, append):
    if filename is None:
        yield
        return

    with open_target(filename, append) as f:
        old_stdout = sys.stdout
        sys.stdout = f
        try:
            yield
        finally:
            sys.stdout = old_stdout


@contextlib.contextmanager
def redirect_stderr(filename, append):
    if filename is None:
        yield
        return

    with open_target(filename, append) as f:
        old = sys.stderr
        sys.stderr = f
        try:
            yield
        finally:
            sys.stderr = old
