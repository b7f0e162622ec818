""" Errors raised while running shell commands. """
from constants import STATUS_CANNOT_EXECUTE, STATUS_NOT_FOUND


class ShellExit(Exception):
    """ Raised by `exit` to end the shell with a status. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class ShellError(Exception):
    """ Base class for errors reported to the user. """
    status = 1


class ArityError(ShellError):
    def __init__(self, command, expected, received):
        self.command = command
        self.expected = expected
        self.received = received
        super().__init__(f"{command}: expected {expected} argument(s), received {received}")


class ConversionError(ShellError):
    status = 2

    def __init__(self, command, value, reason):
        self.command = command
        self.value = value
        super().__init__(f"{command}: {value}: {reason}")


class CommandNotFoundError(ShellError):
    status = STATUS_NOT_FOUND

    def __init__(self, name):
        self.name = name
        super().__init__(f"{name}: command not found")


class RedirectionError(ShellError):
    """ A redirection target could not be created. """


class ExternalCommandError(ShellError):
    status = STATUS_CANNOT_EXECUTE

    def __init__(self, message, status=None):
        super().__init__(message)
        if status is not None:
            self.status = status
