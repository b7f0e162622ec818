""" Registry of builtin commands. """
import os
import sys

from constants import CLEAR_SEQUENCE, EXIT_CODE_RX
from exceptions import ArityError, ConversionError, ShellExit
from executables import find_executable


class BuiltinCommand:
    """ Base class for builtins. Output goes to sys.stdout / sys.stderr. """
    names: tuple[str, ...] = ()

    def invoke(self, args: list[str], state) -> int:
        raise NotImplementedError


class ExitCommand(BuiltinCommand):
    names = ("exit",)

    def invoke(self, args, state):
        if len(args) > 1:
            raise ArityError("exit", "0 or 1", len(args))
        if not args:
            raise ShellExit(0)
        if not EXIT_CODE_RX.fullmatch(args[0]):
            raise ConversionError("exit", args[0], "numeric argument required")
        raise ShellExit(int(args[0]))


class EchoCommand(BuiltinCommand):
    names = ("echo",)

    def invoke(self, args, state):
        print(" ".join(args))
        return 0


class TypeCommand(BuiltinCommand):
    names = ("type",)

    def invoke(self, args, state):
        if len(args) != 1:
            raise ArityError("type", 1, len(args))

        name = args[0]
        if name in state.builtins:
            print(f"{name} is a shell builtin")
            return 0

        path = find_executable(name)
        if path is not None:
            print(f"{name} is {path}")
            return 0

        print(f"{name}: not found")
        return 0


class PwdCommand(BuiltinCommand):
    names = ("pwd",)

    def invoke(self, args, state):
        print(os.getcwd())
        return 0


class CdCommand(BuiltinCommand):
    names = ("cd",)

    def invoke(self, args, state):
        if len(args) > 1:
            raise ArityError("cd", "0 or 1", len(args))
        if len(args) == 0:
            shown = target = os.environ.get("HOME", "/")
        else:
            shown = args[0]
            target = state.expand_path(args[0])

        try:
            os.chdir(target)
            return 0
        except FileNotFoundError:
            print(f"cd: {shown}: No such file or directory", file=sys.stderr)
        except NotADirectoryError:
            print(f"cd: {shown}: Not a directory", file=sys.stderr)
        except PermissionError:
            print(f"cd: {shown}: Permission denied", file=sys.stderr)
        return 1


class ClearCommand(BuiltinCommand):
    names = ("clear", "cls")

    def invoke(self, args, state):
        sys.stdout.write(CLEAR_SEQUENCE)
        sys.stdout.flush()
        return 0


class BuiltinRegistry:
    """ Fixed name -> builtin table, built once per shell session. """
    def __init__(self, commands=()):
        self._commands = {}
        for command in commands:
            for name in command.names:
                self._commands[name] = command

    def lookup(self, name: str) -> BuiltinCommand|None:
        return self._commands.get(name)

    def names(self) -> list[str]:
        return sorted(self._commands)

    def __contains__(self, name):
        return name in self._commands

    def __len__(self):
        return len(self._commands)


BUILTIN_TYPES = (
    ExitCommand,
    EchoCommand,
    TypeCommand,
    PwdCommand,
    CdCommand,
    ClearCommand,
)


def default_registry() -> BuiltinRegistry:
    return BuiltinRegistry(cls() for cls in BUILTIN_TYPES)
