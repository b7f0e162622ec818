""" Current state of the shell. """
import os
from types import MappingProxyType

from shell_builtins import BuiltinRegistry, default_registry


def default_aliases():
    return {"~": os.environ.get("HOME", "/")}


class ShellState:
    def __init__(self, builtins: BuiltinRegistry|None = None, aliases=None):
        self.builtins = builtins if builtins is not None else default_registry()
        self.aliases = MappingProxyType(dict(aliases) if aliases is not None else default_aliases())
        self.last_status = 0

    def set_status(self, status: int):
        # normalize like shells do
        self.last_status = int(status) if status is not None else 0

    def expand_path(self, path: str) -> str:
        """ Replace an alias that is the whole path or its leading component. """
        for alias, target in self.aliases.items():
            if path == alias:
                return target
            if path.startswith(alias + "/"):
                return target.rstrip("/") + path[len(alias):]
        return path
