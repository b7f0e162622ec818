""" Command to be executed. """


class Command:
    def __init__(self, name, args, stdout=None, append=False,
                 stderr=None, stderr_append=False):
        self.name = name
        self.args = args

        self.stdout = stdout      # filename or None
        self.append = append      # True for >>

        self.stderr = stderr      # filename or None
        self.stderr_append = stderr_append

        # set by CommandChain
        self.next = None

    def _key(self):
        return (self.name, tuple(self.args), self.stdout, self.append,
                self.stderr, self.stderr_append)

    def __eq__(self, other):
        if not isinstance(other, Command):
            return NotImplemented
        return self._key() == other._key()

    def __repr__(self):
        return f"Command({self.name!r}, {self.args!r}, stdout={self.stdout!r}, stderr={self.stderr!r})"


class CommandChain:
    """ Commands from one input line, joined by `&&`. """
    def __init__(self, commands=None):
        self.commands = list(commands or [])
        for cmd, nxt in zip(self.commands, self.commands[1:]):
            cmd.next = nxt
        if self.commands:
            self.commands[-1].next = None

    @property
    def head(self) -> Command | None:
        return self.commands[0] if self.commands else None

    def __iter__(self):
        cmd = self.head
        while cmd is not None:
            yield cmd
            cmd = cmd.next

    def __len__(self):
        return len(self.commands)

    def __eq__(self, other):
        if not isinstance(other, CommandChain):
            return NotImplemented
        return self.commands == other.commands

    def __repr__(self):
        return f"CommandChain({self.commands!r})"
