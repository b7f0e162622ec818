""" Implement the core of the shell. """
import logging

from config import ShellConfig
from exceptions import ShellExit
from parser import parse_line
from runner import execute_chain
from shell_state import ShellState

logger = logging.getLogger(__name__)


def read_command(prompt="$ ", continuation_prompt="> "):
    """ Read a command with support for line continuation. """
    lines = []
    while True:
        line = input(prompt)
        if line.endswith("\\"):
            lines.append(line[:-1])
            prompt = continuation_prompt
        else:
            lines.append(line)
            break
    return "".join(lines)


class Shell:
    def __init__(self, config: ShellConfig|None = None):
        self.config = config or ShellConfig()
        self.state = ShellState()

    def run_line(self, line: str) -> int:
        """ Parse and execute one input line. ShellExit propagates. """
        line = line.strip()
        if not line:
            return self.state.last_status
        chain = parse_line(line)
        if not len(chain):
            return self.state.last_status
        return execute_chain(chain, self.state)

    def run(self):
        while True:
            try:
                line = read_command(self.config.prompt, self.config.continuation_prompt)
                self.run_line(line)
            except ShellExit as e:
                logger.debug("exit with status %d", e.status)
                return e.status

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
