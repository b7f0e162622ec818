""" Parse shell commands. """
import logging

from command import Command, CommandChain
from lexer import split_commands

logger = logging.getLogger(__name__)


def parse_simple_command(tokens: list[str]) -> Command|None:
    """ Parse a simple shell command. """
    if not tokens or not tokens[0]:
        return None
    return Command(tokens[0], tokens[1:])


def parse_command_list(token_groups: list[list[str]]) -> list[Command]:
    cmds = []
    for tokens in token_groups:
        cmd = parse_simple_command(tokens)
        if cmd is not None:
            cmds.append(cmd)
    return cmds


def parse_line(line: str) -> CommandChain:
    chain = CommandChain(parse_command_list(split_commands(line)))
    logger.debug("parsed %r into %d command(s): %r", line, len(chain), chain.commands)
    return chain
