""" Lexical analysis for shell commands. """


def split_commands(line: str) -> list[list[str]]:
    """
    Split a raw line into one token list per command.

    Single quotes group literally, double quotes group but still honor
    backslash escapes, a backslash outside single quotes takes the next
    character literally, and an unquoted `&&` ends the current command.
    Unterminated quotes are treated as closed at the end of the line.
    """
    commands = []
    tokens = []
    current = []
    in_single = False
    in_double = False
    escaped = False

    def flush():
        if current:
            tokens.append("".join(current))
            current.clear()

    def finish_command():
        nonlocal tokens
        flush()
        if tokens:
            commands.append(tokens)
            tokens = []

    i = 0
    n = len(line)
    while i < n:
        c = line[i]

        if escaped:
            current.append(c)
            escaped = False
        elif c == "\\" and not in_single:
            escaped = True
        elif c == "'" and not in_double:
            in_single = not in_single
        elif c == '"' and not in_single:
            in_double = not in_double
        elif not in_single and not in_double and c == "&" and line[i + 1:i + 2] == "&":
            finish_command()
            i += 1
        elif c == " " and not in_single and not in_double:
            flush()
        else:
            current.append(c)
        i += 1

    finish_command()
    return commands
