import re

PROMPT = "$ "
CONTINUATION_PROMPT = "> "

# redirection operator -> (stream, append)
REDIRECT_OPERATORS = {
    ">": ("stdout", False),
    "1>": ("stdout", False),
    ">>": ("stdout", True),
    "1>>": ("stdout", True),
    "2>": ("stderr", False),
    "2>>": ("stderr", True),
}

STATUS_NOT_FOUND = 127
STATUS_CANNOT_EXECUTE = 126

CLEAR_SEQUENCE = "\033[2J\033[H"

# digits with an optional sign, nothing else
EXIT_CODE_RX = re.compile(r"[+-]?[0-9]+")
