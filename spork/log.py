"""Colored console output.

Every line is printed to stdout with a bold severity prefix, so build logs stay
readable when piped through other tools.
"""

GREEN = "\033[1;92m"
BLUE = "\033[1;94m"
YELLOW = "\033[1;93m"
RED = "\033[1;91m"
RESET = "\033[0m"


def _print(color: str, prefix: str, msg: object):
    print(f"{color}{prefix}{RESET} {msg}")


def success(msg: object):
    _print(GREEN, "[*]", msg)


def progress(msg: object):
    _print(BLUE, "[+]", msg)


def warning(msg: object):
    _print(YELLOW, "[?]", msg)


def fatal(msg: object):
    _print(RED, "[!]", msg)
