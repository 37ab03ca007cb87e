import sys
from typing import TextIO


RED = "\033[31m"
CYAN = "\033[36m"
YELLOW = "\033[33m"

RESET = "\033[0m"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def error(msg: str, file: TextIO | None = None) -> None:
    print(f"{RED}Error:{RESET} {msg}", file=file or sys.stderr)


def warning(msg: str, file: TextIO | None = None) -> None:
    print(f"{YELLOW}Warning:{RESET} {msg}", file=file or sys.stderr)
