"""
Interactive read-lex-print loop for the Monkey language.

Reads one line at a time and, depending on the mode, prints every token of
the line (``lex``) or the canonical rendering of the parsed program
(``parse``). Parse diagnostics are printed and the loop carries on.
"""

import logging

from monkey.monkey_lexer import Lexer
from monkey.monkey_parser import Parser

logger = logging.getLogger(__name__)

PROMPT = ">> "
MODES = ("lex", "parse")


def print_tokens(line: str) -> None:
    for tok in Lexer(line):
        print(f"{{Type:{tok.type} Literal:{tok.literal}}}")


def print_program(line: str) -> None:
    parser = Parser(Lexer(line))
    program = parser.parse_program()
    errors = parser.errors
    if errors:
        print("[error] >>> parser errors:")
        for msg in errors:
            print(f"\t{msg}")
        return
    print(program)


def start_repl(mode: str = "lex") -> None:
    if mode not in MODES:
        raise ValueError(f"Unknown REPL mode: {mode!r} (expected one of {MODES})")
    print(f"Monkey REPL [mode={mode}]. Type 'exit' or 'quit' to leave.")
    handle = print_tokens if mode == "lex" else print_program

    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if line.strip() in ("exit", "quit"):
            break
        if not line.strip():
            continue
        logger.debug("repl input: %r", line)
        handle(line)

    print("Exiting Monkey REPL.")
