"""
Monkey CLI Entrypoint.

This module provides the command-line interface for the Monkey front end.
It lexes and parses source text and prints the result; it never executes it.

Features:
    - Read source from `.monkey` files or inline strings.
    - Print the token stream, the canonical AST rendering, or the AST as JSON.
    - Report parse diagnostics on stderr; `--strict` turns them into a failing exit.
    - Launch an interactive REPL in lex or parse mode.

Example usage:
    monkey hello.monkey
    monkey -s "let x = 1 + 2 * 3;" --json
    monkey -s "a + b" --tokens
    monkey --repl --mode parse

Functions:
    run_monkey(source: str, is_string: bool = False, output: str = "ast",
               strict: bool = False) -> int:
        Executes the pipeline (lex -> parse -> print) and returns an exit status.

    main(argv: list[str] | None = None) -> int:
        Parses CLI arguments and invokes the appropriate action.
"""

import argparse
import json
import logging
import sys

from monkey.monkey_lexer import Lexer, tokenize
from monkey.monkey_parser import Parser

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".monkey"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(logging.DEBUG if verbose else getattr(logging, level))


def read_source(source: str, is_string: bool = False) -> str:
    """
    Resolve the CLI `source` argument to source text.

    Raises:
        ValueError: If `is_string` is False and the path does not end with `.monkey`.
    """
    if is_string:
        return source
    if not source.endswith(SOURCE_SUFFIX):
        raise ValueError(f"Only {SOURCE_SUFFIX} files are supported.")
    with open(source, encoding="utf-8") as f:
        return f.read()


def run_monkey(
    source: str,
    is_string: bool = False,
    output: str = "ast",
    strict: bool = False,
) -> int:
    """
    Run the Monkey front end on a file or string and print the result.

    Args:
        source (str): Source text or path to a `.monkey` file.
        is_string (bool): If True, treats `source` as raw code. Defaults to False.
        output (str): One of "tokens", "ast" or "json". Defaults to "ast".
        strict (bool): If True, any parse error makes the run fail. Defaults to False.

    Returns:
        int: 0 on success, 1 if parse errors were found and `strict` is set.
    """
    text = read_source(source, is_string)
    logger.info("read %d characters", len(text))

    if output == "tokens":
        for tok in tokenize(text):
            print(f"{tok.type}\t{tok.literal}")
        return 0

    parser = Parser(Lexer(text))
    program = parser.parse_program()
    errors = parser.errors
    for msg in errors:
        print(f"[error] >>> {msg}", file=sys.stderr)

    if output == "json":
        print(json.dumps(program.to_dict(), indent=2))
    else:
        print(program)

    if errors and strict:
        logger.error("%d parse error(s) in strict mode", len(errors))
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the Monkey CLI.

    - Launches the REPL if no source is given or `--repl` is specified.
    - Otherwise runs the front end and prints tokens, AST text or AST JSON.
    """
    parser = argparse.ArgumentParser(prog="monkey")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    out_group = parser.add_mutually_exclusive_group()
    out_group.add_argument(
        "--tokens",
        dest="output",
        action="store_const",
        const="tokens",
        help="Print the token stream",
    )
    out_group.add_argument(
        "--ast",
        dest="output",
        action="store_const",
        const="ast",
        help="Print the parenthesized AST rendering (default)",
    )
    out_group.add_argument(
        "--json",
        dest="output",
        action="store_const",
        const="json",
        help="Print the AST as JSON",
    )
    parser.set_defaults(output="ast")
    parser.add_argument(
        "--strict", action="store_true", help="Exit with status 1 on parse errors"
    )
    parser.add_argument(
        "--repl", action="store_true", help="Launch interactive REPL"
    )
    parser.add_argument(
        "--mode",
        choices=("lex", "parse"),
        default="lex",
        help="What the REPL prints for each line (default: lex)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Shorthand for --log-level DEBUG"
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.verbose)

    if args.repl or args.source is None:
        from monkey.monkey_repl import start_repl

        start_repl(mode=args.mode)
        return 0

    return run_monkey(
        source=args.source,
        is_string=args.string,
        output=args.output,
        strict=args.strict,
    )


if __name__ == "__main__":
    sys.exit(main())
