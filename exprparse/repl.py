"""
Interactive front end for exprparse.

Reads one expression per line, parses it with a fresh parser and prints
the tree in prefix form, or the diagnostics when the input was malformed.

Usage:
    exprparse-repl [options]

Options:
    -c EXPR     Parse a single expression and exit
    --tokens    Print the token stream instead of the tree
    --verbose   Enable debug logging
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import TokenType, tokenize_string
from .parser import create_parser, print_ast

logger = logging.getLogger(__name__)

PROMPT = "> "


def process_line(line: str, out: TextIO, err: TextIO,
                 show_tokens: bool = False, filename: str = "<stdin>") -> bool:
    """
    Handle one line of input.

    Returns:
        True if the line parsed without errors, or in token mode if no
        ERROR token was produced
    """
    if show_tokens:
        tokens = tokenize_string(line, filename)
        for token in tokens:
            print(f"{token.location.column:>4}  {token.type.name:<12} {token.lexeme!r}", file=out)
        return all(token.type != TokenType.ERROR for token in tokens)

    parser = create_parser(line, filename)
    tree, had_error = parser.expression()

    if had_error:
        for error in parser.errors:
            print(f"[column {error.location.column}] {error.short_message()}", file=err)
        logger.debug("partial tree: %s", print_ast(tree))
        return False

    print(print_ast(tree), file=out)
    return True


def run(stdin: TextIO, out: TextIO, err: TextIO, show_tokens: bool = False) -> int:
    """Read-parse-print loop until end of input."""
    interactive = stdin.isatty()
    failures = 0

    while True:
        if interactive:
            print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            if interactive:
                print(file=out)
            break

        line = line.rstrip("\n")
        if not line.strip():
            continue

        if not process_line(line, out, err, show_tokens=show_tokens):
            failures += 1

    logger.debug("finished with %d malformed line(s)", failures)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the REPL"""

    parser = argparse.ArgumentParser(
        prog="exprparse-repl",
        description="Parse arithmetic expressions and print their syntax trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    exprparse-repl                     # Interactive session
    exprparse-repl -c "1 + 2 * 3"      # Prints (+ 1 (* 2 3))
    echo "-1 ? 2 : 3" | exprparse-repl --tokens
        """
    )

    parser.add_argument('-c', dest='expression', metavar='EXPR',
                        help='Parse a single expression and exit')
    parser.add_argument('--tokens', action='store_true',
                        help='Print the token stream instead of the tree')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.expression is not None:
        ok = process_line(args.expression, sys.stdout, sys.stderr,
                          show_tokens=args.tokens, filename="<command line>")
        return 0 if ok else 1

    try:
        return run(sys.stdin, sys.stdout, sys.stderr, show_tokens=args.tokens)
    except KeyboardInterrupt:
        print(file=sys.stdout)
        return 130


if __name__ == "__main__":
    sys.exit(main())
