"""Command-line entry point for primality, palindrome and binary-search checks."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

from drillkit.arithmetic import is_prime
from drillkit.sorting import binary_search
from drillkit.text import is_palindrome

__all__ = ["main"]

_DEFAULT_ARRAY = tuple(range(1, 11))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drillkit", description="Run small number and text checks."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    prime = commands.add_parser("prime", help="tell whether a number is prime")
    prime.add_argument("number", type=int)

    palindrome = commands.add_parser("palindrome", help="tell whether a word is a palindrome")
    palindrome.add_argument("text")

    search = commands.add_parser("search", help="binary-search a key in sorted integers")
    search.add_argument("key", type=int)
    search.add_argument(
        "--values",
        type=int,
        nargs="+",
        default=list(_DEFAULT_ARRAY),
        help="ascending integers to search (default: 1 to 10)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, run the chosen check and print its verdict."""
    args = _build_parser().parse_args(argv)

    if args.command == "prime":
        verdict = "is" if is_prime(args.number) else "is not"
        print(f"{args.number} {verdict} a prime number.")
    elif args.command == "palindrome":
        verdict = "is" if is_palindrome(args.text) else "is not"
        print(f"The string {verdict} a palindrome.")
    else:
        index = binary_search(args.values, args.key)
        if index is None:
            print(f"The key {args.key} was not found")
        else:
            print(f"The key {args.key} was found at index {index}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())