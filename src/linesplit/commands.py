"""Command-line interface handler for linesplit."""

import argparse
import json
import sys

from rich.console import Console
from rich.text import Text

from . import __version__
from .reader import read_first_line
from .tokenizer import TokenizeError, tokenize

console = Console()
err_console = Console(stderr=True)

OUTPUT_FORMATS = ("list", "json", "lines")

# Lines fed through the tokenizer by the demo command
SAMPLE_LINES = [
    'a b "c d"',
    'a b "c \\" d"',
    "a b c\\ d",
    'ab"c d"',
    '"c d"ef',
    '"" ""',
    'a b "c',
    "a b c\\",
    'a b "c\\',
]


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: linesplit [-h | --help] <command> [<args>]

Commands:
  split                    Split a line into tokens
      -f, --format STR     Output format: list, json or lines (default: list)
      <line>               The line to split (default: first line of stdin)

  demo                     Split a set of sample lines and show the results

  help                     Show this help message
  version                  Show program version
""")


def print_version() -> None:
    """Print version information."""
    print(__version__)


def print_tokens(line: str, tokens: list[str], output_format: str) -> None:
    """Print the tokens of a line in the requested format."""
    if output_format == "json":
        print(json.dumps(tokens))
    elif output_format == "lines":
        for token in tokens:
            print(token)
    else:
        console.print(
            Text.assemble(("INPUT: ", "cyan"), f" ({line})"), soft_wrap=True
        )
        console.print(
            Text.assemble(("RESULT:", "cyan"), f" {tokens!r}"), soft_wrap=True
        )


def cmd_split(args: argparse.Namespace) -> None:
    """Execute the split command."""
    line = args.line if args.line is not None else read_first_line(sys.stdin)

    try:
        tokens = tokenize(line)
    except TokenizeError as e:
        err_console.print(
            Text(f"Error: {e}: ({e.line})", style="red"), soft_wrap=True
        )
        sys.exit(1)

    print_tokens(line, tokens, args.format)


def cmd_demo(args: argparse.Namespace) -> None:
    """Execute the demo command."""
    for line in SAMPLE_LINES:
        try:
            tokens = tokenize(line)
        except TokenizeError as e:
            console.print(
                Text.assemble(f"{line}: ", ("ERROR:", "red"), f" {e}"), soft_wrap=True
            )
            continue
        console.print(Text(f"{line}: {tokens!r}"), soft_wrap=True)


def main() -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Shell-like line splitter", add_help=False
    )

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser("split", add_help=False)
    split_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for split"
    )
    split_parser.add_argument(
        "-f",
        "--format",
        type=str,
        choices=OUTPUT_FORMATS,
        default="list",
        help="Output format (default: list)",
    )
    split_parser.add_argument("line", nargs="?", help="Line to split")

    # Demo command
    demo_parser = subparsers.add_parser("demo", add_help=False)
    demo_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for demo"
    )

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    # Parse arguments
    if len(sys.argv) < 2:
        print_usage()
        return

    args = parser.parse_args()

    # Handle global and command-specific help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    # Execute commands
    if args.command == "split":
        cmd_split(args)
    elif args.command == "demo":
        cmd_demo(args)
