import argparse
import logging
import sys
from typing import List

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .__about__ import version_text
from .converter import (
    DEFAULT_WIDTH,
    SUPPORTED_WIDTHS,
    Base,
    ConversionError,
    render,
)


console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

BASE_KEYS = {
    "b": Base.BIN,
    "o": Base.OCT,
    "d": Base.DEC,
    "x": Base.HEX,
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="radixtool",
        description="Convert integers between binary, octal, decimal and hexadecimal.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  radixtool 42             -> 42
  radixtool -b 42          -> 101010
  radixtool -x 0b101010    -> 2a
  radixtool -bn 5          -> 1011
  radixtool -n 0b1011      -> -5
  radixtool -a 0o52
  radixtool                (interactive mode)
        """,
    )
    parser.add_argument(
        "numeral",
        nargs="?",
        help="Number to convert, optionally prefixed with 0b, 0o or 0x",
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument("-b", "--bin", dest="base", action="store_const", const=Base.BIN, help="Output binary")
    target.add_argument("-o", "--oct", dest="base", action="store_const", const=Base.OCT, help="Output octal")
    target.add_argument("-d", "--dec", dest="base", action="store_const", const=Base.DEC, help="Output decimal (default)")
    target.add_argument("-x", "--hex", dest="base", action="store_const", const=Base.HEX, help="Output hexadecimal")
    target.add_argument("-a", "--all", dest="all", action="store_true", help="Show the number in every base")

    parser.add_argument(
        "-n",
        "--negative",
        dest="signed",
        action="store_true",
        help="Two's-complement signed interpretation",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        choices=SUPPORTED_WIDTHS,
        default=DEFAULT_WIDTH,
        help=f"Integer width in bits (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument("-p", "--prefix", action="store_true", help="Prefix output with 0b, 0o or 0x")
    parser.add_argument("-U", "--upper", action="store_true", help="Upper-case hex digits")
    parser.add_argument("-v", "--version", action="version", version=version_text())
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.set_defaults(base=Base.DEC)
    return parser.parse_args(argv)


def render_table(numeral: str, signed: bool, width: int, upper: bool = False) -> Table:
    table = Table(title=f"[bold]{escape(numeral)}[/bold]", box=box.SIMPLE, border_style="cyan")
    table.add_column("Base", style="cyan")
    table.add_column("Value", justify="right", style="magenta")
    for base in Base:
        table.add_row(
            base.label,
            render(numeral, base, signed=signed, width=width, prefix=True, upper=upper),
        )
    return table


def interactive_mode(width: int = DEFAULT_WIDTH, signed: bool = False, upper: bool = False) -> None:
    console.print("[bold cyan]=== Radix Tool (2 / 8 / 10 / 16) ===[/bold cyan]")
    console.print("Prefix numbers with 0b, 0o or 0x. Type 'q' in any field to exit.\n")

    while True:
        try:
            numeral = input("Number: ").strip()
            if numeral.lower() == "q":
                console.print("Exiting.")
                return

            key = input("Target base (b/o/d/x) [d]: ").strip().lower() or "d"
        except (EOFError, KeyboardInterrupt):
            console.print("\nExiting.")
            return

        if key == "q":
            console.print("Exiting.")
            return

        base = BASE_KEYS.get(key)
        if base is None:
            err_console.print(f"[red]Error: unknown target base '{escape(key)}'.[/red]\n")
            continue

        try:
            result = render(numeral, base, signed=signed, width=width, prefix=True, upper=upper)
        except ConversionError as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/red]\n")
            continue

        console.print(f"Result ({base.label}): {result}\n", highlight=False)


def main(argv: List[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    if args.numeral is None:
        interactive_mode(width=args.width, signed=args.signed, upper=args.upper)
        return

    numeral = args.numeral.strip()
    logger.debug("converting %r to %s (signed: %s, width: %d)", numeral, args.base.label, args.signed, args.width)

    try:
        if args.all:
            console.print(render_table(numeral, args.signed, args.width, upper=args.upper))
            return
        result = render(
            numeral,
            args.base,
            signed=args.signed,
            width=args.width,
            prefix=args.prefix,
            upper=args.upper,
        )
    except ConversionError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        sys.exit(1)

    console.print(result, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    main()
