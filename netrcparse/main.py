"""
netrcparse Main Module.

Command-line entry point that validates a .netrc credential file.

Features:
- Checks that the file is readable and writable by its owner only
- Parses the file and reports the first structural error, if any
- Optionally shows the stored entry for one machine, password masked

Usage:
    Run this module as a script, or use the installed `netrcparse` command.

Examples:
    Validate ~/.netrc:
        $ netrcparse

    Validate another file:
        $ netrcparse /tmp/netrc

    Show one entry:
        $ netrcparse --machine example.com

Note:
    Exit code is 0 when the file parses, 1 on any permission, I/O or parse
    error, and 1 on platforms without POSIX file permissions.
"""

import os
import sys
from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter
from typing import Final, Optional
from rich.console import Console
from rich.markup import escape
from netrcparse.config.settings import appsettings
from netrcparse.lib.errors import NetrcError, UnsupportedPlatformError
from netrcparse.lib.log import LOG
from netrcparse.lib.netrc import Netrc
from netrcparse.models.dataModel import MachineRecord

__version__: Final[str] = "0.1.0"

console: Console = Console()

# Define the argument parser
parser: Final[ArgumentParser] = ArgumentParser(
    prog="netrcparse",
    description="Validate a .netrc credential file.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument(
    "netrcfile",
    nargs="?",
    default=None,
    help="Path to the .netrc file (defaults to ~/.netrc)",
)
parser.add_argument(
    "--machine", type=str, default=None, help="Show the stored entry for this machine"
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def platform_check() -> None:
    """Require a host that reports POSIX permission bits.

    Raises:
        UnsupportedPlatformError: On non-POSIX hosts
    """
    if os.name != "posix":
        raise UnsupportedPlatformError(sys.platform)


def record_show(record: MachineRecord) -> None:
    """Print one machine entry with the password masked."""
    console.print(f"[bold cyan]machine[/bold cyan]  {escape(record.name)}")
    console.print(f"[bold cyan]login[/bold cyan]    {escape(record.login or '')}")
    console.print(
        f"[bold cyan]password[/bold cyan] {'****' if record.password is not None else ''}"
    )
    if record.account is not None:
        console.print("[bold cyan]account[/bold cyan]  ****")
    if record.macdef is not None:
        console.print(f"[bold cyan]macdef[/bold cyan]   {escape(record.macdef)}")


def netrc_validate(options: Namespace) -> int:
    """Load the requested file and report the outcome.

    Args:
        options: Parsed command-line arguments

    Returns:
        int: Process exit code
    """
    try:
        platform_check()
        netrc: Netrc = Netrc.from_args(
            [options.netrcfile] if options.netrcfile else [], autoload=False
        )
        netrc.run()
    except NetrcError as e:
        LOG(f"Validation failed: {type(e).__name__}")
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        return 1

    if appsettings.detailedOutput:
        for name in netrc:
            console.print(f"  {escape(name)}", highlight=False)

    if options.machine:
        record: Optional[MachineRecord] = netrc[options.machine]
        if record is None:
            console.print(
                f"[bold red]Machine not found:[/bold red] {escape(options.machine)}",
                highlight=False,
            )
            return 1
        record_show(record)

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Argument list; sys.argv[1:] when omitted

    Returns:
        int: Process exit code
    """
    options: Namespace = parser.parse_args(argv)
    return netrc_validate(options)


if __name__ == "__main__":
    sys.exit(main())
