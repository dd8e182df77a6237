"""
Debug tracing for the netrc loader and parser, via Loguru.

`LOG` reports the parse pipeline step by step: the file being stat'ed, its
mode, the token count, the number of machines folded, and the point at which
a grammar or permission error was raised. Output goes to stderr so that it
never mixes with the CLI's own rich output on stdout.

Only structure is traced. Machine names and token positions may appear in a
message, but login, password, account and macdef values never do. Callers
pass pre-formatted strings, never records.

Example:
    from netrcparse.lib.log import LOG
    LOG(f"Folding {len(tokens)} tokens")

Environment:
- Set `NETRC_BEQUIET=True` to silence the trace.
"""

from loguru import logger
from typing import Any
import sys

# Every record carries the tag shown in the first column
netrc_logger = logger.bind(app="netrc")

trace_format = (
    "<green>{time:HH:mm:ss.SSS}</green> │ "
    "<magenta>{extra[app]}</magenta> │ "
    "<yellow>{module: >9}</yellow>.<cyan>{function: <20}</cyan>:<cyan>{line: <3}</cyan> │ "
    "<level>{message}</level>"
)

netrc_logger.remove()
netrc_logger.add(sys.stderr, format=trace_format, level="DEBUG")


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Emit a debug trace line attributed to the calling function.

    Silent when `appsettings.beQuiet` is set.

    :param args: Message, already formatted by the caller.
    :param kwargs: Extra loguru arguments.
    """
    try:
        from netrcparse.config.settings import appsettings  # Read at call time

        if not appsettings.beQuiet:
            netrc_logger.opt(depth=1).debug(*args, **kwargs)
    except Exception as e:
        print(f"Logging error: {e}")  # Fallback to standard output on failure
