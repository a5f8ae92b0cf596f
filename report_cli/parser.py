"""report_cli.parser

Argument parser for the report tool.

The parser accepts either an argv-style sequence or a whole invocation string.
Strings are tokenized with :func:`shlex.split`, so a double-quoted path such as
``"my repos/a"`` arrives as a single argument.
"""

from __future__ import annotations

import argparse
import logging
import shlex
from typing import Optional, Sequence, Union

from report_cli.args.flags import DEFAULT_FLAG_REGISTRY, FlagRegistry, primary_flag
from report_cli.args.report import add_report_args

logger = logging.getLogger(__name__)


def build_parser(registry: Optional[FlagRegistry] = None) -> argparse.ArgumentParser:
    registry = registry if registry is not None else DEFAULT_FLAG_REGISTRY
    parser = argparse.ArgumentParser(
        prog="report",
        description="Analyze contributions across one or more git repositories and render a report.",
        add_help=False,
        allow_abbrev=False,
    )
    add_report_args(parser, registry=registry)
    return parser


def parse_args(
    invocation: Union[str, Sequence[str]],
    *,
    registry: Optional[FlagRegistry] = None,
) -> argparse.Namespace:
    """Parse a report invocation.

    Raises SystemExit (via argparse) when the invocation is invalid.
    """
    registry = registry if registry is not None else DEFAULT_FLAG_REGISTRY
    parser = build_parser(registry)

    argv = shlex.split(invocation) if isinstance(invocation, str) else list(invocation)
    logger.debug("parsing report invocation: %s", argv)
    args = parser.parse_args(argv)

    # A window can be given by two of since/until/period, never all three.
    if args.period and args.since and args.until:
        parser.error(
            f"{primary_flag('period', registry)} cannot be combined with both "
            f"{primary_flag('since', registry)} and {primary_flag('until', registry)}"
        )

    return args
