from __future__ import annotations

import argparse
from pathlib import Path

from .flags import FlagRegistry


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return n


def unit_interval(value: str) -> float:
    try:
        x = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number between 0.0 and 1.0, got {value!r}") from None
    if not 0.0 <= x <= 1.0:
        raise argparse.ArgumentTypeError(f"expected a number between 0.0 and 1.0, got {value!r}")
    return x


def add_report_args(parser: argparse.ArgumentParser, *, registry: FlagRegistry) -> None:
    """Register every report option, accepting all aliases from ``registry``.

    The parser must be created with ``add_help=False``; the help flag comes from
    the registry like every other option.
    """

    def flag(name: str, **kwargs) -> None:
        spec = registry.spec(name)
        kwargs.setdefault("help", spec.help)
        if kwargs.get("action") != "help":
            kwargs.setdefault("dest", name)
        parser.add_argument(*spec.aliases, **kwargs)

    flag("help", action="help")

    # Repo selection: either a config directory or explicit repos
    source = parser.add_mutually_exclusive_group()
    source.add_argument(*registry.aliases("config"), dest="config", type=Path, help=registry.spec("config").help)
    source.add_argument(
        *registry.aliases("repos"),
        dest="repos",
        nargs="+",
        metavar="REPO",
        help=registry.spec("repos").help,
    )

    flag("view", type=Path, nargs="?", const=True, default=None, metavar="PATH")
    flag("output", type=Path)

    # Analysis window
    flag("since", metavar="DATE")
    flag("until", metavar="DATE")
    flag("period", metavar="PERIOD")

    flag("formats", nargs="+", metavar="FORMAT")
    flag("ignore_standalone_config", action="store_true")
    flag("ignore_filesize_limit", action="store_true")
    flag("timezone", metavar="ZONE_ID")

    # Execution knobs
    flag("cloning_threads", type=positive_int, metavar="N")
    flag("analysis_threads", type=positive_int, metavar="N")
    flag("shallow_cloning", action="store_true")
    flag("fresh_cloning", action="store_true")

    # Authorship
    flag("find_previous_authors", action="store_true")
    flag("last_modified_date", action="store_true")
    flag("analyze_authorship", action="store_true")
    flag("originality_threshold", type=unit_interval, metavar="THRESHOLD")

    # Report shape
    flag("portfolio", action="store_true")
    flag("refresh_only_text", action="store_true")
