"""CLI argument modules.

- :mod:`report_cli.args.flags` owns the flag registry (every accepted spelling).
- :mod:`report_cli.args.report` registers those flags on an argparse parser.

Nothing here may import :mod:`report_cli.testing`.
"""

from __future__ import annotations

__all__ = [
    "flags",
    "report",
]
