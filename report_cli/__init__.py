"""report_cli

Command-line surface of the report tool.

Layout
------
* :mod:`report_cli.args` - flag registry and argparse registration
* :mod:`report_cli.parser` - parses an invocation (argv list or whole string)
* :mod:`report_cli.testing` - helpers for writing invocations in tests

Dependencies point one way: ``testing`` -> ``args``. The parser never depends on
the test helpers.
"""

from __future__ import annotations
