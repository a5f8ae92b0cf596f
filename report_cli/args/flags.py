"""report_cli.args.flags

Central registry of the report tool's command-line flags.

Why this exists
---------------
Several parts of the code base need to agree on the *same* flag spellings:
- the argument parser (which spellings are accepted)
- the test-side invocation builder (which spelling to emit)
- help text

Each option has a stable *logical name* (``"config"``, ``"since"``, ...) and an
ordered tuple of accepted spellings. Element zero is the primary alias; every
consumer that needs to *write* a flag uses it.

The registry is read-only. Callers that need different spellings (e.g. to test a
renamed flag) build a new registry with :meth:`FlagRegistry.with_overrides` or
:func:`load_flag_registry` and inject it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)


class UnknownFlagError(KeyError):
    """Raised when a logical flag name is not present in a registry."""

    def __init__(self, name: str, valid: Sequence[str]) -> None:
        super().__init__(name)
        self.name = name
        self.valid = list(valid)

    def __str__(self) -> str:
        return f"Unknown flag '{self.name}'. Valid: {sorted(self.valid)}"


@dataclass(frozen=True)
class FlagSpec:
    """Static metadata describing one command-line option."""

    key: str
    aliases: Tuple[str, ...]
    help: str = ""

    @property
    def primary(self) -> str:
        return self.aliases[0]


def _normalize_aliases(key: str, aliases: Any) -> Tuple[str, ...]:
    if isinstance(aliases, str):
        aliases = [aliases]
    if not isinstance(aliases, (list, tuple)) or not aliases:
        raise ValueError(f"Flag '{key}' must declare at least one alias, got {aliases!r}")

    out: List[str] = []
    for a in aliases:
        if not isinstance(a, str) or not a.strip():
            raise ValueError(f"Flag '{key}' has an empty or non-string alias: {a!r}")
        a = a.strip()
        if not a.startswith("-"):
            raise ValueError(f"Flag '{key}' alias must start with '-': {a!r}")
        out.append(a)
    return tuple(out)


class FlagRegistry:
    """Read-only mapping of logical option name -> :class:`FlagSpec`."""

    def __init__(self, specs: Mapping[str, FlagSpec]) -> None:
        checked: Dict[str, FlagSpec] = {}
        for key, spec in specs.items():
            aliases = _normalize_aliases(key, spec.aliases)
            checked[key] = FlagSpec(key=key, aliases=aliases, help=spec.help)
        self._specs = MappingProxyType(checked)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"FlagRegistry({len(self._specs)} flags)"

    def names(self) -> List[str]:
        return list(self._specs.keys())

    def spec(self, name: str) -> FlagSpec:
        try:
            return self._specs[name]
        except KeyError:
            raise UnknownFlagError(name, self.names()) from None

    def aliases(self, name: str) -> Tuple[str, ...]:
        return self.spec(name).aliases

    def primary(self, name: str) -> str:
        """Return the canonical (first) spelling of ``name``."""
        return self.spec(name).primary

    def with_overrides(self, overrides: Mapping[str, Any]) -> "FlagRegistry":
        """Return a new registry with the alias tuples of some options replaced.

        Only existing options may be overridden; the option set is fixed by the
        parser, so an unknown name is an error rather than an addition.
        """
        specs: Dict[str, FlagSpec] = dict(self._specs)
        for name, aliases in (overrides or {}).items():
            if name not in specs:
                raise UnknownFlagError(name, self.names())
            specs[name] = FlagSpec(key=name, aliases=_normalize_aliases(name, aliases), help=specs[name].help)
            logger.debug("flag %s overridden: %s", name, specs[name].aliases)
        return FlagRegistry(specs)


def _flag(key: str, *aliases: str, help: str = "") -> FlagSpec:
    return FlagSpec(key=key, aliases=tuple(aliases), help=help)


# Canonical registry.
#
# NOTE: insertion order is the order options are registered on the parser and
# therefore the order they appear in --help output.
FLAGS: Dict[str, FlagSpec] = {
    spec.key: spec
    for spec in (
        _flag("help", "--help", "-h", help="Show this help message and exit."),
        _flag("config", "--config", "-c", help="Directory containing the CSV config files."),
        _flag("repos", "--repos", "--repo", "-r", help="One or more repository URLs or local paths."),
        _flag("view", "--view", "-v", help="Open the report in a browser (optionally from a given folder)."),
        _flag("output", "--output", "-o", help="Directory the report is written to."),
        _flag("since", "--since", "-s", help="Start date of analysis (dd/MM/yyyy)."),
        _flag("until", "--until", "-u", help="End date of analysis (dd/MM/yyyy)."),
        _flag("period", "--period", "-p", help="Length of the analysis window, e.g. 2d or 3w."),
        _flag("formats", "--formats", "-f", help="File formats to analyze, e.g. java adoc."),
        _flag(
            "ignore_standalone_config",
            "--ignore-standalone-config",
            "-i",
            help="Ignore standalone config files found in the analyzed repositories.",
        ),
        _flag(
            "ignore_filesize_limit",
            "--ignore-filesize-limit",
            "-I",
            help="Analyze files regardless of their size.",
        ),
        _flag("timezone", "--timezone", "-t", help="Timezone used for dates, e.g. UTC+08."),
        _flag("cloning_threads", "--cloning-threads", help="Number of threads used to clone repositories."),
        _flag("analysis_threads", "--analysis-threads", help="Number of threads used to analyze repositories."),
        _flag("shallow_cloning", "--shallow-cloning", "-S", help="Clone repositories with limited history."),
        _flag(
            "find_previous_authors",
            "--find-previous-authors",
            "-F",
            help="Attribute lines to authors of previous revisions (git blame --ignore-revs).",
        ),
        _flag(
            "last_modified_date",
            "--last-modified-date",
            "-l",
            help="Include the last modified date of each line in the report.",
        ),
        _flag("fresh_cloning", "--fresh-cloning", help="Delete previously cloned repositories before cloning."),
        _flag("analyze_authorship", "--analyze-authorship", "-A", help="Run detailed authorship analysis."),
        _flag(
            "originality_threshold",
            "--originality-threshold",
            "-ot",
            help="Threshold (0.0-1.0) for classifying a line as partially authored.",
        ),
        _flag("portfolio", "--portfolio", "-P", help="Generate a code-portfolio optimized report."),
        _flag("refresh_only_text", "--text", "-T", help="Refresh only the text content of an existing report."),
    )
}

DEFAULT_FLAG_REGISTRY = FlagRegistry(FLAGS)



def primary_flag(name: str, registry: Optional[FlagRegistry] = None) -> str:
    """Canonical spelling of ``name`` in ``registry`` (default registry if omitted)."""
    registry = registry if registry is not None else DEFAULT_FLAG_REGISTRY
    return registry.primary(name)


# ----------------------------
# YAML IO
# ----------------------------

def load_flag_registry(
    path: Union[str, Path],
    *,
    base: Optional[FlagRegistry] = None,
) -> FlagRegistry:
    """Load alias overrides from YAML and apply them on top of ``base``.

    Expected shape::

        repos: ["--repositories", "--repos", "-r"]
        since: --from
    """
    import yaml

    p = Path(path).expanduser().resolve()
    if not p.exists():
        raise FileNotFoundError(f"Flag registry file not found: {p}")
    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Flag registry YAML must be a mapping/object at top level: {p}")

    logger.debug("loading %d flag override(s) from %s", len(raw), p)
    base = base if base is not None else DEFAULT_FLAG_REGISTRY
    return base.with_overrides(raw)
