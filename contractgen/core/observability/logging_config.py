"""
Logging configuration for the contractgen CLI.

Only the ``contractgen`` package logger is configured; every module's
``logger = logging.getLogger(__name__)`` inherits from it. Records go
to stderr so the ``--json`` output of synthesize/check/catalog on
stdout stays parseable.

Levels are resolved in precedence order:
    --debug  >  --verbose  >  --quiet  >  CONTRACTGEN_LOG_LEVEL  >  WARNING
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

PACKAGE_LOGGER = "contractgen"
LOG_LEVEL_ENV = "CONTRACTGEN_LOG_LEVEL"

# Per-level formats; anything above INFO prints the bare message
_FORMATS = {
    logging.DEBUG: "%(levelname)-5s %(component)s:%(lineno)d - %(message)s",
    logging.INFO: "[%(component)s] %(message)s",
}
_FMT_MINIMAL = "%(message)s"


class ComponentFilter(logging.Filter):
    """Adds ``component``: the logger name relative to the package.

    ``contractgen.core.services.generators.synthesizer`` becomes
    ``services.generators.synthesizer``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        for prefix in (f"{PACKAGE_LOGGER}.core.", f"{PACKAGE_LOGGER}."):
            if name.startswith(prefix):
                name = name[len(prefix):]
                break
        record.component = name
        return True


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Pick the log level from CLI flags, falling back to the environment."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    env = os.environ if environ is None else environ
    return parse_level(env.get(LOG_LEVEL_ENV))


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Safe to call repeatedly: earlier handlers are replaced.

    Returns:
        The configured package logger.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(ComponentFilter())
    handler.setFormatter(logging.Formatter(_FORMATS.get(level, _FMT_MINIMAL)))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
