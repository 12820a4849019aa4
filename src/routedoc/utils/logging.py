"""Logging helpers for generation runs."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from time import monotonic
from typing import Dict, Iterator

from routedoc.utils.config import LOG_LEVEL

PACKAGE_LOGGER = "routedoc"


def configure_root(level: int = LOG_LEVEL) -> None:
    """Send log records to stderr and set the routedoc loggers to ``level``."""
    logging.basicConfig(format="%(levelname)s:%(name)s:%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


@contextmanager
def timed_run(logger: logging.Logger, stage: str) -> Iterator[Dict[str, object]]:
    """Time one generation stage.

    The yielded dict collects counters (paths, schemas, ...) that are logged
    with the elapsed time once the stage ends.
    """
    stats: Dict[str, object] = {}
    start = monotonic()
    try:
        yield stats
    finally:
        elapsed_ms = round((monotonic() - start) * 1000, 3)
        logger.debug(
            "generation.%s finished in %.3f ms",
            stage,
            elapsed_ms,
            extra={"stage": stage, "elapsed_ms": elapsed_ms, **stats},
        )


__all__ = ["PACKAGE_LOGGER", "configure_root", "timed_run"]
