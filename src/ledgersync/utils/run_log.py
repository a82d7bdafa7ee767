"""Per-run log file.

Each run truncates the log file and records its major steps there. The file is
owned by a ``logging.FileHandler`` whose lifetime is bounded by
``open_run_log``; callers pass the yielded logger to the components that need
it instead of reaching for a module-level stream.
"""

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

RUN_LOGGER_NAME = "ledgersync.run"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def parse_level(level: int | str | None) -> int:
    """Resolve a level name or number, defaulting to ``LEDGERSYNC_LOG_LEVEL`` or INFO."""
    if isinstance(level, int):
        return level
    if isinstance(level, str) and level.strip():
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Unknown log level '{level}'")
    env_val = os.getenv("LEDGERSYNC_LOG_LEVEL")
    if env_val:
        return parse_level(env_val)
    return logging.INFO


@contextmanager
def open_run_log(
    path: str | os.PathLike, level: int | str | None = None
) -> Iterator[logging.Logger]:
    """Open the run log, yield its logger, and always flush and close it.

    Args:
        path: Log file path; recreated for every run
        level: Logging level as int or name

    Yields:
        Logger writing only to the run log file
    """
    numeric_level = parse_level(level)
    logger = logging.getLogger(RUN_LOGGER_NAME)
    handler = logging.FileHandler(Path(path), mode="w", encoding="utf-8")
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))

    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    # Keep run output out of the root logger
    logger.propagate = False
    try:
        logger.info("--- Starting Execution ---")
        yield logger
    finally:
        handler.flush()
        logger.removeHandler(handler)
        handler.close()
