from __future__ import annotations

import logging


def setup_logging(level: str | None = None) -> None:
    """Configure a single console handler for the whole process.

    Unknown level names fall back to INFO.
    """
    level_value = getattr(logging, (level or "INFO").upper(), logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
