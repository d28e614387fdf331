import logging
import sys
import time

from app.config import LOG_LEVEL


class UTCFormatter(logging.Formatter):
    converter = time.gmtime


def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    # getLevelName returns "Level <name>" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str = LOG_LEVEL):
    formatter = UTCFormatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        "%H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=_resolve_level(level),
        handlers=[handler],
        force=True,
    )
