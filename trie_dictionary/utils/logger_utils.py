# logger_utils.py - logging setup and timing helpers

import logging
import sys
import time
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Configure root logging once for CLI/tool entry points.
    Library modules only call logging.getLogger(__name__).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )


def time_block(label: str) -> "_Timer":
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("load words"):
            trie.insert_many(words)
    The duration is logged at INFO when the block exits.
    """
    return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        logger.info("%s done in %.3fs", self.label, self.elapsed)
        return False
