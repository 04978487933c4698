
# distributor.py
import os

from logging_config import get_logger

logger = get_logger(__name__)


def resolve_thread_count(threads):
    """Return threads when positive, the number of logical cores for 0 or None."""
    if threads is None or threads == 0:
        return os.cpu_count() or 1
    if threads < 0:
        raise ValueError(f"thread count must not be negative: {threads}")
    return threads


def distribute(files, threads):
    """
    Split files into `threads` lists, round-robin by index.

    List k holds every file at index i with i % threads == k, in input order.
    File sizes are not considered, so partitions can take uneven time.
    """
    if threads < 1:
        raise ValueError(f"thread count must be at least 1: {threads}")
    partitions = [[] for _ in range(threads)]
    for i, filepath in enumerate(files):
        partitions[i % threads].append(filepath)
    logger.debug("Distributed %d files over %d partitions: %s",
                 len(files), threads, [len(p) for p in partitions])
    return partitions
