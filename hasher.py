
# hasher.py
import hashlib
import os

import config
from errors import FileAccessError
from logging_config import get_logger

logger = get_logger(__name__)


def _raise_walk_error(error):
    raise error


def list_all_files(directory):
    """Recursively list every file under directory, files of a folder before its subfolders."""
    files = []
    for root, dirs, names in os.walk(directory, onerror=_raise_walk_error):
        for name in names:
            files.append(os.path.join(root, name))
    logger.info("Found %d files in %s", len(files), directory)
    return files


def compute_file_hash(filepath, chunk_size=config.READ_CHUNK_SIZE):
    """Compute the MD5 of a single file as a lowercase hex string."""
    if chunk_size < 1:
        raise ValueError(f"chunk size must be positive: {chunk_size}")
    h = hashlib.md5()
    try:
        with open(filepath, 'rb') as f:
            while chunk := f.read(chunk_size):
                h.update(chunk)
    except OSError as e:
        logger.error("Failed to hash %s: %s", filepath, e)
        raise FileAccessError(filepath, e) from e
    return h.hexdigest()


def hash_partition(files):
    """Digest every file of one partition and return a new path -> digest dict."""
    result = {}
    for filepath in files:
        result[filepath] = compute_file_hash(filepath)
    logger.debug("Hashed partition of %d files", len(result))
    return result
