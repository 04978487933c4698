
# config.py
import os
import warnings
from dotenv import load_dotenv

load_dotenv()


def env_int(name, default, minimum=1):
    """Read an integer setting, falling back to default when it is malformed or below minimum."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = None
    if value is None or value < minimum:
        warnings.warn(f"Ignoring {name}={raw!r}, expected an integer >= {minimum}; using {default}")
        return default
    return value


# --- Config Section ---
DEFAULT_THREADS = os.getenv("FOLDERHASH_THREADS", "0")  # 0 = number of cores, parsed with --threads
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("LOG_FILE")  # Optional log file, console only when unset
READ_CHUNK_SIZE = env_int("READ_CHUNK_SIZE", 64 * 1024)

REPORT_SEPARATOR = " -> "
INVALID_ROOT_MESSAGE = "That isn't a directory. Try again"
