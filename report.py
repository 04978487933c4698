
# report.py
import os
import sys
from types import MappingProxyType

import config
from errors import DuplicatePathError


def aggregate(results):
    """
    Merge finished worker results into one read-only mapping sorted by path.

    Partitions are disjoint, so a path seen twice means the input was wrong
    and is rejected rather than overwritten.
    """
    merged = {}
    for result in results:
        for path, digest in result.items():
            if path in merged:
                raise DuplicatePathError(path)
            merged[path] = digest
    return MappingProxyType({path: merged[path] for path in sorted(merged)})


def relative_path(path, folder):
    """Strip the literal root folder string from the front of path."""
    return path[len(folder):] if path.startswith(folder) else path


def format_hash_report(report, folder):
    return [f"{relative_path(path, folder)}{config.REPORT_SEPARATOR}{digest}"
            for path, digest in report.items()]


def format_listing(files, folder):
    """One relative path per line, sorted by full path."""
    return [relative_path(path, folder) for path in sorted(files)]


def _console_line(line):
    # Undecodable file name bytes are shown escaped instead of failing the print
    return os.fsencode(line).decode(sys.getfilesystemencoding(), "backslashreplace")


def write_report(lines, output_file=None):
    """
    Write report lines to output_file (created or truncated) or to stdout.

    File output keeps the exact bytes of every file name. The whole report is
    encoded before the file is opened, so a failure never leaves it truncated.
    """
    if output_file is None:
        for line in lines:
            print(_console_line(line))
        return
    data = b"".join(os.fsencode(line) + b"\n" for line in lines)
    with open(output_file, "wb") as f:
        f.write(data)
    print(f"Written to {output_file}")
