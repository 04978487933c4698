
# folderhash.py
"""List the files under a folder, or MD5 them with a fixed pool of worker threads."""
import argparse
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor

import config
from distributor import distribute, resolve_thread_count
from errors import FolderHashError, InvalidRootError
from hasher import hash_partition, list_all_files
from logging_config import get_logger, setup_logging
from report import aggregate, format_hash_report, format_listing, write_report

logger = get_logger(__name__)


def hash_files(files, threads):
    """Digest files with `threads` workers, one round-robin partition each, and merge the results."""
    partitions = distribute(files, threads)
    # Leaving the block joins every worker before any result is read
    with ThreadPoolExecutor(max_workers=threads, thread_name_prefix="digest") as executor:
        futures = [executor.submit(hash_partition, partition) for partition in partitions]
    logger.info("All %d workers finished", threads)
    return aggregate(future.result() for future in futures)


def run(folder, threads=0, output_file=None, md5=False):
    """Run one listing or hashing pass over folder and write the report."""
    if not os.path.isdir(folder):
        raise InvalidRootError(folder)

    start = time.perf_counter()
    files = list_all_files(folder)
    if md5:
        thread_count = resolve_thread_count(threads)
        logger.info("Hashing %d files with %d threads", len(files), thread_count)
        lines = format_hash_report(hash_files(files, thread_count), folder)
    else:
        lines = format_listing(files, folder)

    # Output is only opened once the whole report exists
    write_report(lines, output_file)
    elapsed_ms = int((time.perf_counter() - start) * 1000)
    print(f"Process took {elapsed_ms}ms")


def review_options(args):
    print(f"Threads:    {args.threads}")
    print(f"Folder:     {args.folder}")
    print(f"OutputFile: {args.output}")
    print(f"Md5:        {args.md5}")
    print(f"Review:     {args.review_options}")


def _thread_count(value):
    try:
        threads = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid thread count: {value!r}")
    if threads < 0:
        raise argparse.ArgumentTypeError(f"thread count must not be negative: {threads}")
    return threads


def build_parser():
    parser = argparse.ArgumentParser(prog="folderhash", description=__doc__)
    parser.add_argument(
        "-t", "--threads", type=_thread_count, default=config.DEFAULT_THREADS,
        help="Number of threads to use in calculations. 0 = number of cores",
    )
    parser.add_argument(
        "-f", "--folder", required=True, help="Root folder for calculations"
    )
    parser.add_argument(
        "-o", "--output",
        help="File to write the report. If unspecified, it prints to console.",
    )
    parser.add_argument(
        "-m", "--md5", action="store_true", help="Perform MD5 analysis"
    )
    parser.add_argument(
        "-r", "--review-options", action="store_true",
        help="Review the options set without running anything",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging()

    if args.review_options:
        review_options(args)
        return 0

    try:
        run(args.folder, args.threads, args.output, args.md5)
    except InvalidRootError:
        print(config.INVALID_ROOT_MESSAGE)
        return 1
    except (FolderHashError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
