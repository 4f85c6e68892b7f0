#!/usr/bin/env python3
"""
Convert tagged playlist records into XSPF playlist files.
- Reads records from stdin (or a file), one per line.
- Writes one <n>.xspf document per finished playlist into playlists/.
- Prints "Written <count> <title>" for each playlist written.
"""

import argparse
import logging
import sys

from engine.conversion import convert_stream
from engine.paths import check_output_dir, resolve_output_dir
from playlist.export import PlaylistEmitter
from records.errors import PlaylistWriteError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def configure_logging(level):
    root = logging.getLogger("")
    if root.handlers:
        root.setLevel(level)
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)


def build_parser():
    parser = argparse.ArgumentParser(description="Convert playlist records into XSPF files.")
    parser.add_argument("input", nargs="?", default="-", help="Record file to read ('-' for stdin).")
    parser.add_argument("--output-dir", help="Directory for <n>.xspf files (default: playlists).")
    parser.add_argument("--create-output-dir", action="store_true", help="Create the output directory if missing.")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("-v", "--verbose", action="store_true", help="Shortcut for --log-level INFO.")
    return parser


def run(lines, output_dir, *, create_output_dir=False):
    directory = check_output_dir(resolve_output_dir(output_dir), create=create_output_dir)
    return convert_stream(lines, PlaylistEmitter(directory))


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(logging.INFO if args.verbose else getattr(logging, args.log_level))

    close_input = args.input != "-"
    if not close_input:
        handle = sys.stdin.buffer
    else:
        try:
            handle = open(args.input, "rb")
        except OSError as exc:
            logging.error("Cannot read input %s: %s", args.input, exc)
            return 1

    try:
        summary = run(handle, args.output_dir, create_output_dir=args.create_output_dir)
    except PlaylistWriteError as exc:
        logging.error("Aborting: %s", exc)
        return 1
    finally:
        if close_input:
            handle.close()

    if summary.records_skipped:
        logging.warning("%d record(s) skipped", summary.records_skipped)
    return 0


if __name__ == "__main__":
    sys.exit(main())
