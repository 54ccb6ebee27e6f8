"""
typosee - find subdomain labels that look like brand keywords

Usage:
    typosee <subdomain_file> <keyword_file> <threshold> [q|v|d]

    subdomain_file   CSV export, one record per line, FQDN in the last field
                     (the first line is a header row and is skipped)
    keyword_file     one keyword per line
    threshold        maximum edit distance, 1-100
    q                quiet: matches only (default)
    v                verbose: print the edit script under each match
    d                debug: log every line and comparison to stderr

Examples:
    typosee subdomains.csv brands.txt 2
    typosee subdomains.csv brands.txt 1 v
"""

import argparse
import sys
from typing import Optional, Sequence

from .config import get_settings
from .formats import HEADER, format_record, format_script
from .log import configure_logging, log_error
from .scan import ScanSummary, scan_files

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="typosee",
        description="Match brand keywords against FQDN labels by edit distance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s subdomains.csv brands.txt 2
  %(prog)s subdomains.csv brands.txt 1 v
        """
    )

    parser.add_argument(
        'subdomain_file',
        help='CSV of subdomain records, FQDN in the last field'
    )

    parser.add_argument(
        'keyword_file',
        help='File with one keyword per line'
    )

    parser.add_argument(
        'threshold',
        help='Maximum edit distance to report (1-100)'
    )

    parser.add_argument(
        'mode',
        nargs='?',
        default='q',
        choices=['q', 'v', 'd'],
        help="q = quiet (default), v = verbose edit scripts, d = debug logging"
    )

    return parser.parse_args(argv)


def parse_threshold(value: str) -> Optional[int]:
    """Integer threshold within the configured bounds, or None."""
    settings = get_settings()
    try:
        threshold = int(value)
    except ValueError:
        return None
    if not settings.threshold_in_range(threshold):
        return None
    return threshold


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()

    level = "DEBUG" if args.mode == 'd' else settings.LOG_LEVEL
    configure_logging(level, settings.LOG_FORMAT)

    threshold = parse_threshold(args.threshold)
    if threshold is None:
        print(f"[ERR] Invalid threshold number. Must be between "
              f"{settings.MIN_THRESHOLD} and {settings.MAX_THRESHOLD}.", file=sys.stderr)
        return EXIT_USAGE

    summary = ScanSummary()
    try:
        records = scan_files(
            args.subdomain_file, args.keyword_file, threshold,
            summary=summary,
            skip_header=settings.SKIP_HEADER,
            encoding=settings.FILE_ENCODING,
            errors=settings.FILE_ERRORS,
        )
    except OSError as exc:
        path = exc.filename or args.subdomain_file
        log_error("Cannot read input", exc, {"path": str(path)})
        print(f"[ERR]: Unable to open {path}", file=sys.stderr)
        return EXIT_IO_ERROR
    except UnicodeDecodeError as exc:
        log_error("Cannot decode input", exc, {"encoding": settings.FILE_ENCODING})
        print(f"[ERR]: Unable to decode input as {settings.FILE_ENCODING}", file=sys.stderr)
        return EXIT_IO_ERROR

    # labels keep undecodable bytes as surrogates; write them back out as-is
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors=settings.FILE_ERRORS)

    print(HEADER)
    for record in records:
        print(format_record(record))
        if args.mode == 'v':
            for line in format_script(record.script):
                print(line)

    print(f"Total lines processed: {summary.lines_processed}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
