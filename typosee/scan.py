"""
typosee.scan — Run every keyword against every candidate line.

The candidate file is read once and kept in memory; each keyword then
walks the whole list.  Output order is keyword-major:

    for keyword in keywords:            (file order)
        for line in candidates:         (file order, header skipped)
            for label in line:          (left to right)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .core import AllocationError
from .labels import MatchRecord, match_line, normalize_keyword
from .log import log_skipped_pair

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ═══════════════════════════════════════════════════════════════════
#  INPUT
# ═══════════════════════════════════════════════════════════════════

def read_lines(path: PathLike, encoding: str = "utf-8",
               errors: str = "surrogateescape") -> list[str]:
    """
    All lines of a text file, terminators included.

    Undecodable bytes become lone surrogates under the default error
    handler, so one stray byte never aborts a run.  Such a label still
    compares character by character like any other.
    """
    with open(path, "r", encoding=encoding, errors=errors, newline="") as fh:
        return fh.readlines()


def load_candidates(path: PathLike, skip_header: bool = True,
                    encoding: str = "utf-8",
                    errors: str = "surrogateescape") -> list[str]:
    """
    Candidate lines from a subdomain export.

    The first line is the export's header row and is dropped unless
    `skip_header` is False.
    """
    lines = read_lines(path, encoding, errors)
    if skip_header and lines:
        logger.debug(f"Header row: {lines[0].rstrip()!r}")
        return lines[1:]
    return lines


def load_keywords(path: PathLike, encoding: str = "utf-8",
                  errors: str = "surrogateescape") -> list[str]:
    """Normalized keywords, one per line; blank lines are dropped."""
    keywords = []
    for line in read_lines(path, encoding, errors):
        keyword = normalize_keyword(line)
        if keyword:
            keywords.append(keyword)
        else:
            logger.debug("Ignoring blank keyword line")
    return keywords


# ═══════════════════════════════════════════════════════════════════
#  SCAN
# ═══════════════════════════════════════════════════════════════════

@dataclass
class ScanSummary:
    """Counters for one scan."""
    lines_processed: int = 0
    keywords: int = 0
    matches: int = 0
    skipped_pairs: int = 0

    def __repr__(self) -> str:
        return (f"ScanSummary(lines={self.lines_processed}, keywords={self.keywords}, "
                f"matches={self.matches}, skipped={self.skipped_pairs})")


def scan(keywords: Iterable[str], candidates: list[str], threshold: int,
         summary: Optional[ScanSummary] = None) -> Iterator[MatchRecord]:
    """
    Yield match records for every keyword against every candidate line.

    Keywords are expected to be normalized.  A pair whose edit table
    cannot be allocated is logged and skipped; the scan carries on.
    If `summary` is given, its counters are updated as records are
    produced.
    """
    if summary is not None:
        summary.lines_processed = len(candidates)

    for keyword in keywords:
        logger.debug(f"Keyword {keyword!r} against {len(candidates)} lines")
        if summary is not None:
            summary.keywords += 1

        for line_num, line in enumerate(candidates, start=1):
            logger.debug(f"{keyword}, {line_num} for [{line.rstrip()}]")
            try:
                records = match_line(keyword, line, threshold)
            except AllocationError as exc:
                log_skipped_pair(keyword, line, exc)
                if summary is not None:
                    summary.skipped_pairs += 1
                continue

            for record in records:
                logger.debug(
                    f"K: [{record.keyword}], H: [{record.label}] in "
                    f"[{record.original_line}] distance {record.distance}"
                )
                if summary is not None:
                    summary.matches += 1
                yield record


def scan_files(subdomain_path: PathLike, keyword_path: PathLike, threshold: int,
               summary: Optional[ScanSummary] = None, skip_header: bool = True,
               encoding: str = "utf-8",
               errors: str = "surrogateescape") -> Iterator[MatchRecord]:
    """Load both input files, then scan.  File errors surface immediately."""
    candidates = load_candidates(subdomain_path, skip_header, encoding, errors)
    keywords = load_keywords(keyword_path, encoding, errors)
    return scan(keywords, candidates, threshold, summary)
