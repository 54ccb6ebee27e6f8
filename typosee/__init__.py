"""
typosee — Typosquatting detection by edit distance
===================================================

Find subdomain labels that sit within a few keystrokes of a brand name.

    distance("paypal", "paypa1")         → 1   Substitute 1 for l at 5
    match_line("paypal", "1,2,3,paypa1.example.com", 1)
        → [MatchRecord(1, "paypal", "paypa1", "paypa1.example.com")]

Only the subdomain part of an FQDN is compared: the last two labels
(registrable domain and suffix) are skipped, and FQDNs with fewer than
three labels produce no matches.

Every distance comes with its edit script — not just "how far apart?"
but "which edits?"
"""

from typosee.core import (
    # Errors
    TyposeeError,
    AllocationError,
    # Edit scripts
    EditKind,
    EditOperation,
    DistanceResult,
    # Distance
    distance,
    levenshtein,
    normalized_distance,
)
from typosee.labels import (
    MatchRecord, match_line, strip_line, normalize_keyword,
    extract_fqdn, split_labels, eligible_labels,
)
from typosee.formats import HEADER, format_record, format_operation, format_script
from typosee.scan import ScanSummary, scan_files, load_candidates, load_keywords

__version__ = "0.1.0"
__all__ = [
    "TyposeeError", "AllocationError",
    "EditKind", "EditOperation", "DistanceResult",
    "distance", "levenshtein", "normalized_distance",
    "MatchRecord", "match_line", "strip_line", "normalize_keyword",
    "extract_fqdn", "split_labels", "eligible_labels",
    "HEADER", "format_record", "format_operation", "format_script",
    "ScanSummary", "scan_files", "load_candidates", "load_keywords",
]
