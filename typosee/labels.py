"""
typosee.labels — Match keywords against the labels of an FQDN.

Candidate lines come from subdomain exports: comma-separated records
whose LAST field is the FQDN.

    "1,2,3,paypa1.example.com\\n"
        strip      → "1,2,3,paypa1.example.com"
        extract    → "paypa1.example.com"
        split      → ["paypa1", "example", "com"]
        eligible   → ["paypa1"]

The last two labels are the registrable domain and its suffix and are
never compared.  A line with fewer than three labels has no subdomain
portion and yields nothing.
"""

from dataclasses import dataclass

from .core import AllocationError, EditOperation, distance, levenshtein


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """A label within the threshold of a keyword."""
    distance: int
    keyword: str
    label: str
    original_line: str
    script: tuple[EditOperation, ...] = ()


# ═══════════════════════════════════════════════════════════════════
#  LINE PREPROCESSING
# ═══════════════════════════════════════════════════════════════════

def strip_line(line: str) -> str:
    """
    Drop one trailing line terminator (CRLF, LF or CR), then one
    trailing comma, and lower-case the rest.
    """
    if line.endswith("\r\n"):
        line = line[:-2]
    elif line.endswith(("\n", "\r")):
        line = line[:-1]
    if line.endswith(","):
        line = line[:-1]
    return line.lower()


def normalize_keyword(keyword: str) -> str:
    """Keywords get the same treatment as candidate lines."""
    return strip_line(keyword)


def extract_fqdn(raw_line: str) -> str:
    """The field after the last comma, or the whole line if there is none."""
    line = strip_line(raw_line)
    return line[line.rfind(",") + 1:]


def split_labels(fqdn: str) -> list[str]:
    """Dot-separated labels, skipping the empty ones ("a..b", "a.b.")."""
    return [label for label in fqdn.split(".") if label]


def eligible_labels(labels: list[str]) -> list[str]:
    """Every label but the registrable domain and suffix (the last two)."""
    if len(labels) < 3:
        return []
    return labels[:-2]


# ═══════════════════════════════════════════════════════════════════
#  MATCHING
# ═══════════════════════════════════════════════════════════════════

def match_line(keyword: str, raw_line: str, threshold: int) -> list[MatchRecord]:
    """
    Compare `keyword` with each eligible label of the FQDN in `raw_line`.

    `keyword` must already be normalized (see normalize_keyword).  A
    record is produced for every label whose distance from the keyword
    is at most `threshold`, in left-to-right label order.  The threshold
    is not range-checked: 0 keeps exact matches only.

    Raises AllocationError if an edit table cannot be allocated.
    """
    fqdn = extract_fqdn(raw_line)
    records: list[MatchRecord] = []

    for label in eligible_labels(split_labels(fqdn)):
        try:
            within = levenshtein(keyword, label) <= threshold
        except MemoryError as exc:
            raise AllocationError(
                f"cannot allocate distance rows for {len(label)}-character label"
            ) from exc
        if not within:
            continue
        result = distance(keyword, label)
        records.append(MatchRecord(
            distance=result.distance,
            keyword=keyword,
            label=label,
            original_line=fqdn,
            script=result.script,
        ))

    return records
