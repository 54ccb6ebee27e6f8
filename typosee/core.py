"""
typosee.core — Levenshtein distance with edit-script trace-back
================================================================

§1  THE DISTANCE
────────────────

The Levenshtein distance between two strings is the minimum number of
single-character insertions, deletions and substitutions needed to turn
the first string (the SOURCE) into the second (the TARGET):

    d("CHALK", "CHEESE") = 4

    Substitute E for A
    Substitute E for L
    Substitute S for K
    Insert E

Wagner and Fischer's dynamic program fills a table with the distance
between every pair of prefixes; the bottom-right cell is the answer.

        D[i][0] = i                              (delete i chars)
        D[0][j] = j                              (insert j chars)
        D[i][j] = min(
            D[i-1][j]   + 1,                     # delete source[i-1]
            D[i][j-1]   + 1,                     # insert target[j-1]
            D[i-1][j-1] + (source[i-1] != target[j-1]),   # substitute
        )


§2  THE EDIT SCRIPT
───────────────────

Every cell remembers which of the three candidates produced its score
and points back at the cell it came from.  Walking those references from
D[m][n] to D[0][0] visits one cell per step of an optimal alignment.
Cells reached by a zero-cost substitution (the characters already match)
are kept in the chain but not reported, so

    len(script) == distance

holds for every pair of inputs.

Border cells point back along their row or column: D[i][0] is the
deletion of source[i-1], D[0][j] the insertion of target[j-1].  Only the
origin D[0][0] has no back-reference.


§3  TIE-BREAK
─────────────

When several candidates share the minimum the choice is fixed:

    deletion  >  insertion  >  substitution

i.e. the first of (del, ins, sub) equal to the minimum wins.  The
distance is symmetric, d(s, t) == d(t, s); the scripts are not mirror
images of each other:

    d("ab", "ba").script  →  Insert b at 0, Delete b at 1


§4  COMPLEXITY
──────────────

    distance()      O(m·n) time, O(m·n) cells (needed for trace-back)
    levenshtein()   O(m·n) time, O(n) memory (two rows, no script)

Candidate labels are short, so the matcher filters with levenshtein()
and builds the traceable table only for labels that pass.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# ═══════════════════════════════════════════════════════════════════
#  ERRORS
# ═══════════════════════════════════════════════════════════════════

class TyposeeError(Exception):
    """Base class for errors raised by typosee."""


class AllocationError(TyposeeError):
    """The DP table or the edit script could not be allocated."""


# ═══════════════════════════════════════════════════════════════════
#  EDIT OPERATIONS
# ═══════════════════════════════════════════════════════════════════

class EditKind(Enum):
    """Kinds of edit operation.  NONE marks a match and is never emitted."""
    INSERT = "insert"
    DELETE = "delete"
    SUBSTITUTE = "substitute"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class EditOperation:
    """
    One step of an edit script.

    `position` is a zero-based index into the source string.  Insertions
    carry no `from_char`; deletions carry no `to_char`.
    """
    kind: EditKind
    from_char: Optional[str]
    to_char: Optional[str]
    position: int


@dataclass(frozen=True, slots=True)
class DistanceResult:
    """Edit distance plus the ordered operations achieving it."""
    distance: int
    script: tuple[EditOperation, ...] = ()

    def __len__(self) -> int:
        return len(self.script)


@dataclass(frozen=True, slots=True)
class _Cell:
    score: int
    kind: EditKind
    from_char: Optional[str]
    to_char: Optional[str]
    position: int
    prev: Optional["_Cell"]


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE ONLY (two rows)
# ═══════════════════════════════════════════════════════════════════

def levenshtein(source: str, target: str) -> int:
    """Standard Levenshtein distance between two strings."""
    m, n = len(source), len(target)
    if m == 0:
        return n
    if n == 0:
        return m

    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        curr[0] = i
        for j in range(1, n + 1):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            curr[j] = min(
                prev[j] + 1,        # deletion
                curr[j - 1] + 1,    # insertion
                prev[j - 1] + cost,  # substitution
            )
        prev, curr = curr, prev

    return prev[n]


def normalized_distance(source: str, target: str) -> float:
    """
    Levenshtein distance scaled to [0, 1] by the longer length.

    0.0 = identical strings, 1.0 = nothing in common.
    """
    longest = max(len(source), len(target))
    if longest == 0:
        return 0.0
    return levenshtein(source, target) / longest


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE WITH TRACE-BACK
# ═══════════════════════════════════════════════════════════════════

def _build_table(source: str, target: str) -> list[list[_Cell]]:
    """
    Fill the (m+1) x (n+1) table of back-referenced cells.

    Row 0 and column 0 chain back to the origin; every inner cell keeps
    the branch chosen by the deletion > insertion > substitution rule.
    """
    m, n = len(source), len(target)

    origin = _Cell(0, EditKind.NONE, None, None, 0, None)
    first_row = [origin]
    for j in range(1, n + 1):
        first_row.append(_Cell(j, EditKind.INSERT, None, target[j - 1],
                               j - 1, first_row[j - 1]))
    table = [first_row]

    for i in range(1, m + 1):
        above = table[i - 1]
        row = [_Cell(i, EditKind.DELETE, source[i - 1], None, i - 1, above[0])]
        s_char = source[i - 1]

        for j in range(1, n + 1):
            t_char = target[j - 1]
            subst_cost = 0 if s_char == t_char else 1

            dele = above[j].score + 1
            ins = row[j - 1].score + 1
            sub = above[j - 1].score + subst_cost
            best = min(dele, ins, sub)

            if dele == best:
                kind, prev = EditKind.DELETE, above[j]
            elif ins == best:
                kind, prev = EditKind.INSERT, row[j - 1]
            else:
                kind = EditKind.SUBSTITUTE if subst_cost else EditKind.NONE
                prev = above[j - 1]

            row.append(_Cell(best, kind, s_char, t_char, i - 1, prev))

        table.append(row)

    return table


def _trace_back(last: _Cell) -> tuple[EditOperation, ...]:
    """Walk back-references from `last` to the origin, skipping matches."""
    ops: list[EditOperation] = []
    cell = last
    while cell.prev is not None:
        if cell.kind is EditKind.INSERT:
            ops.append(EditOperation(EditKind.INSERT, None, cell.to_char, cell.position))
        elif cell.kind is EditKind.DELETE:
            ops.append(EditOperation(EditKind.DELETE, cell.from_char, None, cell.position))
        elif cell.kind is EditKind.SUBSTITUTE:
            ops.append(EditOperation(EditKind.SUBSTITUTE, cell.from_char,
                                     cell.to_char, cell.position))
        cell = cell.prev

    ops.reverse()
    return tuple(ops)


def distance(source: str, target: str) -> DistanceResult:
    """
    Levenshtein distance from `source` to `target` and its edit script.

    Characters are compared as-is; callers fold case beforehand.

    The script reads front-to-back relative to the source string and
    always holds exactly `distance` operations.  For an empty input it
    is the run of pure insertions (or deletions) covering the other
    string.

    Raises AllocationError if the table cannot be allocated, and
    TyposeeError if the trace-back disagrees with the table score.
    """
    if not source:
        return DistanceResult(len(target), tuple(
            EditOperation(EditKind.INSERT, None, ch, j) for j, ch in enumerate(target)
        ))
    if not target:
        return DistanceResult(len(source), tuple(
            EditOperation(EditKind.DELETE, ch, None, i) for i, ch in enumerate(source)
        ))

    try:
        table = _build_table(source, target)
        last = table[-1][-1]
        del table
        script = _trace_back(last)
    except MemoryError as exc:
        raise AllocationError(
            f"cannot allocate {len(source) + 1}x{len(target) + 1} edit table"
        ) from exc

    if len(script) != last.score:
        raise TyposeeError(
            f"edit script has {len(script)} operations for distance {last.score}"
        )
    return DistanceResult(last.score, script)
