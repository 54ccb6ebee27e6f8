"""
typosee.formats — Render match records and edit scripts as text.

Output layout:
    • CSV header and one CSV row per MatchRecord
    • One line per EditOperation in verbose mode:
          Insert <to> at <pos>
          Delete <from> at <pos>
          Substitute <to> for <from> at <pos>
"""

from typing import Iterable

from .core import EditKind, EditOperation
from .labels import MatchRecord


HEADER = "distance,keyword,fqdn-element,full-fqdn"


# ═══════════════════════════════════════════════════════════════════
#  MATCH RECORDS
# ═══════════════════════════════════════════════════════════════════

def format_record(record: MatchRecord) -> str:
    """`distance,keyword,label,original_line`"""
    return f"{record.distance},{record.keyword},{record.label},{record.original_line}"


# ═══════════════════════════════════════════════════════════════════
#  EDIT OPERATIONS
# ═══════════════════════════════════════════════════════════════════

def format_operation(op: EditOperation) -> str:
    if op.kind is EditKind.INSERT:
        return f"Insert {op.to_char} at {op.position}"
    if op.kind is EditKind.DELETE:
        return f"Delete {op.from_char} at {op.position}"
    if op.kind is EditKind.SUBSTITUTE:
        return f"Substitute {op.to_char} for {op.from_char} at {op.position}"
    raise ValueError(f"no text form for {op.kind}")


def format_script(script: Iterable[EditOperation], indent: str = "\t") -> list[str]:
    """One indented line per operation, in script order."""
    return [indent + format_operation(op) for op in script]
