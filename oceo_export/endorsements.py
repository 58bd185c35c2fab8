# endorsements.py
# Endorsements are an ordered list of strings but the CSV has one cell per
# column, so the list travels as a single "*|*"-joined string.
# NOTE: no escaping; an endorsement containing "*|*" will not survive decoding.
# Empty endorsements are dropped on encode, since "" already means "no endorsements".

from __future__ import annotations

from typing import Iterable, List, Optional

from .constants import ENDORSEMENT_SEPARATOR


def encode_endorsements(endorsements: Optional[Iterable[str]]) -> str:
    """Join the non-empty endorsements into one cell value ("" for none)."""
    if not endorsements:
        return ""
    return ENDORSEMENT_SEPARATOR.join(str(e) for e in endorsements if e)


def decode_endorsements(cell: Optional[str]) -> List[str]:
    """Split a cell value back into the endorsement list."""
    if not cell:
        return []
    return cell.split(ENDORSEMENT_SEPARATOR)
