"""
Mapping resolution — addressing statements by integer paths.

A mapping is a list of non-negative integers. The first index selects a
top-level statement of the structogram; every further index descends one
step from whatever the previous step produced:

    list of statements   -> the element at that index
    IfStatement          -> branch 0 or 1 (the list itself)
    SwitchStatement      -> the statement list of that case (the list itself)
    Loop / ReversedLoop  -> the element of the body at that index
    anything else        -> nothing

IMPORTANT:
    Branch and case addressing yields a LIST, so reaching a statement
    inside an if takes one more index than reaching one inside a loop:

        [0, 2]      third statement of the loop at top-level index 0
        [0, 1, 2]   third statement of the false branch of the if at 0

    Callers depend on this asymmetry. Do not unify it.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from structogram.config import DEFAULT_SETTINGS
from structogram.model import MappingValue, Statement, StatementType, Structogram

# Mutation index meaning "after the last element", whatever the length
END = -1


def split_mapping_string(mapping: str, delimiter: str = DEFAULT_SETTINGS.mapping_delimiter) -> List[int]:
    """
    Parse a human-typed mapping such as "0; 2;1".

    Every character other than digits and the delimiter is dropped, then the
    remainder is split on the delimiter. Pieces are not validated further:
    an empty piece (as in "1;;2" or "") reads as 0.
    """
    cleaned = re.sub(f"[^0-9{re.escape(delimiter)}]", "", mapping)
    return [int(piece) if piece else 0 for piece in cleaned.split(delimiter)]


def _at(items: List[Statement], index: int) -> Optional[Statement]:
    if 0 <= index < len(items):
        return items[index]
    return None


def get_sub_element(current: MappingValue, index: int) -> Optional[MappingValue]:
    """
    Take one descent step from `current`.

    Returns None when `current` has no substructure or `index` is out of range.
    """
    if isinstance(current, list):
        return _at(current, index)

    kind = current.kind
    if kind in (StatementType.IF, StatementType.SWITCH):
        if not 0 <= index < len(current.blocks):
            return None
        block = current.blocks[index]
        return block if kind is StatementType.IF else block.statements
    if kind in (StatementType.LOOP, StatementType.LOOP_REVERSE):
        return _at(current.statements, index)
    return None


def resolve_mapping(structogram: Structogram, mapping: Sequence[int]) -> Optional[MappingValue]:
    """
    Resolve a full mapping against a structogram.

    Returns the addressed statement or statement list, or None when any step
    fails. An empty mapping never resolves.
    """
    if len(mapping) < 1:
        return None
    current = _at(structogram.statements, mapping[0])
    for index in mapping[1:]:
        if current is None:
            break
        current = get_sub_element(current, index)
    return current
