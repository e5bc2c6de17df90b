"""
Structogram Controller — in-place editing by mapping.

Wraps a Structogram and offers get / set / insert / delete / move / swap
operations addressed by mappings (see structogram.mapping).

SEMANTICS:
    set_by_mapping splits a mapping into (parent mapping, index). The parent
    must be the top level (empty parent), a statement list (an if branch or
    switch case) or a loop. Indices past the end are clamped:

        overwrite            index >= len  ->  append after the last element
        insert               index >  len  ->  len (append)
        delete               index >= len  ->  len - 1
        END                  always after the last element
                             (delete removes the last element)

    move_to_position deletes first and inserts second, so the target
    mapping is interpreted against the tree AFTER the deletion.

THREADING:
    No internal locking. Callers sharing a controller between threads must
    serialize access themselves.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Union

from structogram.errors import (
    InvalidMappingError,
    NotFoundError,
    TypeMismatchError,
    UnsupportedContainerError,
)
from structogram.mapping import END, resolve_mapping
from structogram.model import (
    MappingValue,
    Statement,
    StatementType,
    Structogram,
    clone_statement,
)
from structogram.serialization import (
    structogram_from_dict,
    structogram_from_json,
    structogram_to_json,
)

logger = logging.getLogger(__name__)


class StructogramController:
    """
    Editing facade over a single Structogram.

    The controller keeps no references into the tree between calls; every
    operation resolves its mappings afresh.
    """

    def __init__(self, structogram: Optional[Structogram] = None):
        self.structogram = structogram if structogram is not None else Structogram()

    @classmethod
    def from_dict(cls, d: Any) -> StructogramController:
        return cls(structogram_from_dict(d))

    @classmethod
    def from_json(cls, s: str) -> StructogramController:
        return cls(structogram_from_json(s))

    def to_json(self) -> str:
        return structogram_to_json(self.structogram)

    # =====================================================================
    # QUERIES
    # =====================================================================

    def get_element_by_mapping(self, mapping: Sequence[int]) -> Optional[MappingValue]:
        """Return the statement or statement list at `mapping`, or None."""
        return resolve_mapping(self.structogram, mapping)

    def ensure_mapping_valid(self, mapping: Sequence[int]) -> MappingValue:
        """
        Check that `mapping` addresses something and return it.

        Raises:
            InvalidMappingError: The mapping is empty
            NotFoundError: Nothing exists at the mapping
        """
        if len(mapping) < 1:
            raise InvalidMappingError("Mapping must not be empty")
        value = self.get_element_by_mapping(mapping)
        if value is None:
            raise NotFoundError(f"No statement at mapping {list(mapping)}")
        return value

    # =====================================================================
    # MUTATION
    # =====================================================================

    def _get_container(self, parent_mapping: Sequence[int]) -> List[Statement]:
        if len(parent_mapping) == 0:
            return self.structogram.statements
        parent = self.get_element_by_mapping(parent_mapping)
        if parent is None:
            raise NotFoundError(f"No container at mapping {list(parent_mapping)}")
        if isinstance(parent, list):
            return parent
        if parent.kind in (StatementType.LOOP, StatementType.LOOP_REVERSE):
            return parent.statements
        raise UnsupportedContainerError(
            f"{type(parent).__name__} at mapping {list(parent_mapping)} does not hold statements directly"
        )

    def set_by_mapping(
        self,
        mapping: Sequence[int],
        value: Union[Statement, List[Statement], None],
        insert: bool = False,
    ) -> None:
        """
        Write `value` at `mapping`.

        Args:
            mapping: Target address; the last index is the slot in its container
            value: A statement, a list of statements (spliced in), or None to delete
            insert: Shift existing elements right instead of overwriting one

        Raises:
            InvalidMappingError: Empty mapping or a negative index other than END
            NotFoundError: The container does not exist, or deleting from an empty one
            UnsupportedContainerError: The parent is not a list or a loop
        """
        if len(mapping) < 1:
            raise InvalidMappingError("Mapping must not be empty")
        parent_mapping, index = mapping[:-1], mapping[-1]
        if index < 0 and index != END:
            raise InvalidMappingError(f"Negative index {index} in mapping {list(mapping)}")

        container = self._get_container(parent_mapping)
        values = value if isinstance(value, list) else [value]

        if value is None:
            if not container:
                raise NotFoundError(f"Nothing to delete at mapping {list(mapping)}")
            slot = len(container) - 1 if index == END else min(index, len(container) - 1)
            logger.debug(f"Deleting slot {slot} at {list(parent_mapping)}")
            del container[slot]
        elif index == END or (not insert and index >= len(container)):
            logger.debug(f"Appending {len(values)} statement(s) at {list(parent_mapping)}")
            container.extend(values)
        elif insert:
            slot = min(index, len(container))
            logger.debug(f"Inserting {len(values)} statement(s) at slot {slot} of {list(parent_mapping)}")
            container[slot:slot] = values
        else:
            slot = index
            logger.debug(f"Overwriting slot {slot} of {list(parent_mapping)} with {len(values)} statement(s)")
            container[slot:slot + 1] = values

    def delete_by_mapping(self, mapping: Sequence[int]) -> None:
        """Remove the element at `mapping`."""
        self.set_by_mapping(mapping, None)

    def move_to_position(self, source: Sequence[int], target: Sequence[int], insert: bool = False) -> None:
        """
        Move the element at `source` to `target`.

        The element is deleted first; `target` is then resolved against the
        already-modified tree. Moving within one container to a later index
        therefore lands one slot further left than the original layout
        suggests. If writing at `target` fails, the element is put back and
        the error re-raised.
        """
        value = self.ensure_mapping_valid(source)
        self.delete_by_mapping(source)
        try:
            self.set_by_mapping(target, value, insert)
        except Exception:
            logger.warning(f"Move {list(source)} -> {list(target)} failed, restoring source")
            self.set_by_mapping(source, value, insert=True)
            raise
        logger.debug(f"Moved {list(source)} -> {list(target)}")

    def swap_statements(self, left: Sequence[int], right: Sequence[int]) -> None:
        """
        Exchange the statements at `left` and `right`.

        Both sides receive independent deep copies, so editing one afterwards
        never affects the other.

        Raises:
            InvalidMappingError: Empty mapping, or one mapping lies inside the other
            NotFoundError: One of the mappings addresses nothing
            TypeMismatchError: One side is a statement list, not a statement
        """
        left_value = self.ensure_mapping_valid(left)
        right_value = self.ensure_mapping_valid(right)
        if isinstance(left_value, list) or isinstance(right_value, list):
            raise TypeMismatchError("Can't swap: one of the statements is an array")
        if list(left) == list(right):
            return
        shorter, longer = sorted((list(left), list(right)), key=len)
        if longer[:len(shorter)] == shorter:
            raise InvalidMappingError(f"Can't swap {shorter} with its own descendant {longer}")

        left_copy = clone_statement(left_value)
        right_copy = clone_statement(right_value)
        self.set_by_mapping(left, right_copy)
        self.set_by_mapping(right, left_copy)
        logger.debug(f"Swapped {list(left)} <-> {list(right)}")
