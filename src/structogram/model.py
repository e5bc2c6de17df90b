"""
Core Structogram Model Objects

Defines the statement variants a structogram is built from and the
Structogram document that owns them.

These are plain data classes representing:
    - Blank statements (placeholders)
    - Normal statements (a single action)
    - If statements (two branches)
    - Switch statements (labelled case blocks)
    - Loop statements (pre-test and post-test)
    - Structograms (root container)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about rendering or editing front ends
        - Are mutable (the controller edits them in place)
        - Never hold a reference to their parent
        - Are fully serializable
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional, Union


class StatementType(Enum):
    """
    Discriminant of every statement variant.

    The values are the exact type strings of the serialized form.
    """

    NORMAL = "normal"
    IF = "if"
    SWITCH = "switch"
    LOOP = "loop"
    LOOP_REVERSE = "loop-reverse"
    BLANK = "empty"

    @classmethod
    def from_string(cls, value: Optional[str]) -> StatementType:
        """
        Resolve a serialized type string.

        Anything unrecognised (including None) is BLANK.
        """
        for member in cls:
            if member.value == value:
                return member
        return cls.BLANK


class Statement(ABC):
    """
    Base class for all statement variants.

    Each concrete variant declares its tag in `kind`. Consumers dispatch
    on `kind` and end with an explicit failure for unknown variants.
    """

    kind: ClassVar[StatementType]


@dataclass
class BlankStatement(Statement):
    """An empty placeholder with no content."""

    kind: ClassVar[StatementType] = StatementType.BLANK


@dataclass
class NormalStatement(Statement):
    """
    A single, sequential action.

    Example:
        NormalStatement("Mdb := Mdb + 1")
    """

    kind: ClassVar[StatementType] = StatementType.NORMAL

    content: Optional[str] = None


@dataclass
class IfStatement(Statement):
    """
    A binary junction.

    Properties:
        content:
            The condition text, e.g. "j <= N"

        blocks:
            Exactly two statement lists: index 0 runs when the condition
            holds, index 1 when it does not. Either may be empty.
            Fewer than two lists are padded with empty ones on construction.
    """

    kind: ClassVar[StatementType] = StatementType.IF

    content: Optional[str] = None
    blocks: List[List[Statement]] = field(default_factory=lambda: [[], []])

    def __post_init__(self) -> None:
        if len(self.blocks) > 2:
            raise ValueError(f"IfStatement takes at most 2 branches, got {len(self.blocks)}")
        self.blocks = list(self.blocks)
        while len(self.blocks) < 2:
            self.blocks.append([])

    @property
    def true_branch(self) -> List[Statement]:
        return self.blocks[0]

    @property
    def false_branch(self) -> List[Statement]:
        return self.blocks[1]


@dataclass
class CaseBlock:
    """
    One labelled case of a switch.

    Properties:
        case: The case label, e.g. "A = 1" or "else"
        statements: Statements executed for this case
    """

    case: Optional[str]
    statements: List[Statement] = field(default_factory=list)


@dataclass
class SwitchStatement(Statement):
    """
    A multi-way junction.

    There is no content field: each case carries its own label.

    INVARIANT:
        Switches read from external input always have at least two cases
        (the deserializer appends an "else" case). Direct construction
        does not pad, so converters may build an empty switch.
    """

    kind: ClassVar[StatementType] = StatementType.SWITCH

    blocks: List[CaseBlock] = field(default_factory=list)


@dataclass
class LoopStatement(Statement):
    """A loop whose condition is tested before each iteration."""

    kind: ClassVar[StatementType] = StatementType.LOOP

    content: Optional[str] = None
    statements: List[Statement] = field(default_factory=list)


@dataclass
class ReversedLoopStatement(Statement):
    """
    A loop whose condition is tested after each iteration.

    Same fields as LoopStatement; only the tag differs. Not a subclass of
    LoopStatement, so the two never compare equal.
    """

    kind: ClassVar[StatementType] = StatementType.LOOP_REVERSE

    content: Optional[str] = None
    statements: List[Statement] = field(default_factory=list)


# A mapping may address a single statement or a whole statement list
# (an If branch or a Switch case).
MappingValue = Union[Statement, List[Statement]]


@dataclass
class Structogram:
    """
    Root container for a structogram document.

    Properties:
        name:
            Signature shown in the diagram header (optional)

        statements:
            Top-level statements, in order. Mapping index 0 addresses
            this list directly.

        render_start:
            Whether a front end should draw the start marker

    INVARIANTS:
        - Every statement is owned by exactly one list in the tree
        - The tree is acyclic (no parent back-references)
    """

    name: Optional[str] = None
    statements: List[Statement] = field(default_factory=list)
    render_start: bool = False


def content_of(statement: Statement) -> Optional[str]:
    """Return the statement's content, or None for variants without one."""
    if statement.kind in (StatementType.BLANK, StatementType.SWITCH):
        return None
    return statement.content


def clone_statement(statement: Statement) -> Statement:
    """
    Deep-copy a statement tree.

    The copy shares no list or statement object with the original.
    """
    kind = statement.kind
    if kind is StatementType.BLANK:
        return BlankStatement()
    if kind is StatementType.NORMAL:
        return NormalStatement(statement.content)
    if kind is StatementType.IF:
        return IfStatement(
            statement.content,
            [clone_statements(branch) for branch in statement.blocks],
        )
    if kind is StatementType.SWITCH:
        return SwitchStatement(
            [CaseBlock(block.case, clone_statements(block.statements)) for block in statement.blocks]
        )
    if kind is StatementType.LOOP:
        return LoopStatement(statement.content, clone_statements(statement.statements))
    if kind is StatementType.LOOP_REVERSE:
        return ReversedLoopStatement(statement.content, clone_statements(statement.statements))
    raise TypeError(f"Unsupported statement type: {type(statement)}")


def clone_statements(statements: List[Statement]) -> List[Statement]:
    return [clone_statement(s) for s in statements]


def clone_value(value: MappingValue) -> MappingValue:
    """Deep-copy either a single statement or a statement list."""
    if isinstance(value, list):
        return clone_statements(value)
    return clone_statement(value)
