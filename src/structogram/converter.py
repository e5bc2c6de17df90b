"""
Statement Converter — best-effort conversion between statement kinds.

Conversions are lossy by nature (a switch with five cases cannot become an
if without dropping something). The rules are deterministic and keep as
much structure as the target shape allows.

Converted statements take over the source's child lists; the source is
expected to be discarded (replaced by the result), not kept alongside it.
"""

from __future__ import annotations

from typing import List

from structogram.errors import InvalidConversionError
from structogram.model import (
    CaseBlock,
    IfStatement,
    LoopStatement,
    ReversedLoopStatement,
    Statement,
    StatementType,
    SwitchStatement,
    content_of,
)


def _no_conversion(statement: Statement, target: StatementType) -> InvalidConversionError:
    return InvalidConversionError(
        f"There's no explicit conversion between {type(statement).__name__} "
        f"and {_TARGET_NAMES[target]}"
    )


def to_if_statement(statement: Statement) -> IfStatement:
    """
    Convert any statement into an IfStatement.

    - If: returned unchanged
    - Switch: first case label becomes the condition, its statements the
      true branch; the last case becomes the false branch only when it is
      an "else" case and there are at least two cases
    - Loop / ReversedLoop: condition and body carried over, false branch empty
    - Normal / Blank: content carried over, both branches empty
    """
    kind = statement.kind
    if kind is StatementType.IF:
        return statement
    if kind is StatementType.SWITCH:
        blocks = statement.blocks
        else_part: List[Statement] = []
        if len(blocks) > 1 and blocks[-1].case == "else":
            else_part = blocks[-1].statements
        if not blocks:
            return IfStatement(None, [[], else_part])
        return IfStatement(blocks[0].case, [blocks[0].statements, else_part])
    if kind in (StatementType.LOOP, StatementType.LOOP_REVERSE):
        return IfStatement(statement.content, [statement.statements, []])
    if kind in (StatementType.NORMAL, StatementType.BLANK):
        return IfStatement(content_of(statement))
    raise _no_conversion(statement, StatementType.IF)


def to_switch_statement(statement: Statement) -> SwitchStatement:
    """
    Convert an If, Normal or Blank statement into a SwitchStatement.

    An If becomes two cases: its condition with the true branch, and
    "else" with the false branch. Normal and Blank give an empty switch.
    """
    kind = statement.kind
    if kind is StatementType.IF:
        return SwitchStatement([
            CaseBlock(statement.content, statement.true_branch),
            CaseBlock("else", statement.false_branch),
        ])
    if kind in (StatementType.NORMAL, StatementType.BLANK):
        return SwitchStatement()
    raise _no_conversion(statement, StatementType.SWITCH)


def to_loop_statement(statement: Statement) -> LoopStatement:
    """Convert a ReversedLoop, Normal or Blank statement into a pre-test loop."""
    kind = statement.kind
    if kind is StatementType.LOOP_REVERSE:
        return LoopStatement(statement.content, statement.statements)
    if kind in (StatementType.NORMAL, StatementType.BLANK):
        return LoopStatement(content_of(statement))
    raise _no_conversion(statement, StatementType.LOOP)


def to_reversed_loop_statement(statement: Statement) -> ReversedLoopStatement:
    """Convert a Loop, Normal or Blank statement into a post-test loop."""
    kind = statement.kind
    if kind is StatementType.LOOP:
        return ReversedLoopStatement(statement.content, statement.statements)
    if kind in (StatementType.NORMAL, StatementType.BLANK):
        return ReversedLoopStatement(content_of(statement))
    raise _no_conversion(statement, StatementType.LOOP_REVERSE)


def if_to_loop_statement_scope(statement: IfStatement) -> List[Statement]:
    """
    Flatten an If into a statement scope.

    Returns a list starting with a LoopStatement that wraps the true branch
    (same condition), followed by the false-branch statements promoted one
    level up.
    """
    if statement.kind is not StatementType.IF:
        raise _no_conversion(statement, StatementType.LOOP)
    return [LoopStatement(statement.content, statement.true_branch), *statement.false_branch]


_CONVERTERS = {
    StatementType.IF: to_if_statement,
    StatementType.SWITCH: to_switch_statement,
    StatementType.LOOP: to_loop_statement,
    StatementType.LOOP_REVERSE: to_reversed_loop_statement,
}

_TARGET_NAMES = {
    StatementType.IF: IfStatement.__name__,
    StatementType.SWITCH: SwitchStatement.__name__,
    StatementType.LOOP: LoopStatement.__name__,
    StatementType.LOOP_REVERSE: ReversedLoopStatement.__name__,
    StatementType.NORMAL: "NormalStatement",
    StatementType.BLANK: "BlankStatement",
}


def convert(statement: Statement, target: StatementType) -> Statement:
    """
    Convert `statement` to the `target` kind.

    Raises:
        InvalidConversionError: No conversion is defined for the pair
    """
    converter = _CONVERTERS.get(target)
    if converter is None:
        raise _no_conversion(statement, target)
    return converter(statement)
