"""
Serialization helpers for structogram objects (Structogram and statements).

Provides the canonical JSON text form and a YAML round-trip, both via an
intermediate dict representation. Key order of the dict form is fixed and
part of the format:

    {"type":"empty"}
    {"type":"normal","content":...}
    {"type":"if","content":...,"blocks":[[...],[...]]}
    {"type":"switch","blocks":[{"case":...,"statements":[...]},...]}
    {"type":"loop","content":...,"statements":[...]}
    {"type":"loop-reverse","content":...,"statements":[...]}
    {"signature":...,"renderStart":...,"statements":[...]}

Deserialization repairs two shapes instead of rejecting them: if
statements always get exactly two branches, and switches always get at
least two cases.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Union

import yaml

from structogram.errors import StructogramParseError
from structogram.model import (
    BlankStatement,
    CaseBlock,
    IfStatement,
    LoopStatement,
    NormalStatement,
    ReversedLoopStatement,
    Statement,
    StatementType,
    Structogram,
    SwitchStatement,
)

logger = logging.getLogger(__name__)

_STRUCTOGRAM_KEYS = ("signature", "renderStart", "statements")


# =========================================================================
# TO DICT
# =========================================================================


def statement_to_dict(s: Statement) -> Dict[str, Any]:
    kind = s.kind
    if kind is StatementType.BLANK:
        return {"type": kind.value}
    if kind is StatementType.NORMAL:
        return {"type": kind.value, "content": s.content}
    if kind is StatementType.IF:
        return {
            "type": kind.value,
            "content": s.content,
            "blocks": [statements_to_list(branch) for branch in s.blocks],
        }
    if kind is StatementType.SWITCH:
        return {
            "type": kind.value,
            "blocks": [case_block_to_dict(b) for b in s.blocks],
        }
    if kind in (StatementType.LOOP, StatementType.LOOP_REVERSE):
        return {
            "type": kind.value,
            "content": s.content,
            "statements": statements_to_list(s.statements),
        }
    raise TypeError(f"Unsupported Statement type: {type(s)}")


def statements_to_list(statements: List[Statement]) -> List[Dict[str, Any]]:
    return [statement_to_dict(s) for s in statements]


def case_block_to_dict(b: CaseBlock) -> Dict[str, Any]:
    return {"case": b.case, "statements": statements_to_list(b.statements)}


def structogram_to_dict(s: Structogram) -> Dict[str, Any]:
    return {
        "signature": s.name,
        "renderStart": s.render_start,
        "statements": statements_to_list(s.statements),
    }


# =========================================================================
# FROM DICT
# =========================================================================


def _expect_dict(d: Any, what: str) -> Dict[str, Any]:
    if not isinstance(d, dict):
        raise StructogramParseError(f"Expected an object for {what}, got {type(d).__name__}")
    return d


def _expect_list(value: Any, what: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise StructogramParseError(f"Expected a list for {what}, got {type(value).__name__}")
    return value


def statements_from_list(value: Any, what: str = "statements") -> List[Statement]:
    return [statement_from_dict(item) for item in _expect_list(value, what)]


def _if_from_dict(d: Dict[str, Any]) -> IfStatement:
    raw_blocks = _expect_list(d.get("blocks"), "if blocks")
    if len(raw_blocks) > 2:
        logger.warning(f"If statement has {len(raw_blocks)} branches, keeping the first 2")
    elif len(raw_blocks) < 2:
        logger.warning(f"If statement has {len(raw_blocks)} branches, padding to 2")
    blocks = [statements_from_list(branch, "if branch") for branch in raw_blocks[:2]]
    while len(blocks) < 2:
        blocks.append([])
    return IfStatement(content=d.get("content"), blocks=blocks)


def case_block_from_dict(d: Any) -> CaseBlock:
    d = _expect_dict(d, "switch case")
    return CaseBlock(case=d.get("case"), statements=statements_from_list(d.get("statements"), "case statements"))


def _switch_from_dict(d: Dict[str, Any]) -> SwitchStatement:
    blocks = [case_block_from_dict(b) for b in _expect_list(d.get("blocks"), "switch blocks")]
    if len(blocks) < 2:
        logger.warning(f"Switch statement has {len(blocks)} cases, appending 'else'")
    while len(blocks) < 2:
        blocks.append(CaseBlock(case="else", statements=[]))
    return SwitchStatement(blocks=blocks)


def statement_from_dict(d: Any) -> Statement:
    d = _expect_dict(d, "statement")
    raw_type = d.get("type")
    kind = StatementType.from_string(raw_type)
    content = d.get("content")

    if kind is StatementType.NORMAL:
        return NormalStatement(content)
    if kind is StatementType.IF:
        return _if_from_dict(d)
    if kind is StatementType.SWITCH:
        return _switch_from_dict(d)
    if kind is StatementType.LOOP:
        return LoopStatement(content, statements_from_list(d.get("statements"), "loop statements"))
    if kind is StatementType.LOOP_REVERSE:
        return ReversedLoopStatement(content, statements_from_list(d.get("statements"), "loop statements"))

    if raw_type not in (None, StatementType.BLANK.value):
        logger.warning(f"Unknown statement type {raw_type!r}")
    if content is not None:
        return NormalStatement(content)
    return BlankStatement()


def structogram_from_dict(d: Any) -> Structogram:
    d = _expect_dict(d, "structogram")
    return Structogram(
        name=d.get("signature"),
        statements=statements_from_list(d.get("statements")),
        render_start=d.get("renderStart") is True,
    )


def is_structogram_dict(d: Any) -> bool:
    """A dict is a structogram when it has no "type" and any document key."""
    if not isinstance(d, dict) or "type" in d:
        return False
    return any(key in d for key in _STRUCTOGRAM_KEYS)


# =========================================================================
# TEXT (canonical JSON)
# =========================================================================


def _dumps(d: Any) -> str:
    return json.dumps(d, separators=(",", ":"), ensure_ascii=False)


def _loads(s: str) -> Any:
    try:
        return json.loads(s)
    except json.JSONDecodeError as e:
        raise StructogramParseError(f"Invalid JSON: {e}") from e


def statement_to_json(s: Statement) -> str:
    return _dumps(statement_to_dict(s))


def statement_from_json(s: str) -> Statement:
    return statement_from_dict(_loads(s))


def structogram_to_json(s: Structogram) -> str:
    return _dumps(structogram_to_dict(s))


def structogram_from_json(s: str) -> Structogram:
    return structogram_from_dict(_loads(s))


def to_text(value: Union[Structogram, Statement]) -> str:
    """Serialize a structogram or a single statement to canonical text."""
    if isinstance(value, Structogram):
        return structogram_to_json(value)
    return statement_to_json(value)


def from_text(s: str) -> Union[Structogram, Statement]:
    """
    Parse canonical text into a Structogram or a statement.

    Objects carrying a "type" are statements; objects carrying any of
    "signature", "renderStart" or "statements" (and no "type") are
    structograms. Anything else is read as a statement, so "{}" is blank.
    """
    d = _loads(s)
    if is_structogram_dict(d):
        return structogram_from_dict(d)
    return statement_from_dict(d)


# =========================================================================
# YAML
# =========================================================================


def _yaml_load(s: str) -> Any:
    try:
        return yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise StructogramParseError(f"Invalid YAML: {e}") from e


def statement_to_yaml(s: Statement) -> str:
    return yaml.safe_dump(statement_to_dict(s))


def statement_from_yaml(s: str) -> Statement:
    return statement_from_dict(_yaml_load(s))


def structogram_to_yaml(s: Structogram) -> str:
    return yaml.safe_dump(structogram_to_dict(s))


def structogram_from_yaml(s: str) -> Structogram:
    return structogram_from_dict(_yaml_load(s))
