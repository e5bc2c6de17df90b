"""
Structogram Analyzer — read-only structural diagnostics.

Produces a StructogramReport with:
    - Statement counts per type
    - Maximum nesting depth
    - Containers with empty bodies (reported by mapping)
    - Warning flags

IMPORTANT: This module does NOT modify the structogram.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from structogram.config import DEFAULT_SETTINGS, Settings
from structogram.model import Statement, StatementType, Structogram

Mapping = Tuple[int, ...]


@dataclass
class StructogramReport:
    """Analysis report for a structogram."""

    name: Optional[str]
    total_statements: int = 0
    type_counts: Dict[StatementType, int] = field(default_factory=dict)
    max_depth: int = 0

    # Mappings follow resolver addressing: (i, branch, j) inside if/switch,
    # (i, j) inside loops
    empty_bodies: List[Mapping] = field(default_factory=list)
    deepest_mapping: Optional[Mapping] = None

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _walk(statements: List[Statement], prefix: Mapping, depth: int, report: StructogramReport) -> None:
    for i, statement in enumerate(statements):
        mapping = prefix + (i,)
        kind = statement.kind
        report.total_statements += 1
        report.type_counts[kind] = report.type_counts.get(kind, 0) + 1
        if depth > report.max_depth:
            report.max_depth = depth
            report.deepest_mapping = mapping

        if kind is StatementType.IF:
            if not statement.true_branch and not statement.false_branch:
                report.empty_bodies.append(mapping)
            for branch_index, branch in enumerate(statement.blocks):
                _walk(branch, mapping + (branch_index,), depth + 1, report)

        elif kind is StatementType.SWITCH:
            if len(statement.blocks) < 2:
                report.add_warning(
                    f"Switch at {list(mapping)} has {len(statement.blocks)} case(s)"
                )
            for case_index, block in enumerate(statement.blocks):
                if not block.statements:
                    report.empty_bodies.append(mapping + (case_index,))
                _walk(block.statements, mapping + (case_index,), depth + 1, report)

        elif kind in (StatementType.LOOP, StatementType.LOOP_REVERSE):
            if not statement.statements:
                report.empty_bodies.append(mapping)
            _walk(statement.statements, mapping, depth + 1, report)


def analyze_structogram(structogram: Structogram, settings: Optional[Settings] = None) -> StructogramReport:
    """
    Analyze the shape of a structogram.

    Top-level statements have depth 1; each if branch, switch case or loop
    body adds one level.
    """
    settings = settings or DEFAULT_SETTINGS
    report = StructogramReport(name=structogram.name)

    _walk(structogram.statements, (), 1, report)

    if report.empty_bodies:
        report.add_warning(
            f"Empty bodies at: {', '.join(str(list(m)) for m in report.empty_bodies)}"
        )

    if report.max_depth > settings.max_nesting_depth:
        report.add_warning(
            f"Deep nesting: depth {report.max_depth} at {list(report.deepest_mapping)}"
        )

    return report
