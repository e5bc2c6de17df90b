"""
Tests for the Structogram Analyzer.

Tests verify that the analyzer correctly:
    - Counts statements per type
    - Measures nesting depth
    - Reports empty bodies by mapping
    - Raises warnings against the configured thresholds
"""

from structogram.analyzer import analyze_structogram
from structogram.config import Settings
from structogram.examples import build_example_structogram
from structogram.model import (
    BlankStatement,
    CaseBlock,
    IfStatement,
    LoopStatement,
    NormalStatement,
    ReversedLoopStatement,
    StatementType,
    Structogram,
    SwitchStatement,
)


def test_example_structogram_counts():
    """Analyze the intersection example."""
    report = analyze_structogram(build_example_structogram())

    assert report.name == "Metszet(A, B)"
    assert report.total_statements == 8
    assert report.type_counts[StatementType.NORMAL] == 5
    assert report.type_counts[StatementType.LOOP] == 2
    assert report.type_counts[StatementType.IF] == 1
    assert report.max_depth == 3
    assert report.deepest_mapping == (1, 1, 0)
    assert report.warnings == []


def test_empty_structogram():
    report = analyze_structogram(Structogram())
    assert report.total_statements == 0
    assert report.max_depth == 0
    assert report.warnings == []


def test_empty_bodies():
    """Should report empty ifs, loops and switch cases by mapping."""
    structogram = Structogram(statements=[
        IfStatement("C"),
        LoopStatement("F"),
        SwitchStatement([CaseBlock("a", [BlankStatement()]), CaseBlock("else", [])]),
        ReversedLoopStatement("G", [NormalStatement("x")]),
    ])

    report = analyze_structogram(structogram)

    assert report.empty_bodies == [(0,), (1,), (2, 1)]
    assert any("Empty bodies" in w for w in report.warnings)


def test_if_with_one_branch_is_not_empty():
    structogram = Structogram(statements=[IfStatement("C", [[NormalStatement("A")], []])])
    assert analyze_structogram(structogram).empty_bodies == []


def test_child_mappings_follow_resolver_addressing():
    """If children sit under a branch index, loop children do not."""
    structogram = Structogram(statements=[
        LoopStatement("F", [IfStatement("C", [[], [LoopStatement("G")]])]),
    ])
    report = analyze_structogram(structogram)
    assert report.empty_bodies == [(0, 0, 1, 0)]


def test_deep_nesting_warning():
    """Should warn when nesting exceeds the configured depth."""
    innermost = NormalStatement("x")
    tree = innermost
    for i in range(3):
        tree = LoopStatement(f"L{i}", [tree])
    structogram = Structogram(statements=[tree])

    assert analyze_structogram(structogram).max_depth == 4
    assert analyze_structogram(structogram).warnings == []

    report = analyze_structogram(structogram, Settings(max_nesting_depth=2))
    assert any("Deep nesting" in w for w in report.warnings)


def test_switch_with_too_few_cases():
    structogram = Structogram(statements=[SwitchStatement([CaseBlock("a", [NormalStatement("x")])])])
    report = analyze_structogram(structogram)
    assert any("1 case(s)" in w for w in report.warnings)
