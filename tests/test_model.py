"""
Tests for Structogram Core Model Objects

These tests verify:
    - Basic statement creation
    - Type tags and type-string lookup
    - If branch padding
    - Structural equality between variants
    - Deep cloning
"""

import pytest
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
    clone_statement,
    clone_value,
    content_of,
)


class TestStatementType:
    """Test StatementType lookup."""

    def test_known_type_strings(self):
        """Should map every serialized type string to its tag."""
        assert StatementType.from_string("normal") is StatementType.NORMAL
        assert StatementType.from_string("if") is StatementType.IF
        assert StatementType.from_string("switch") is StatementType.SWITCH
        assert StatementType.from_string("loop") is StatementType.LOOP
        assert StatementType.from_string("loop-reverse") is StatementType.LOOP_REVERSE
        assert StatementType.from_string("empty") is StatementType.BLANK

    def test_unknown_type_string_is_blank(self):
        """Should default to BLANK for unknown or missing types."""
        assert StatementType.from_string("while") is StatementType.BLANK
        assert StatementType.from_string(None) is StatementType.BLANK


class TestSimpleStatements:
    """Test Blank and Normal statements."""

    def test_blank_statement(self):
        """Should carry the BLANK tag and no content."""
        blank = BlankStatement()
        assert blank.kind is StatementType.BLANK
        assert content_of(blank) is None

    def test_blank_statements_are_equal(self):
        assert BlankStatement() == BlankStatement()

    def test_normal_statement(self):
        """Should store its content."""
        stmt = NormalStatement("Mdb := Mdb + 1")
        assert stmt.kind is StatementType.NORMAL
        assert stmt.content == "Mdb := Mdb + 1"
        assert content_of(stmt) == "Mdb := Mdb + 1"

    def test_normal_is_not_blank(self):
        assert NormalStatement("A") != BlankStatement()


class TestIfStatement:
    """Test IfStatement objects."""

    def test_default_has_two_empty_branches(self):
        stmt = IfStatement("j <= N")
        assert stmt.blocks == [[], []]

    def test_single_branch_is_padded(self):
        """Should pad a single supplied branch with an empty false branch."""
        stmt = IfStatement("C", [[NormalStatement("D"), BlankStatement()]])
        assert len(stmt.blocks) == 2
        assert stmt.true_branch == [NormalStatement("D"), BlankStatement()]
        assert stmt.false_branch == []

    def test_padding_does_not_touch_caller_list(self):
        branches = [[NormalStatement("D")]]
        IfStatement("C", branches)
        assert len(branches) == 1

    def test_more_than_two_branches_rejected(self):
        with pytest.raises(ValueError):
            IfStatement("C", [[], [], []])


class TestSwitchStatement:
    """Test SwitchStatement objects."""

    def test_direct_construction_does_not_pad(self):
        """Only deserialization enforces the two-case minimum."""
        assert SwitchStatement().blocks == []

    def test_switch_has_no_content(self):
        stmt = SwitchStatement([CaseBlock("A = 1"), CaseBlock("else")])
        assert content_of(stmt) is None
        assert stmt.blocks[0].statements == []


class TestLoopStatements:
    """Test the two loop variants."""

    def test_loop_tags_differ(self):
        assert LoopStatement("F").kind is StatementType.LOOP
        assert ReversedLoopStatement("F").kind is StatementType.LOOP_REVERSE

    def test_loop_and_reversed_loop_never_equal(self):
        """Same fields, different tag: must not compare equal."""
        body = [NormalStatement("A")]
        assert LoopStatement("F", body) != ReversedLoopStatement("F", body)
        assert not isinstance(ReversedLoopStatement(), LoopStatement)


class TestStructogram:
    """Test Structogram (root container) objects."""

    def test_create_empty_structogram(self):
        structogram = Structogram()
        assert structogram.name is None
        assert structogram.statements == []
        assert structogram.render_start is False

    def test_structogram_with_statements(self):
        structogram = Structogram("test", [NormalStatement("A"), BlankStatement()])
        assert structogram.name == "test"
        assert len(structogram.statements) == 2


class TestClone:
    """Test deep cloning of statement trees."""

    def build_tree(self):
        return LoopStatement("F", [
            NormalStatement("A"),
            IfStatement("C", [[NormalStatement("D")], [BlankStatement()]]),
            SwitchStatement([CaseBlock("x", [NormalStatement("E")]), CaseBlock("else")]),
            ReversedLoopStatement("G", [NormalStatement("H")]),
        ])

    def test_clone_is_equal(self):
        tree = self.build_tree()
        assert clone_statement(tree) == tree

    def test_clone_shares_nothing(self):
        """Mutating the copy must not change the original."""
        tree = self.build_tree()
        copy = clone_statement(tree)

        copy.statements[0].content = "changed"
        copy.statements[1].true_branch.append(BlankStatement())
        copy.statements[2].blocks[0].statements.clear()
        copy.statements[3].statements[0].content = "changed"

        assert tree == self.build_tree()
        assert copy.statements is not tree.statements

    def test_clone_value_handles_lists(self):
        items = [NormalStatement("A"), BlankStatement()]
        copy = clone_value(items)
        assert copy == items
        assert copy is not items
        assert copy[0] is not items[0]
