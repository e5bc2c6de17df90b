"""
Test the example structograms.

Validates that the builders create the expected shape, addressable by
mapping, and survive a text round-trip.
"""

from structogram.controller import StructogramController
from structogram.examples import build_example_menu_structogram, build_example_structogram
from structogram.model import StatementType
from structogram.serialization import from_text, to_text


def test_example_structogram_structure():
    controller = StructogramController(build_example_structogram())

    assert len(controller.structogram.statements) == 2

    outer = controller.get_element_by_mapping([1])
    assert outer.kind is StatementType.LOOP
    assert outer.content == "i := 1..N"

    # The collecting if sits directly in the loop body...
    collect = controller.get_element_by_mapping([1, 2])
    assert collect.kind is StatementType.IF
    # ...while its statements need the extra branch index
    assert controller.get_element_by_mapping([1, 2, 0, 0]).content == "Mdb := Mdb + 1"
    assert controller.get_element_by_mapping([1, 2, 1]) == []


def test_example_menu_structure():
    structogram = build_example_menu_structogram()
    assert structogram.render_start is True

    controller = StructogramController(structogram)
    choice = controller.get_element_by_mapping([0, 1])
    assert choice.kind is StatementType.SWITCH
    assert [b.case for b in choice.blocks] == ["A = 1", "A = 2", "else"]
    assert controller.get_element_by_mapping([0, 1, 1, 1]).content == "KI: A - 1"
    assert controller.get_element_by_mapping([0, 1, 2, 0]).kind is StatementType.BLANK


def test_example_text_roundtrip():
    structogram = build_example_structogram()
    text = to_text(structogram)
    assert from_text(text) == structogram
    assert to_text(from_text(text)) == text
