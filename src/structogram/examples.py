"""
Example structogram builders.

`build_example_structogram` is the classic "intersection" algorithm: for
every A[i], scan B for a match and collect it. `build_example_menu_structogram`
exercises the remaining variants (switch, post-test loop, blank).
"""
from structogram.model import (
    BlankStatement,
    CaseBlock,
    IfStatement,
    LoopStatement,
    NormalStatement,
    ReversedLoopStatement,
    Structogram,
    SwitchStatement,
)


def build_example_structogram(name: str = "Metszet(A, B)") -> Structogram:
    structogram = Structogram(name=name)

    # Inner scan: advance j until B[j] matches A[i] or B is exhausted
    scan = LoopStatement(
        "j <= M and A[i] != B[j]",
        [NormalStatement("j := j + 1")],
    )

    collect = IfStatement(
        "j <= M",
        [
            [
                NormalStatement("Mdb := Mdb + 1"),
                NormalStatement("Metszet[Mdb] := A[i]"),
            ],
            [],
        ],
    )

    outer = LoopStatement(
        "i := 1..N",
        [
            NormalStatement("j := 1"),
            scan,
            collect,
        ],
    )

    structogram.statements = [NormalStatement("Mdb := 0"), outer]
    return structogram


def build_example_menu_structogram(name: str = "Menu") -> Structogram:
    structogram = Structogram(name=name, render_start=True)

    choice = SwitchStatement([
        CaseBlock("A = 1", [NormalStatement("KI: A")]),
        CaseBlock("A = 2", [
            NormalStatement("A := A - 1"),
            NormalStatement("KI: A - 1"),
        ]),
        CaseBlock("else", [BlankStatement()]),
    ])

    structogram.statements = [
        ReversedLoopStatement("A != 0", [NormalStatement("BE: A"), choice]),
    ]
    return structogram
