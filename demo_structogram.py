#!/usr/bin/env python3
"""
Demo: Build the example structogram, analyze it and look up a mapping.

Usage:
    python demo_structogram.py "1;2;0;1"
"""

import logging
import sys

from structogram.analyzer import analyze_structogram
from structogram.config import Settings
from structogram.controller import StructogramController
from structogram.examples import build_example_structogram
from structogram.mapping import split_mapping_string
from structogram.serialization import structogram_to_yaml, to_text


def print_report(report):
    """Pretty-print a StructogramReport."""
    print()
    print("=" * 70)
    print(f"STRUCTOGRAM REPORT: {report.name}")
    print("=" * 70)
    print(f"  Total Statements:      {report.total_statements}")
    for kind, count in sorted(report.type_counts.items(), key=lambda item: item[0].value):
        print(f"    {kind.value:<14} {count}")
    print(f"  Max Depth:             {report.max_depth} at {report.deepest_mapping}")
    print()
    if report.warnings:
        print("WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("NO WARNINGS")
    print()


def main():
    settings = Settings()
    logging.basicConfig(level=settings.log_level)

    controller = StructogramController(build_example_structogram())

    print(to_text(controller.structogram))
    print()
    print(structogram_to_yaml(controller.structogram))

    print_report(analyze_structogram(controller.structogram, settings))

    answer = sys.argv[1] if len(sys.argv) > 1 else "1"
    mapping = split_mapping_string(answer, delimiter=settings.mapping_delimiter)
    element = controller.get_element_by_mapping(mapping)
    print(f"Position {mapping}:")
    print(element if element is not None else "Not found")


if __name__ == "__main__":
    main()
