"""
Structogram Document Model Package

An editable, in-memory representation of structograms (Nassi-Shneiderman
diagrams): a tree of statements that can be read from and written to a
compact JSON text form, and edited in place through integer "mappings".

LAYERS:
-------
    model          - statement variants and the Structogram document
    converter      - best-effort conversion between statement kinds
    serialization  - canonical JSON text and YAML round-trip
    mapping        - path resolution through the statement tree
    controller     - get / set / insert / delete / move / swap by mapping
    analyzer       - read-only structural report

This package contains ZERO knowledge of rendering or user interaction.
"""

__version__ = "0.1.0"
