"""Configuration settings for structogram tooling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Settings:
    """Settings shared by the mapping parser, the analyzer and the demo."""

    # Separator between indices in human-typed mapping strings ("0;1;2")
    mapping_delimiter: str = ";"

    # Analyzer warns when statements are nested deeper than this
    max_nesting_depth: int = 5

    # Level passed to logging.basicConfig by the demo script
    log_level: str = "WARNING"


DEFAULT_SETTINGS = Settings()
