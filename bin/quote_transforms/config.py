"""Centralized configuration management."""

import os
from dataclasses import dataclass
from typing import Optional

OUTPUT_FORMATS = ("tree", "html")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Defaults for the command line front end"""
    log_level: Optional[str] = None  # None = QUOTE_TRANSFORMS_LOG_LEVEL, fallback WARNING
    output_format: Optional[str] = None  # None = QUOTE_TRANSFORMS_OUTPUT_FORMAT, fallback tree

    def __post_init__(self):
        if self.log_level is None:
            self.log_level = os.environ.get('QUOTE_TRANSFORMS_LOG_LEVEL', 'WARNING')
        if self.output_format is None:
            self.output_format = os.environ.get('QUOTE_TRANSFORMS_OUTPUT_FORMAT', 'tree')

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            self.log_level = 'WARNING'
        if self.output_format not in OUTPUT_FORMATS:
            self.output_format = 'tree'
