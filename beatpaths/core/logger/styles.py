"""
Logging style constants for consistent console output.
"""

from __future__ import annotations

import logging


class LogStyle:
    """Unified logging style constants."""

    HEADER_WIDTH = 80

    # Section separator
    LIGHT = "─" * HEADER_WIDTH

    # Symbols
    ARROW = "»"
    WARNING = "⚠"
    SUCCESS = "✓"

    # Indentation
    INDENT = "  "

    @staticmethod
    def log_phase_header(log: logging.Logger, title: str) -> None:
        """
        Log a centered header framed by separator lines.

        Args:
            log: Logger instance to write to.
            title: Header text (centered).
        """
        log.info(LogStyle.LIGHT)
        log.info(f"{title:^{LogStyle.HEADER_WIDTH}}")
        log.info(LogStyle.LIGHT)
