"""Step-by-step trace recording shared by the algorithms."""

from __future__ import annotations

import logging
from typing import List, Optional

INDENT = "  "


class Trace:
    """
    Accumulates the human-readable lines describing an algorithm run.

    Lines are indented two spaces per depth level. When a logger is given,
    every line is mirrored to it at DEBUG level.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._lines: List[str] = []
        self._logger = logger

    def step(self, message: str, depth: int = 0) -> None:
        """Record one line at the given indentation depth."""
        line = f"{INDENT * depth}{message}"
        self._lines.append(line)
        if self._logger is not None:
            self._logger.debug(line)

    def block(self, message: str) -> None:
        """Record a line preceded by a blank separator line.

        The separator is kept in ``lines`` but not sent to the logger.
        """
        self._lines.append("")
        self.step(message)

    def section(self, title: str) -> None:
        """Record a section banner such as ``--- BFS Traversal Complete ---``."""
        self.block(f"--- {title} ---")

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __str__(self) -> str:
        return self.text
