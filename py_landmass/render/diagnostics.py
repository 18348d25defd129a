"""Diagnostic output for generated maps."""

from typing import List, Protocol

import numpy as np
import structlog

logger = structlog.get_logger()


class Diagnostics(Protocol):
    """Receives the seed and the final map of a generation run."""

    def report_seed(self, seed: int) -> None:
        ...

    def dump_map(self, land: np.ndarray) -> None:
        ...


def format_land_map(land: np.ndarray) -> str:
    """
    Render a land map as text, top row (highest y) first.

    Each cell becomes "1 " for land or "0 " for water and every row ends
    with a newline.
    """
    height, width = land.shape
    rows = []
    for y in range(height - 1, -1, -1):
        rows.append("".join("1 " if land[y, x] else "0 " for x in range(width)) + "\n")
    return "".join(rows)


class LogDiagnostics:
    """Writes diagnostics through structlog."""

    def report_seed(self, seed: int) -> None:
        logger.info("Map seed", seed=str(seed))

    def dump_map(self, land: np.ndarray) -> None:
        logger.info(
            "Final land map",
            width=land.shape[1],
            height=land.shape[0],
            map=format_land_map(land),
        )


class MemoryDiagnostics:
    """Keeps diagnostics in memory."""

    def __init__(self):
        self.seeds: List[str] = []
        self.dumps: List[str] = []

    def report_seed(self, seed: int) -> None:
        self.seeds.append(str(seed))

    def dump_map(self, land: np.ndarray) -> None:
        self.dumps.append(format_land_map(land))
