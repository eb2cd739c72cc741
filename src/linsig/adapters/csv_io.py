# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV matrix reader and writer.

One matrix per file, one matrix row per line. External dependencies
(csv, file I/O) are confined to this adapter.
"""
import csv
import logging
from typing import Any

from linsig.ports import ArgumentReader, ResultWriter

logger = logging.getLogger(__name__)


class CsvMatrixReader(ArgumentReader):
    """Reads a single numeric grid and binds it to one argument name."""

    def __init__(self, argument_name: str = 'a') -> None:
        self.argument_name = argument_name

    def read_matrix(self, path: str) -> list[list[float]]:
        rows: list[list[float]] = []
        with open(path, newline='', encoding='utf-8') as f:
            for line_no, record in enumerate(csv.reader(f), start=1):
                cells = [c.strip() for c in record]
                if not any(cells):
                    logger.warning("Skipping blank line %d in %s", line_no, path)
                    continue
                try:
                    rows.append([float(c) for c in cells])
                except ValueError:
                    raise ValueError(
                        f"Non-numeric cell on line {line_no} of {path}: {record!r}"
                    ) from None
        return rows

    def read_arguments(self, path: str) -> dict[str, Any]:
        return {self.argument_name: self.read_matrix(path)}


class CsvMatrixWriter(ResultWriter):
    """Writes a matrix (or a vector as a single row) to CSV."""

    def write_result(self, result: Any, path: str) -> int:
        if not isinstance(result, (list, tuple)):
            raise ValueError(
                f"CSV output requires a matrix or vector result, got {type(result).__name__}"
            )
        rows = list(result)
        if rows and not isinstance(rows[0], (list, tuple)):
            rows = [rows]

        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            for row in rows:
                writer.writerow([repr(float(v)) for v in row])
        return len(rows)
