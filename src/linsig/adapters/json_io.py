# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON argument/result file I/O adapter.

An argument file is a JSON object mapping parameter names to values,
e.g. {"a": [[4, 7], [2, 6]]}. Results are written as plain JSON with
spectra as {"real", "imag"}, LU factors as {"lower", "upper"}, and
non-finite floats (NaN, +inf, -inf) as null.
"""
import json
import logging
import math
from typing import Any

from linsig.domain.factorization import LUDecomposition
from linsig.domain.spectral import FFTResult
from linsig.ports import ArgumentReader, ResultWriter

logger = logging.getLogger(__name__)


def to_jsonable(result: Any) -> Any:
    """Convert a kernel result into JSON-compatible values."""
    if isinstance(result, FFTResult):
        return {'real': to_jsonable(result.real), 'imag': to_jsonable(result.imag)}
    if isinstance(result, LUDecomposition):
        return {'lower': to_jsonable(result.lower), 'upper': to_jsonable(result.upper)}
    if isinstance(result, (list, tuple)):
        return [to_jsonable(v) for v in result]
    if isinstance(result, float) and not math.isfinite(result):
        return None
    return result


def row_count(result: Any) -> int:
    """Number of top-level rows/entries in a result (1 for scalars)."""
    if isinstance(result, (list, tuple, FFTResult)):
        return len(result)
    if isinstance(result, LUDecomposition):
        return len(result.lower)
    return 1


class JsonArgumentReader(ArgumentReader):
    """Reads operation arguments from JSON files."""

    def read_arguments(self, path: str) -> dict[str, Any]:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(
                f"Argument file {path} must hold a JSON object, got {type(data).__name__}"
            )
        logger.debug("Read arguments %s from %s", sorted(data), path)
        return data


class JsonResultWriter(ResultWriter):
    """Writes operation results to JSON files."""

    def write_result(self, result: Any, path: str) -> int:
        # Serialized before the file is opened: a failure leaves no partial output
        text = json.dumps({'result': to_jsonable(result)}, indent=2, allow_nan=False)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return row_count(result)
