# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the numeric kernel.

Usage:
    # Arguments from a JSON object, result to JSON
    linsig invert -i matrix.json -o inverse.json
    linsig solve -i system.json -o x.json --tolerance 1e-12

    # A single grid from CSV, extra arguments with --set, result to CSV
    linsig blur --input-csv image.csv --set kernel_size=3 --set sigma=0.8 -o blurred.csv
    linsig rotate --input-csv image.csv --set angle_deg=90 -o rotated.csv

    # Without -o the result is printed as JSON
    linsig determinant -i matrix.json
"""
import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, Callable

from linsig.domain.convolution import (
    convolve_1d,
    convolve_2d,
    gaussian_blur,
    gaussian_kernel,
)
from linsig.domain.elimination import mat_inverse
from linsig.domain.factorization import (
    lu_decompose,
    mat_determinant,
    mat_determinant_pivoted,
)
from linsig.domain.image_processing import equalize_histogram, rotate_image
from linsig.domain.linalg import (
    mat_add,
    mat_identity,
    mat_multiply,
    mat_scale,
    mat_trace,
    mat_transpose,
)
from linsig.domain.linear_solver import solve_linear_system
from linsig.domain.numerics import NumericConfig
from linsig.domain.spectral import FFTResult, fft, ifft, inverse_fft
from linsig.domain.time_series import rolling_mean
from linsig.domain.vectors import vec_dot, vec_magnitude, vec_normalize
from linsig.adapters.csv_io import CsvMatrixReader, CsvMatrixWriter
from linsig.adapters.json_io import JsonArgumentReader, JsonResultWriter, to_jsonable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Operation:
    """A kernel function exposed on the command line.

    csv_input says how --input-csv binds to the first required argument:
    'matrix' passes the grid as is, 'vector' flattens it row by row, and
    None means the operation takes no grid.
    """
    func: Callable[..., Any]
    required: tuple
    optional: tuple = ()
    uses_tolerance: bool = False
    csv_input: str | None = 'matrix'


OPERATIONS: dict[str, Operation] = {
    'multiply': Operation(mat_multiply, ('a', 'b')),
    'add': Operation(mat_add, ('a', 'b')),
    'scale': Operation(mat_scale, ('a', 'scalar')),
    'transpose': Operation(mat_transpose, ('a',)),
    'trace': Operation(mat_trace, ('a',)),
    'identity': Operation(mat_identity, ('n',), csv_input=None),
    'dot': Operation(vec_dot, ('a', 'b'), csv_input='vector'),
    'magnitude': Operation(vec_magnitude, ('v',), csv_input='vector'),
    'normalize': Operation(vec_normalize, ('v',), csv_input='vector'),
    'invert': Operation(mat_inverse, ('a',), uses_tolerance=True),
    'determinant': Operation(mat_determinant, ('a',)),
    'determinant-pivoted': Operation(mat_determinant_pivoted, ('a',), uses_tolerance=True),
    'lu': Operation(lu_decompose, ('a',), uses_tolerance=True),
    'solve': Operation(solve_linear_system, ('a', 'b'), uses_tolerance=True),
    'fft': Operation(fft, ('signal',), csv_input='vector'),
    'ifft': Operation(ifft, ('spectrum',), csv_input=None),
    'inverse-fft': Operation(inverse_fft, ('spectrum',), csv_input=None),
    'convolve-1d': Operation(convolve_1d, ('signal', 'kernel'), csv_input='vector'),
    'convolve-2d': Operation(convolve_2d, ('image', 'kernel')),
    'gaussian-kernel': Operation(gaussian_kernel, ('size', 'sigma'), csv_input=None),
    'blur': Operation(gaussian_blur, ('image',), ('kernel_size', 'sigma')),
    'rotate': Operation(rotate_image, ('image', 'angle_deg')),
    'equalize': Operation(equalize_histogram, ('image',)),
    'rolling-mean': Operation(rolling_mean, ('series', 'window'), csv_input='vector'),
}


def _coerce(name: str, value: Any) -> Any:
    if name == 'spectrum' and isinstance(value, dict):
        try:
            return FFTResult(real=tuple(value['real']), imag=tuple(value['imag']))
        except KeyError as e:
            raise ValueError(f"spectrum is missing the {e.args[0]!r} channel") from None
    return value


def run(
    operation_name: str,
    arguments: dict[str, Any],
    config: NumericConfig | None = None,
) -> Any:
    """
    Invoke one kernel operation with named arguments.

    Returns:
        The operation's result (list, float, FFTResult or LUDecomposition).
    """
    try:
        operation = OPERATIONS[operation_name]
    except KeyError:
        raise ValueError(f"Unknown operation: {operation_name!r}") from None

    missing = [p for p in operation.required if p not in arguments]
    if missing:
        raise ValueError(f"{operation_name} is missing argument(s): {', '.join(missing)}")
    allowed = set(operation.required) | set(operation.optional)
    unknown = sorted(set(arguments) - allowed)
    if unknown:
        raise ValueError(f"{operation_name} does not accept argument(s): {', '.join(unknown)}")

    kwargs = {name: _coerce(name, value) for name, value in arguments.items()}
    if operation.uses_tolerance and config is not None:
        kwargs['tolerance'] = config.tolerance
    logger.debug("Running %s with %s", operation_name, sorted(kwargs))
    return operation.func(**kwargs)


def _csv_arguments(operation_name: str, path: str) -> dict[str, Any]:
    operation = OPERATIONS[operation_name]
    first = operation.required[0]
    if operation.csv_input is None:
        raise ValueError(
            f"--input-csv is not supported by {operation_name}: "
            f"its first argument {first!r} is not a matrix or vector"
        )
    grid = CsvMatrixReader().read_matrix(path)
    if operation.csv_input == 'vector':
        return {first: [v for row in grid for v in row]}
    return {first: grid}


def _parse_assignment(text: str) -> tuple[str, Any]:
    name, sep, raw = text.partition('=')
    if not sep or not name:
        raise ValueError(f"--set expects NAME=VALUE, got {text!r}")
    try:
        return name, json.loads(raw)
    except json.JSONDecodeError:
        raise ValueError(f"--set value for {name!r} is not valid JSON: {raw!r}") from None


def main():
    parser = argparse.ArgumentParser(
        description="Run linear-algebra and signal-processing kernels on JSON/CSV data"
    )
    parser.add_argument('operation', choices=sorted(OPERATIONS), help="Kernel operation to run")
    parser.add_argument(
        '--input', '-i',
        help="Path to a JSON object of named arguments"
    )
    parser.add_argument(
        '--input-csv',
        help="Path to a CSV grid bound to the operation's first matrix or vector argument"
    )
    parser.add_argument(
        '--set', action='append', default=[], metavar='NAME=VALUE',
        help="Additional argument, value parsed as JSON (repeatable)"
    )
    parser.add_argument(
        '--output', '-o',
        help="Path to write the result (.csv for a CSV grid, JSON otherwise); stdout if omitted"
    )
    parser.add_argument(
        '--tolerance', type=float, default=None,
        help="Pivot tolerance for invert/solve/lu/determinant-pivoted (default: 1e-10)"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = args.input or args.input_csv
    try:
        config = NumericConfig() if args.tolerance is None else NumericConfig(args.tolerance)

        arguments: dict[str, Any] = {}
        if args.input:
            arguments.update(JsonArgumentReader().read_arguments(args.input))
        if args.input_csv:
            arguments.update(_csv_arguments(args.operation, args.input_csv))
        for assignment in args.set:
            name, value = _parse_assignment(assignment)
            arguments[name] = value

        result = run(args.operation, arguments, config)

        if args.output:
            if os.path.splitext(args.output)[1].lower() == '.csv':
                rows = CsvMatrixWriter().write_result(result, args.output)
            else:
                rows = JsonResultWriter().write_result(result, args.output)
            print(f"{args.operation}: wrote {rows} row(s) to {args.output}")
        else:
            print(json.dumps(to_jsonable(result), allow_nan=False))

    except FileNotFoundError:
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {input_path}: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
