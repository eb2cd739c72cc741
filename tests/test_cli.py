# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for cli.py: operation dispatch, file I/O, and error exits."""
import json
import math
import sys

import numpy as np
import pytest

from linsig.cli import OPERATIONS, main, run
from linsig.domain.numerics import NumericConfig, SingularMatrix
from linsig.domain.spectral import FFTResult


def _write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestRun:
    def test_invert(self):
        inv = run("invert", {"a": [[4.0, 7.0], [2.0, 6.0]]})
        assert abs(inv[0][1] - (-0.7)) < 1e-9

    def test_tolerance_forwarded(self):
        a = [[1.0, 0.0], [0.0, 1e-12]]
        with pytest.raises(SingularMatrix):
            run("invert", {"a": a})
        inv = run("invert", {"a": a}, NumericConfig(tolerance=1e-14))
        assert abs(inv[1][1] - 1e12) < 1.0

    def test_spectrum_argument_coerced(self):
        result = run("inverse-fft", {"spectrum": {"real": [4.0, 0.0], "imag": [0.0, 0.0]}})
        assert isinstance(result, FFTResult)
        assert result.real == (2.0, 2.0)

    def test_optional_arguments(self):
        image = [[1.0] * 3 for _ in range(3)]
        assert len(run("blur", {"image": image, "kernel_size": 3})) == 3

    def test_missing_argument(self):
        with pytest.raises(ValueError, match="missing argument"):
            run("solve", {"a": [[1.0]]})

    def test_unknown_argument(self):
        with pytest.raises(ValueError, match="does not accept"):
            run("transpose", {"a": [[1.0]], "b": [[2.0]]})

    def test_unknown_operation(self):
        with pytest.raises(ValueError, match="Unknown operation"):
            run("eigen", {})

    def test_every_operation_callable(self):
        for name, operation in OPERATIONS.items():
            assert callable(operation.func), name
            assert operation.required, name


class TestMain:
    def test_json_in_json_out(self, tmp_path, capsys, monkeypatch):
        args_path = _write_json(tmp_path / "args.json", {"a": [[2, 1], [1, 3]], "b": [4, 5]})
        out_path = str(tmp_path / "x.json")
        monkeypatch.setattr(sys, 'argv', ['linsig', 'solve', '-i', args_path, '-o', out_path])

        main()

        data = json.loads((tmp_path / "x.json").read_text(encoding="utf-8"))
        assert abs(data["result"][0] - 1.4) < 1e-9
        assert abs(data["result"][1] - 1.2) < 1e-9
        assert "wrote 2 row(s)" in capsys.readouterr().out

    def test_csv_in_csv_out_with_set(self, tmp_path, monkeypatch):
        image_path = tmp_path / "image.csv"
        image_path.write_text("1,2\n3,4\n", encoding="utf-8")
        out_path = tmp_path / "rotated.csv"
        monkeypatch.setattr(sys, 'argv', [
            'linsig', 'rotate', '--input-csv', str(image_path),
            '--set', 'angle_deg=360', '-o', str(out_path),
        ])

        main()

        assert out_path.read_text(encoding="utf-8").splitlines() == ["1.0,2.0", "3.0,4.0"]

    def test_stdout_when_no_output(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', [
            'linsig', 'rolling-mean', '--set', 'series=[1, 2, 3, 4, 5]', '--set', 'window=3',
        ])

        main()

        assert json.loads(capsys.readouterr().out) == [None, None, 2.0, 3.0, 4.0]

    def test_tolerance_flag(self, tmp_path, capsys, monkeypatch):
        args_path = _write_json(tmp_path / "args.json", {"a": [[1.0, 0.0], [0.0, 1e-12]]})
        monkeypatch.setattr(sys, 'argv', ['linsig', 'invert', '-i', args_path, '--tolerance', '1e-14'])

        main()

        result = json.loads(capsys.readouterr().out)
        assert math.isclose(result[1][1], 1e12)

    def test_missing_input_file(self, tmp_path, capsys, monkeypatch):
        missing = str(tmp_path / "nonexistent.json")
        monkeypatch.setattr(sys, 'argv', ['linsig', 'invert', '-i', missing])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err.lower()

    def test_singular_matrix_exit(self, tmp_path, capsys, monkeypatch):
        args_path = _write_json(tmp_path / "args.json", {"a": [[1, 2], [2, 4]]})
        monkeypatch.setattr(sys, 'argv', ['linsig', 'invert', '-i', args_path])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "pivot" in err

    def test_invalid_json(self, tmp_path, capsys, monkeypatch):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        monkeypatch.setattr(sys, 'argv', ['linsig', 'fft', '-i', str(bad)])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_bad_set_syntax(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['linsig', 'identity', '--set', 'n3'])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "NAME=VALUE" in capsys.readouterr().err

    def test_invalid_tolerance(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['linsig', 'identity', '--set', 'n=2', '--tolerance', '0'])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "tolerance" in capsys.readouterr().err

    def test_non_finite_stdout_is_valid_json(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', [
            'linsig', 'scale', '--set', 'a=[[1e308, 1.0]]', '--set', 'scalar=10',
        ])

        with np.errstate(over='ignore'):
            main()

        assert json.loads(capsys.readouterr().out) == [[None, 10.0]]

    def test_vector_given_as_matrix_exits_cleanly(self, tmp_path, capsys, monkeypatch):
        args_path = _write_json(tmp_path / "v.json", {"a": [1, 2]})
        monkeypatch.setattr(sys, 'argv', ['linsig', 'transpose', '-i', args_path])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "sequence" in err


class TestCsvInput:
    def test_vector_operation_flattens_grid(self, tmp_path, capsys, monkeypatch):
        column = tmp_path / "v.csv"
        column.write_text("3\n4\n", encoding="utf-8")
        monkeypatch.setattr(sys, 'argv', ['linsig', 'magnitude', '--input-csv', str(column)])

        main()

        assert json.loads(capsys.readouterr().out) == 5.0

    @pytest.mark.parametrize("operation", ["identity", "gaussian-kernel", "ifft"])
    def test_rejected_for_scalar_or_spectrum_arguments(self, operation, tmp_path, capsys, monkeypatch):
        grid = tmp_path / "grid.csv"
        grid.write_text("1,2\n3,4\n", encoding="utf-8")
        monkeypatch.setattr(sys, 'argv', ['linsig', operation, '--input-csv', str(grid)])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "--input-csv is not supported" in capsys.readouterr().err

    def test_every_operation_declares_csv_binding(self):
        for name, operation in OPERATIONS.items():
            assert operation.csv_input in ('matrix', 'vector', None), name
