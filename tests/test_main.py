# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Tests for the command-line interface."""

import io
from pathlib import Path
from unittest.mock import patch

import pandas as pd
import pytest

from gaussian_oracle.__main__ import main


@pytest.fixture
def model_file(tmp_path, mixture_text) -> Path:
    path = tmp_path / "mix.gauss"
    path.write_text(mixture_text)
    return path


def test_main_prints_points(model_file, capsys):
    with patch("sys.argv", ["gaussian-oracle", "--gauss", str(model_file), "-n", "4", "-q", "2", "--seed", "1"]):
        assert main() == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert all(len(line.split()) == 3 for line in lines)


def test_main_quiet_with_output_file(model_file, tmp_path, capsys):
    out = tmp_path / "points.csv"
    argv = ["--gauss", str(model_file), "-n", "10", "-q", "3", "--seed", "2", "--quiet", "--out", str(out)]

    main(argv)

    assert capsys.readouterr().out == ""
    df = pd.read_csv(out)
    assert len(df) == 13
    assert list(df.columns) == ["x1", "x2", "x3", "label", "partition"]


def test_main_reads_stdin(mixture_text, capsys):
    with patch("sys.stdin", io.StringIO(mixture_text)):
        main(["-n", "2", "-q", "0", "--seed", "3"])
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_main_with_config_file(model_file, tmp_path, capsys):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"n_points: 3\nn_queries: 1\nrandom_state: 5\nmodel_path: {model_file}\n")

    main(["--config", str(config_path), "-q", "0"])

    # explicit flag overrides the YAML value
    assert len(capsys.readouterr().out.splitlines()) == 3


def test_main_same_seed_same_output(model_file, capsys):
    argv = ["--gauss", str(model_file), "-n", "5", "--seed", "11"]
    main(argv)
    first = capsys.readouterr().out
    main(argv)
    assert capsys.readouterr().out == first


def test_main_missing_model_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--gauss", str(tmp_path / "missing.gauss")])
    assert excinfo.value.code == 1
    assert "gaussian-oracle:" in capsys.readouterr().err


def test_main_malformed_model_exits(tmp_path, capsys):
    path = tmp_path / "bad.gauss"
    path.write_text("GAUSS A 3 Diag\n1 2\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["--gauss", str(path)])
    assert excinfo.value.code == 1
    assert "missing mean" in capsys.readouterr().err


def test_main_non_psd_model_exits(tmp_path, capsys):
    path = tmp_path / "bad.gauss"
    path.write_text("GAUSS A 2 Full\n0 0\n1\n2 1\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["--gauss", str(path)])
    assert excinfo.value.code == 1
    assert "unable to compute Cholesky" in capsys.readouterr().err


def test_main_invalid_option_exits():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])


def test_main_negative_seed_exits(model_file, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--gauss", str(model_file), "--seed", "-1"])
    assert excinfo.value.code == 1
    assert "random_state" in capsys.readouterr().err
