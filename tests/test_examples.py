# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Smoke tests for example scripts.

These tests ensure that the example scripts run without errors and produce
expected outputs.
"""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

from gaussian_oracle import load_components

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def import_example(example_name: str):
    """Import an example module dynamically."""
    example_path = EXAMPLES_DIR / f"{example_name}.py"
    spec = importlib.util.spec_from_file_location(example_name, example_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load {example_path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[example_name] = module
    spec.loader.exec_module(module)
    return module


def test_example_model_file_parses():
    components = load_components(EXAMPLES_DIR / "two_gaussians.gauss")
    assert [c.label for c in components] == ["left", "right"]
    assert [c.kind for c in components] == ["diag", "full"]


def test_basic_usage_runs(capsys, tmp_path, monkeypatch):
    """Test that basic_usage.py runs without errors."""
    monkeypatch.chdir(tmp_path)
    example = import_example("basic_usage")

    example.main()

    captured = capsys.readouterr()
    assert "Basic Usage Example" in captured.out
    assert "Generated dataset with shape (220, 2)" in captured.out
    assert "(query label withheld)" in captured.out
    assert (tmp_path / "basic_points.csv").exists()


def test_example_model_file_priors_sum_to_one():
    components = load_components(EXAMPLES_DIR / "two_gaussians.gauss")
    assert [c.prior_weight for c in components] == pytest.approx([0.6, 0.4])
