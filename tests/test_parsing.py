# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Tests for reading Gaussian components from model files."""

import io
import logging

import numpy as np
import pytest

from gaussian_oracle.exceptions import ModelFormatError
from gaussian_oracle.parsing import ModelParser, load_components, parse_components, read_vector


def test_parse_mixture(mixture_text):
    components = parse_components(mixture_text)

    assert [c.label for c in components] == ["a", "b"]
    a, b = components
    assert a.kind == "diag" and a.dim == 3
    assert a.prior_weight == pytest.approx(0.25)
    np.testing.assert_array_equal(a.mean, [0, 0, 0])
    np.testing.assert_array_equal(a.covariance, [1, 2, 3])

    assert b.kind == "full"
    assert b.prior_weight == 0.0  # omitted prior
    np.testing.assert_array_equal(b.mean, [10, 10, 10])
    np.testing.assert_array_equal(b.lower_triangle_rows()[2], [0.5, 1, 2])


def test_parser_returns_none_at_end_of_stream():
    parser = ModelParser(io.StringIO("just a comment\n1 2 3\n"))
    assert parser.read_component() is None


def test_empty_stream_yields_nothing():
    assert parse_components("") == []


def test_stray_lines_between_blocks_are_skipped():
    text = "junk\n1 2\n\nGAUSS A 2 Diag 1.0\n0 0\n1 1\n7 8 9\nmore junk\nGAUSS B 2 Diag\n1 1\n2 2\n"
    components = parse_components(text)
    assert [c.label for c in components] == ["A", "B"]


def test_vector_lines_with_wrong_field_count_are_skipped():
    """Mean and covariance are the first lines with exactly the expected field count."""
    text = "GAUSS A 2 Diag\n# mean follows\n1\n1 2 3\n4 5\nnot numeric here\n6 x\n0.5 0.25\n"
    (component,) = parse_components(text)
    np.testing.assert_array_equal(component.mean, [4, 5])
    np.testing.assert_array_equal(component.covariance, [0.5, 0.25])


def test_full_rows_are_located_independently():
    text = "GAUSS F 3 Full 1\n1 2 3\n2\n\n# row 2\n1 3\n0 0 0 0\n0.1 0.2 4\n"
    (component,) = parse_components(text)
    np.testing.assert_array_equal(component.covariance_matrix(), [[2, 1, 0.1], [1, 3, 0.2], [0.1, 0.2, 4]])


@pytest.mark.parametrize(
    "token, expected_kind",
    [("Diag", "diag"), ("D", "diag"), ("Diagonal", "diag"), ("Full", "full"), ("diag", "full"), ("X", "full")],
)
def test_kind_token_matched_by_prefix(token, expected_kind):
    dim_lines = "0 0\n1 1\n" if expected_kind == "diag" else "0 0\n1\n0 1\n"
    (component,) = parse_components(f"GAUSS G 2 {token}\n{dim_lines}")
    assert component.kind == expected_kind


def test_missing_kind_token_selects_full():
    (component,) = parse_components("GAUSS G 1\n3\n2\n")
    assert component.kind == "full"
    assert component.prior_weight == 0.0


@pytest.mark.parametrize("dim_token", ["0", "-2", "abc"])
def test_invalid_dimension_discards_header(dim_token):
    text = f"GAUSS bad {dim_token} Diag\n1 1\nGAUSS good 1 Diag\n5\n2\n"
    components = parse_components(text)
    assert [c.label for c in components] == ["good"]


def test_dimension_read_like_atoi():
    (component,) = parse_components("GAUSS G 2x Diag\n0 0\n1 1\n")
    assert component.dim == 2


def test_header_without_dimension_is_skipped():
    assert parse_components("GAUSS lonely\n1 2\n") == []


def test_missing_mean_is_fatal():
    with pytest.raises(ModelFormatError, match="missing mean"):
        parse_components("GAUSS A 3 Diag\n1 2\n")


def test_truncated_full_covariance_is_fatal():
    with pytest.raises(ModelFormatError, match="covariance row 2"):
        parse_components("GAUSS A 2 Full\n0 0\n1\n")


def test_negative_prior_is_rejected():
    with pytest.raises(ModelFormatError, match="non-negative"):
        parse_components("GAUSS A 1 Diag -0.5\n0\n1\n")


def test_read_vector_returns_none_at_end():
    assert read_vector(io.StringIO("1 2 3\n"), 2) is None


def test_load_components_from_path(tmp_path, mixture_text):
    path = tmp_path / "mix.gauss"
    path.write_text(mixture_text)

    from_path = load_components(path)
    from_str = load_components(str(path))
    with open(path) as f:
        from_stream = load_components(f)

    assert [c.label for c in from_path] == [c.label for c in from_str] == [c.label for c in from_stream] == ["a", "b"]


def test_load_components_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_components(tmp_path / "missing.gauss")


def test_parser_logs_header(caplog, mixture_text):
    with caplog.at_level(logging.INFO, logger="gaussian_oracle.parsing"):
        parse_components(mixture_text)
    assert "label=a dim=3 type=Diag" in caplog.text
    assert "label=b dim=3 type=Full" in caplog.text


def test_digit_grouping_is_not_numeric():
    """A token like ``1_0`` is not a number; the line is skipped."""
    (component,) = parse_components("GAUSS A 2 Diag\n1_0 2\n3 4\n1 1\n")
    np.testing.assert_array_equal(component.mean, [3, 4])
    np.testing.assert_array_equal(component.covariance, [1, 1])
