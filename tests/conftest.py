# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Shared fixtures for the test suite."""

import numpy as np
import pytest

from gaussian_oracle import GaussianComponent

MIXTURE_TEXT = """\
# two components in 3-D
GAUSS a 3 Diag 0.25
0 0 0
1 2 3

GAUSS b 3 Full
10 10 10
4
2 3
0.5 1 2
"""


@pytest.fixture
def mixture_text() -> str:
    return MIXTURE_TEXT


@pytest.fixture
def full_component() -> GaussianComponent:
    covariance = np.array(
        [
            [4.0, 0.0, 0.0],
            [2.0, 3.0, 0.0],
            [0.5, 1.0, 2.0],
        ]
    )
    return GaussianComponent(label="full", dim=3, kind="full", mean=[1.0, -2.0, 0.5], covariance=covariance)


@pytest.fixture
def diag_component() -> GaussianComponent:
    return GaussianComponent(label="diag", dim=2, kind="diag", mean=[5.0, -5.0], covariance=[4.0, 0.25])
