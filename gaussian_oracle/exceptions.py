# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Exception hierarchy for model loading and factorization."""

from __future__ import annotations

import numpy as np

__all__ = [
    "GaussianOracleError",
    "ModelFormatError",
    "DimensionMismatchError",
    "NotPositiveSemiDefiniteError",
]


class GaussianOracleError(Exception):
    """Base class for all load-time failures of the generator."""


class ModelFormatError(GaussianOracleError, ValueError):
    """Malformed, truncated or empty Gaussian model definition."""


class DimensionMismatchError(ModelFormatError):
    """Components of one mixture do not share the same dimension."""

    def __init__(self, label: str, dim: int, expected: int) -> None:
        super().__init__(f"incompatible gaussian {label}: dimension {dim}, expected {expected}")
        self.label = label
        self.dim = dim
        self.expected = expected


class NotPositiveSemiDefiniteError(GaussianOracleError, np.linalg.LinAlgError):
    """Covariance cannot be factorized because it is not positive semi-definite."""
