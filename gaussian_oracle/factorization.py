# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

r"""Cholesky factorization of covariance matrices for sampling.

For a symmetric positive semi-definite matrix :math:`A` the lower-triangular
factor :math:`L` with :math:`L L^\top = A` is computed row by row
(Cholesky–Banachiewicz order):

.. math::

    a_{ji}' = a_{ji} - \sum_{k<i} l_{ik} l_{jk}, \qquad
    l_{ii} = \sqrt{a_{ii}'}, \qquad
    l_{ji} = a_{ji}' / l_{ii} \quad (j > i).

Only the lower triangle of the input is read. A negative pivot
:math:`a_{ii}' < 0` means :math:`A` is not positive semi-definite.

Unlike :func:`numpy.linalg.cholesky`, a zero pivot is accepted so that
rank-deficient covariances can be sampled from. Below a zero pivot the reduced
entries of a PSD matrix are zero as well; they are stored as zero, and a
nonzero entry there is reported as a non-PSD input.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from gaussian_oracle.exceptions import NotPositiveSemiDefiniteError
from gaussian_oracle.model import GaussianComponent

__all__ = [
    "cholesky_lower",
    "diagonal_factor",
    "factorize_component",
]


def cholesky_lower(a: ArrayLike, *, overwrite: bool = False) -> NDArray[np.float64]:
    """Factor a symmetric PSD matrix given by its lower triangle.

    Args:
        a: Square array of shape ``(d, d)``; entries above the diagonal are
            ignored.
        overwrite: If True and ``a`` is a float64 ndarray, the factor is
            written into ``a`` itself (lower triangle; the upper triangle is
            zeroed).

    Returns:
        Lower-triangular ``L`` of shape ``(d, d)`` with ``L @ L.T == A`` up to
        round-off.

    Raises:
        ValueError: If ``a`` is not square.
        NotPositiveSemiDefiniteError: If a pivot is negative, or a zero pivot
            has a nonzero entry below it.
    """
    if overwrite and isinstance(a, np.ndarray) and a.dtype == np.float64:
        lower = a
    else:
        lower = np.array(a, dtype=np.float64)
    if lower.ndim != 2 or lower.shape[0] != lower.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {lower.shape}.")

    d = lower.shape[0]
    for i in range(d):
        for j in range(i, d):
            aux = lower[j, i] - float(np.dot(lower[i, :i], lower[j, :i]))
            if i == j:
                if aux < 0.0:
                    raise NotPositiveSemiDefiniteError(f"unable to compute Cholesky: pivot {i} is {aux:g} < 0")
                lower[i, i] = math.sqrt(aux)
            elif lower[i, i] == 0.0:
                if aux != 0.0:
                    raise NotPositiveSemiDefiniteError(
                        f"unable to compute Cholesky: zero pivot {i} with nonzero entry {aux:g} in row {j}"
                    )
                lower[j, i] = 0.0
            else:
                lower[j, i] = aux / lower[i, i]

    lower[np.triu_indices(d, k=1)] = 0.0
    return lower


def diagonal_factor(variances: ArrayLike) -> NDArray[np.float64]:
    """Per-dimension standard deviations of a diagonal covariance.

    Raises:
        NotPositiveSemiDefiniteError: If any variance is negative.
    """
    variances = np.asarray(variances, dtype=np.float64)
    negative = np.flatnonzero(variances < 0.0)
    if negative.size:
        raise NotPositiveSemiDefiniteError(
            f"unable to compute Cholesky: variance {int(negative[0])} is {variances[negative[0]]:g} < 0"
        )
    return np.sqrt(variances)


def factorize_component(component: GaussianComponent) -> GaussianComponent:
    """Attach the sampling factor to ``component`` (computed at most once).

    Returns:
        The same component, for chaining.

    Raises:
        NotPositiveSemiDefiniteError: If the covariance is not PSD. The error
            message names the component.
    """
    if component.is_factorized:
        return component
    try:
        if component.is_diagonal:
            factor = diagonal_factor(component.covariance)
        else:
            factor = cholesky_lower(component.covariance)
    except NotPositiveSemiDefiniteError as exc:
        raise NotPositiveSemiDefiniteError(f"GAUSS {component.label}: {exc}") from exc
    factor.setflags(write=False)
    component.sampling_factor = factor
    return component
