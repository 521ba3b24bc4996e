# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Gaussian mixture component and its text serialization.

A component is read once from a model file, factorized once, and afterwards
only its prior weight is adjusted by normalization. The serializer writes the
same grammar the parser reads::

    GAUSS <label> <dim> Diag|Full <prior>
    <mean_1> ... <mean_dim>
    <var_1> ... <var_dim>                 (Diag)
    <cov_1,1>                             (Full, row i has i+1 entries)
    <cov_2,1> <cov_2,2>
    ...
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, TextIO, TypeAlias

import numpy as np
from numpy.typing import NDArray

CovarianceKind: TypeAlias = Literal["diag", "full"]

__all__ = [
    "CovarianceKind",
    "GaussianComponent",
    "format_component",
    "write_components",
]


@dataclass
class GaussianComponent:
    """One labeled Gaussian of a mixture.

    Attributes:
        label: Component name, unique within a mixture.
        dim: Dimensionality (positive).
        kind: ``"diag"`` for a variance vector, ``"full"`` for a lower-triangular
            covariance listing.
        prior_weight: A priori probability. ``0.0`` when omitted in the input;
            resolved later by :func:`gaussian_oracle.mixture.normalize_priors`.
        mean: Array of shape ``(dim,)``.
        covariance: Variances of shape ``(dim,)`` (diag) or a ``(dim, dim)``
            array whose lower triangle holds the covariance (full). The upper
            triangle is never read.
        sampling_factor: Standard deviations (diag) or the lower Cholesky
            factor (full). ``None`` until the component is factorized.
    """

    label: str
    dim: int
    kind: CovarianceKind
    mean: NDArray[np.float64]
    covariance: NDArray[np.float64]
    prior_weight: float = 0.0
    sampling_factor: NDArray[np.float64] | None = None

    def __post_init__(self) -> None:
        if self.dim < 1:
            raise ValueError(f"dim must be >= 1, got {self.dim}.")
        if self.kind not in ("diag", "full"):
            raise ValueError(f"kind must be 'diag' or 'full', got {self.kind!r}.")
        self.mean = np.asarray(self.mean, dtype=np.float64)
        self.covariance = np.asarray(self.covariance, dtype=np.float64)
        if self.mean.shape != (self.dim,):
            raise ValueError(f"mean must have shape ({self.dim},), got {self.mean.shape}.")
        expected = (self.dim,) if self.kind == "diag" else (self.dim, self.dim)
        if self.covariance.shape != expected:
            raise ValueError(f"covariance must have shape {expected} for kind={self.kind!r}, got {self.covariance.shape}.")

    @property
    def is_diagonal(self) -> bool:
        return self.kind == "diag"

    @property
    def is_factorized(self) -> bool:
        return self.sampling_factor is not None

    def covariance_matrix(self) -> NDArray[np.float64]:
        """Return the dense symmetric covariance matrix of shape ``(dim, dim)``."""
        if self.is_diagonal:
            return np.diag(self.covariance)
        lower = np.tril(self.covariance)
        return lower + np.tril(lower, k=-1).T

    def lower_triangle_rows(self) -> list[NDArray[np.float64]]:
        """Rows of the covariance as listed in a model file (row i has i+1 entries)."""
        return [self.covariance[i, : i + 1].copy() for i in range(self.dim)]

    def __str__(self) -> str:
        return f"GaussianComponent(label='{self.label}', dim={self.dim}, kind={self.kind}, prior={self.prior_weight:g})"


def _format_row(values: Iterable[float]) -> str:
    return " ".join(f"{float(v):10f}" for v in values)


def format_component(component: GaussianComponent) -> str:
    """Serialize a component into the model-file grammar.

    Args:
        component: Component to write.

    Returns:
        Text block terminated by a newline, readable by
        :class:`gaussian_oracle.parsing.ModelParser`.
    """
    kind_token = "Diag" if component.is_diagonal else "Full"
    lines = [
        f"GAUSS {component.label} {component.dim} {kind_token} {component.prior_weight:f}",
        _format_row(component.mean),
    ]
    if component.is_diagonal:
        lines.append(_format_row(component.covariance))
    else:
        lines.extend(_format_row(row) for row in component.lower_triangle_rows())
    return "\n".join(lines) + "\n"


def write_components(components: Iterable[GaussianComponent], stream: TextIO) -> None:
    """Write several components to ``stream``, one block after another."""
    for component in components:
        stream.write(format_component(component))
