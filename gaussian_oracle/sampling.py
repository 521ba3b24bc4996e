# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Standard-normal variates and affine sampling from a Gaussian component.

Normal deviates come from the polar form of the Box–Muller transform
(G. E. P. Box, M. E. Muller, "A note on the generation of random normal
deviates", Ann. Math. Stat. 29, 610-611, 1958): a pair of uniforms on
``(-1, 1)`` is accepted when its squared radius lies in ``(0, 1)`` and yields
two independent deviates. One is returned, the other is kept for the next call.

Reproducibility:
    :class:`PolarNormalGenerator` draws its uniforms from the
    :class:`numpy.random.Generator` it is given. The spare deviate is state of
    the generator object, so every sequential sampling stream needs its own
    instance.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from gaussian_oracle.model import GaussianComponent

__all__ = [
    "PolarNormalGenerator",
    "sample_component",
]


class PolarNormalGenerator:
    """Stateful source of standard-normal deviates (polar Box–Muller).

    Args:
        rng: NumPy random Generator supplying the uniform draws. A fresh
            default generator is created if None.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self._spare: float | None = None

    @property
    def has_spare(self) -> bool:
        return self._spare is not None

    def reset(self) -> None:
        """Drop the cached spare deviate."""
        self._spare = None

    def next(self) -> float:
        """Return one standard-normal deviate."""
        if self._spare is not None:
            value, self._spare = self._spare, None
            return value
        while True:
            v1, v2 = self.rng.uniform(-1.0, 1.0, size=2)
            r = v1 * v1 + v2 * v2
            if 0.0 < r < 1.0:
                break
        fac = math.sqrt(-2.0 * math.log(r) / r)
        self._spare = float(v1 * fac)
        return float(v2 * fac)

    def standard_normal(self, size: int) -> NDArray[np.float64]:
        """Return ``size`` consecutive deviates as an array."""
        return np.fromiter((self.next() for _ in range(size)), dtype=np.float64, count=size)


def sample_component(component: GaussianComponent, normal: PolarNormalGenerator) -> NDArray[np.float64]:
    """Draw one point from ``N(mean, covariance)`` of a factorized component.

    Diagonal: ``x = mean + stddev * z``.
    Full: ``x = mean + L @ z`` with the lower Cholesky factor ``L``.

    Args:
        component: Component with ``sampling_factor`` set.
        normal: Generator of the standard-normal vector ``z``.

    Returns:
        Array of shape ``(component.dim,)``.

    Raises:
        ValueError: If the component has not been factorized.
    """
    if component.sampling_factor is None:
        raise ValueError(f"GAUSS {component.label} must be factorized before sampling.")
    z = normal.standard_normal(component.dim)
    if component.is_diagonal:
        return component.mean + component.sampling_factor * z
    return component.mean + component.sampling_factor @ z
