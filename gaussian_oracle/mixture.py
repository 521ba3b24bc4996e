# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Prior normalization and stochastic assignment of points to components.

Normalization adds the same residual ``(1 - sum(priors)) / n_components`` to
every component, including those with an explicit prior. With all priors
omitted this gives equal probabilities; with a mix of explicit and omitted
priors the explicit ones also receive a share of the residual.

Example:
    priors ``[0.5, 0.0]`` → residual ``0.25`` → ``[0.75, 0.25]``
    (not ``[0.5, 0.5]``).
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from gaussian_oracle.model import GaussianComponent
from gaussian_oracle.sampling import PolarNormalGenerator, sample_component

__all__ = [
    "normalize_priors",
    "assign_component",
    "sample_mixture",
]


def normalize_priors(components: Sequence[GaussianComponent]) -> NDArray[np.float64]:
    """Spread the missing probability mass evenly over all components.

    The components' ``prior_weight`` attributes are updated in place.

    Args:
        components: Mixture components in parse order (non-empty).

    Returns:
        The normalized priors, shape ``(n_components,)``.

    Raises:
        ValueError: If ``components`` is empty.
    """
    if not components:
        raise ValueError("At least one component is required to normalize priors.")
    total = sum(c.prior_weight for c in components)
    residual = (1.0 - total) / len(components)
    for component in components:
        component.prior_weight += residual
    return np.array([c.prior_weight for c in components], dtype=np.float64)


def assign_component(priors: Sequence[float], p: float) -> int:
    """Index of the component selected by the uniform draw ``p``.

    Walks the priors accumulating a running sum and returns the first index
    whose running sum exceeds ``p``. The last index is returned once reached,
    whatever the running sum, so floating-point shortfall never leaves a draw
    unassigned.
    """
    running = 0.0
    last = len(priors) - 1
    for j, weight in enumerate(priors):
        running += weight
        if running > p or j == last:
            return j
    raise ValueError("priors must not be empty.")


def sample_mixture(
    components: Sequence[GaussianComponent],
    n_samples: int,
    rng: np.random.Generator,
    normal: PolarNormalGenerator | None = None,
) -> tuple[NDArray[np.float64], NDArray[np.int64]]:
    """Assign and sample ``n_samples`` points from factorized components.

    For each point a uniform ``p`` in ``[0, 1)`` picks the component (see
    :func:`assign_component`), then the component is sampled. Both use the
    same ``rng`` in strict sequence.

    Args:
        components: Factorized components with normalized priors.
        n_samples: Number of points to generate.
        rng: NumPy random Generator.
        normal: Normal-deviate generator; a new one on ``rng`` if None.

    Returns:
        tuple:
            samples: Array of shape ``(n_samples, dim)``.
            labels: Component index per point, shape ``(n_samples,)``.
    """
    if not components:
        raise ValueError("At least one component is required for sampling.")
    if normal is None:
        normal = PolarNormalGenerator(rng)

    priors = [c.prior_weight for c in components]
    dim = components[0].dim
    samples = np.empty((n_samples, dim), dtype=np.float64)
    labels = np.empty(n_samples, dtype=np.int64)
    for i in range(n_samples):
        j = assign_component(priors, float(rng.random()))
        labels[i] = j
        samples[i] = sample_component(components[j], normal)
    return samples, labels
