# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Generation of a labeled point set from a Gaussian mixture model."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

import numpy as np

from .config import GeneratorConfig
from .dataset import Dataset
from .exceptions import DimensionMismatchError, ModelFormatError
from .factorization import factorize_component
from .mixture import normalize_priors, sample_mixture
from .model import GaussianComponent
from .oracle import Oracle
from .parsing import load_components
from .sampling import PolarNormalGenerator

__all__ = [
    "check_dimensions",
    "generate_dataset",
    "build_oracle",
]

logger = logging.getLogger(__name__)


def check_dimensions(components: Sequence[GaussianComponent]) -> int:
    """Return the common dimension of all components.

    Raises:
        ModelFormatError: If ``components`` is empty.
        DimensionMismatchError: For the first component whose dimension
            differs from the first one.
    """
    if not components:
        raise ModelFormatError("couldn't read any model")
    dim = components[0].dim
    for component in components[1:]:
        if component.dim != dim:
            raise DimensionMismatchError(component.label, component.dim, dim)
    return dim


# =================
# Public generator
# =================
def generate_dataset(
    cfg: GeneratorConfig,
    components: Sequence[GaussianComponent] | None = None,
    rng: np.random.Generator | None = None,
) -> Dataset:
    """Load, factorize and sample a mixture into a :class:`Dataset`.

    Args:
        cfg: Run configuration.
        components: Components to use instead of reading ``cfg.model_path``.
            They are factorized and their priors normalized in place.
        rng: Generator to draw from. Defaults to
            ``np.random.default_rng(cfg.random_state)``.

    Returns:
        Dataset with ``cfg.n_points`` training and ``cfg.n_queries`` query
        points, in generation order.

    Raises:
        OSError: If the model file cannot be opened.
        ModelFormatError: If the model is empty, truncated or mixes dimensions.
        NotPositiveSemiDefiniteError: If a covariance cannot be factorized.
    """
    # ================================================================
    # STEP 1: Load components
    # ================================================================
    if components is None:
        source = cfg.model_path if cfg.model_path is not None else sys.stdin
        components = load_components(source)
    components = list(components)
    dim = check_dimensions(components)

    # ================================================================
    # STEP 2: Factorize covariances
    # ================================================================
    for component in components:
        factorize_component(component)

    # ================================================================
    # STEP 3: Normalize priors and sample
    # ================================================================
    priors = normalize_priors(components)
    logger.info("Data generation: %d components, dim=%d, %d points.", len(components), dim, cfg.n_samples)

    rng_global = rng if rng is not None else np.random.default_rng(cfg.random_state)
    samples, labels = sample_mixture(
        components,
        cfg.n_samples,
        rng=rng_global,
        normal=PolarNormalGenerator(rng_global),
    )

    return Dataset(
        samples=samples,
        labels=labels,
        n_points=cfg.n_points,
        n_queries=cfg.n_queries,
        component_labels=[c.label for c in components],
        priors=[float(p) for p in priors],
        random_state=cfg.random_state,
    )


def build_oracle(
    cfg: GeneratorConfig,
    components: Sequence[GaussianComponent] | None = None,
) -> Oracle:
    """Generate a dataset and wrap it in an :class:`Oracle`."""
    return Oracle(generate_dataset(cfg, components=components))
