# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Gaussian mixture oracle main package."""

from .config import GeneratorConfig
from .dataset import Dataset
from .exceptions import (
    DimensionMismatchError,
    GaussianOracleError,
    ModelFormatError,
    NotPositiveSemiDefiniteError,
)
from .factorization import cholesky_lower, factorize_component
from .generator import build_oracle, generate_dataset
from .mixture import normalize_priors
from .model import GaussianComponent, format_component, write_components
from .oracle import Oracle
from .parsing import ModelParser, load_components, parse_components
from .sampling import PolarNormalGenerator, sample_component

__all__ = [
    "GeneratorConfig",
    "GaussianComponent",
    "Dataset",
    "Oracle",
    "ModelParser",
    "PolarNormalGenerator",
    "parse_components",
    "load_components",
    "format_component",
    "write_components",
    "cholesky_lower",
    "factorize_component",
    "normalize_priors",
    "sample_component",
    "generate_dataset",
    "build_oracle",
    "GaussianOracleError",
    "ModelFormatError",
    "DimensionMismatchError",
    "NotPositiveSemiDefiniteError",
]
