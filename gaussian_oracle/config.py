# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Configuration model for a generation run."""

from __future__ import annotations

import warnings
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

__all__ = [
    "DEFAULT_N_POINTS",
    "DEFAULT_N_QUERIES",
    "DEFAULT_PORT",
    "GeneratorConfig",
]

DEFAULT_N_POINTS = 100
DEFAULT_N_QUERIES = 10
DEFAULT_PORT = 5031


class GeneratorConfig(BaseModel):
    """Parameters of one generation run.

    Args:
        n_points: Number of training points (labels visible through the oracle).
        n_queries: Number of query points (labels withheld from field text).
        random_state: Non-negative seed for the NumPy generator. None draws fresh
            entropy.
        model_path: Path of the Gaussian model file. None reads standard input.
        verbose: Write the generated points to standard output.
        trace: Log every step of model loading.
        port: Network port of the benchmark protocol. Parsed and kept for
            completeness; nothing in the generator opens it.

    Examples:
        >>> cfg = GeneratorConfig(n_points=500, n_queries=50, random_state=7, model_path="mix.gauss")
        >>> cfg.n_samples
        550
    """

    model_config = ConfigDict(extra="forbid")

    n_points: int = Field(default=DEFAULT_N_POINTS, ge=0, description="Training set size.")
    n_queries: int = Field(default=DEFAULT_N_QUERIES, ge=0, description="Query set size.")
    random_state: int | None = Field(default=None, ge=0, description="Seed (non-negative).")
    model_path: str | None = Field(default=None, description="Model file (None = stdin).")
    verbose: bool = True
    trace: bool = False
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)

    @field_validator("model_path")
    @classmethod
    def _validate_model_path(cls, v: str | None) -> str | None:
        """Treat an empty string or ``-`` as standard input."""
        if v is None or v.strip() in ("", "-"):
            return None
        return v

    @model_validator(mode="after")
    def _warn_empty_run(self):
        if self.n_samples == 0:
            warnings.warn(
                "[GeneratorConfig] n_points and n_queries are both 0; the dataset will be empty.",
                UserWarning,
            )
        return self

    @property
    def n_samples(self) -> int:
        """Total number of generated points."""
        return self.n_points + self.n_queries

    @classmethod
    def from_yaml(cls, path: str) -> GeneratorConfig:
        """Load from YAML and validate via the same pipeline."""
        import yaml  # local import to keep core dependencies lean

        with open(path, encoding="utf-8") as f:
            raw_config: dict[str, Any] = yaml.safe_load(f) or {}
        return cls.model_validate(raw_config)

    def __str__(self) -> str:
        source = self.model_path or "<stdin>"
        return f"GeneratorConfig(n_points={self.n_points}, n_queries={self.n_queries}, seed={self.random_state}, model={source})"
