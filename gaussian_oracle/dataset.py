# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Generated labeled point set."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Dataset:
    """Labeled points sampled from a Gaussian mixture.

    The first ``n_points`` rows are the training partition, the remaining
    ``n_queries`` rows the query partition. Arrays are read-only once built.

    Attributes:
        samples: Array of shape ``(n_points + n_queries, dim)``.
        labels: Component index per row, shape ``(n_points + n_queries,)``.
        n_points: Training set size.
        n_queries: Query set size.
        component_labels: Component names in parse order (``labels`` index
            into this list).
        priors: Normalized prior weights in parse order.
        random_state: Seed used for generation (None if unseeded).
    """

    samples: NDArray[np.float64]
    labels: NDArray[np.int64]
    n_points: int
    n_queries: int
    component_labels: list[str] = field(default_factory=list)
    priors: list[float] = field(default_factory=list)
    random_state: int | None = None

    def __post_init__(self) -> None:
        samples = np.array(self.samples, dtype=np.float64)
        labels = np.array(self.labels, dtype=np.int64)
        if samples.ndim != 2:
            raise ValueError(f"samples must be 2-D, got shape {samples.shape}.")
        if labels.shape != (samples.shape[0],):
            raise ValueError(f"labels must have shape ({samples.shape[0]},), got {labels.shape}.")
        if self.n_points < 0 or self.n_queries < 0:
            raise ValueError("n_points and n_queries must be >= 0.")
        if self.n_points + self.n_queries != samples.shape[0]:
            raise ValueError(
                f"n_points + n_queries = {self.n_points + self.n_queries}, "
                f"but samples has {samples.shape[0]} rows."
            )
        samples.setflags(write=False)
        labels.setflags(write=False)
        # frozen dataclass
        object.__setattr__(self, "samples", samples)
        object.__setattr__(self, "labels", labels)

    @property
    def dim(self) -> int:
        return int(self.samples.shape[1])

    @property
    def n_total(self) -> int:
        return self.n_points + self.n_queries

    @property
    def train_samples(self) -> NDArray[np.float64]:
        return self.samples[: self.n_points]

    @property
    def query_samples(self) -> NDArray[np.float64]:
        return self.samples[self.n_points :]

    def samples_per_component(self) -> dict[int, int]:
        """Number of points assigned to each component index."""
        n_components = max(len(self.component_labels), int(self.labels.max()) + 1 if self.labels.size else 0)
        counts = np.bincount(self.labels, minlength=n_components)
        return {int(k): int(counts[k]) for k in range(n_components)}

    def to_dict(self) -> dict[str, object]:
        """Convert to a plain dictionary (e.g., for JSON serialization)."""
        d = asdict(self)
        d["samples"] = self.samples.tolist()
        d["labels"] = self.labels.tolist()
        return d
