# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Read-only query surface over a generated dataset.

An external nearest-neighbor benchmark asks the oracle for the partition
sizes, for the text of individual fields, and for Euclidean distances.

Fields of point ``p``:
    * field 0: the component index as a decimal string for training points,
      ``"?"`` for query points;
    * field ``k >= 1``: coordinate ``k - 1`` formatted as ``%f``.

Out-of-range indices never raise: :meth:`Oracle.field` returns None and
:meth:`Oracle.distance` returns ``-1.0``, both after logging a warning.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from gaussian_oracle.dataset import Dataset

__all__ = ["Oracle", "UNDEFINED_DISTANCE", "UNKNOWN_LABEL"]

logger = logging.getLogger(__name__)

UNDEFINED_DISTANCE = -1.0
UNKNOWN_LABEL = "?"


class Oracle:
    """Bounded positional queries over an immutable :class:`Dataset`.

    The oracle holds no mutable state, so one instance may serve concurrent
    callers.
    """

    def __init__(self, dataset: Dataset) -> None:
        self.dataset = dataset

    def __len__(self) -> int:
        return self.dataset.n_total

    def __repr__(self) -> str:
        d = self.dataset
        return f"Oracle(n_points={d.n_points}, n_queries={d.n_queries}, dim={d.dim})"

    @property
    def dim(self) -> int:
        return self.dataset.dim

    def _valid_point(self, p: int) -> bool:
        return 0 <= p < self.dataset.n_total

    def point_count(self) -> int:
        """Training set size."""
        return self.dataset.n_points

    def query_count(self) -> int:
        """Query set size."""
        return self.dataset.n_queries

    def field_count(self, p: int) -> int:
        """``dim + 1`` for a valid point index, 0 otherwise."""
        if not self._valid_point(p):
            return 0
        return self.dim + 1

    def field(self, p: int, f: int) -> str | None:
        """Text of field ``f`` of point ``p``, or None if either is out of range."""
        if not self._valid_point(p):
            logger.warning("undefined point %d", p)
            return None
        if not 0 <= f <= self.dim:
            logger.warning("undefined field %d", f)
            return None
        if f == 0:
            if p >= self.dataset.n_points:
                return UNKNOWN_LABEL
            return str(int(self.dataset.labels[p]))
        return f"{self.dataset.samples[p, f - 1]:f}"

    def distance(self, p1: int, p2: int) -> float:
        """Euclidean distance between two points, ``-1.0`` if an index is out of range."""
        for p in (p1, p2):
            if not self._valid_point(p):
                logger.warning("undefined point %d", p)
                return UNDEFINED_DISTANCE
        if p1 == p2:
            return 0.0
        diff = self.dataset.samples[p1] - self.dataset.samples[p2]
        return math.sqrt(float(np.dot(diff, diff)))
