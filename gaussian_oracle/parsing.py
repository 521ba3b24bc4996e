# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Reading Gaussian mixture components from a text model file.

Grammar
-------
Tokens are whitespace-delimited, one record per line::

    GAUSS <label> <dim> [Diag|Full] [<prior>]
    <mean_1> ... <mean_dim>
    <var_1> ... <var_dim>                  # Diag
    <cov_1,1>                              # Full, row i has i+1 fields
    <cov_2,1> <cov_2,2>
    ...

Scanning rules
--------------
* Lines before a ``GAUSS`` header are skipped, whatever they contain.
* ``<dim>`` is read like C ``atoi`` (leading integer); a header whose dim does
  not give a positive integer is discarded and scanning resumes.
* The kind token selects ``diag`` when it starts with ``D``; anything else, or
  no token at all, selects ``full``.
* ``<prior>`` is read like C ``atof``; if absent the prior is ``0.0``.
* Every vector (mean, variances, each covariance row) is the first following
  line consisting of exactly the expected number of numeric fields. Other
  lines are skipped, so comments and blank lines may precede data.

A missing vector after a valid header is a :class:`ModelFormatError`; the
stream ending before any header simply ends the iteration.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

import numpy as np
from numpy.typing import NDArray

from gaussian_oracle.exceptions import ModelFormatError
from gaussian_oracle.model import CovarianceKind, GaussianComponent

__all__ = [
    "HEADER_TOKEN",
    "ModelParser",
    "read_vector",
    "parse_components",
    "load_components",
]

logger = logging.getLogger(__name__)

HEADER_TOKEN = "GAUSS"

_LEADING_INT = re.compile(r"[+-]?\d+")
_LEADING_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _atoi(token: str) -> int:
    """Leading integer of ``token``, 0 if there is none."""
    match = _LEADING_INT.match(token)
    return int(match.group()) if match else 0


def _atof(token: str) -> float:
    """Leading float of ``token``, 0.0 if there is none."""
    match = _LEADING_FLOAT.match(token)
    return float(match.group()) if match else 0.0


def _numeric_fields(line: str) -> list[float] | None:
    """All fields of ``line`` as floats, or None if any field is not numeric."""
    values: list[float] = []
    for token in line.split():
        # float() accepts digit grouping ("1_0"), strtod does not
        if "_" in token:
            return None
        try:
            values.append(float(token))
        except ValueError:
            return None
    return values


def read_vector(stream: TextIO, n_fields: int) -> NDArray[np.float64] | None:
    """Return the next line of ``stream`` made of exactly ``n_fields`` numbers.

    Lines with a different field count, or with non-numeric fields, are
    consumed and skipped.

    Args:
        stream: Text stream positioned anywhere.
        n_fields: Required number of numeric fields.

    Returns:
        Array of shape ``(n_fields,)``, or None if the stream ends first.
    """
    for line in stream:
        values = _numeric_fields(line)
        if values is None or len(values) != n_fields:
            continue
        return np.asarray(values, dtype=np.float64)
    return None


class ModelParser:
    """Incremental reader of Gaussian components from a text stream.

    Iterating the parser yields components in file order until the stream is
    exhausted.

    Examples:
        >>> import io
        >>> text = "GAUSS A 2 Diag 1.0\\n0 0\\n1 1\\n"
        >>> [c.label for c in ModelParser(io.StringIO(text))]
        ['A']
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def __iter__(self) -> Iterator[GaussianComponent]:
        while True:
            component = self.read_component()
            if component is None:
                return
            yield component

    # ------------------------------------------------------------------ header

    def _read_header(self) -> tuple[str, int, CovarianceKind, float] | None:
        for line in self.stream:
            tokens = line.split()
            if len(tokens) < 2 or tokens[0] != HEADER_TOKEN:
                continue
            label = tokens[1]
            dim = _atoi(tokens[2]) if len(tokens) > 2 else 0
            if dim < 1:
                logger.debug("Skipping GAUSS %s: invalid dimension.", label)
                continue
            kind: CovarianceKind = "diag" if len(tokens) > 3 and tokens[3].startswith("D") else "full"
            prior = _atof(tokens[4]) if len(tokens) > 4 else 0.0
            return label, dim, kind, prior
        return None

    def _require_vector(self, n_fields: int, label: str, what: str) -> NDArray[np.float64]:
        vector = read_vector(self.stream, n_fields)
        if vector is None:
            raise ModelFormatError(f"GAUSS {label}: missing {what} ({n_fields} numeric fields expected)")
        return vector

    # ------------------------------------------------------------------ public

    def read_component(self) -> GaussianComponent | None:
        """Read the next complete component.

        Returns:
            The component, or None when no further ``GAUSS`` header exists.

        Raises:
            ModelFormatError: If the mean or a covariance row is missing, or if
                the prior weight is negative.
        """
        logger.debug("Reading Gaussian...")
        header = self._read_header()
        if header is None:
            logger.debug("no more gaussians.")
            return None

        label, dim, kind, prior = header
        logger.info("label=%s dim=%d type=%s", label, dim, "Diag" if kind == "diag" else "Full")
        if prior < 0.0:
            raise ModelFormatError(f"GAUSS {label}: prior weight must be non-negative, got {prior}")

        logger.debug("mean...")
        mean = self._require_vector(dim, label, "mean")

        logger.debug("covariance matrix...")
        if kind == "diag":
            covariance = self._require_vector(dim, label, "variances")
        else:
            covariance = np.zeros((dim, dim), dtype=np.float64)
            for i in range(dim):
                covariance[i, : i + 1] = self._require_vector(i + 1, label, f"covariance row {i + 1}")

        logger.debug("end GAUSS.")
        return GaussianComponent(
            label=label,
            dim=dim,
            kind=kind,
            mean=mean,
            covariance=covariance,
            prior_weight=prior,
        )


def parse_components(text: str) -> list[GaussianComponent]:
    """Parse every component contained in ``text``."""
    return list(ModelParser(io.StringIO(text)))


def load_components(source: str | Path | TextIO) -> list[GaussianComponent]:
    """Load every component from a file path or an open text stream.

    Args:
        source: Path to a model file, or a readable text stream.

    Returns:
        Components in file order (possibly empty).

    Raises:
        OSError: If a path cannot be opened.
        ModelFormatError: If a component is truncated or malformed.
    """
    if isinstance(source, (str, Path)):
        with open(source, encoding="utf-8") as f:
            return list(ModelParser(f))
    return list(ModelParser(source))
