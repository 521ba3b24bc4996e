# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Export utilities for generated point sets."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

import pandas as pd

from gaussian_oracle.dataset import Dataset
from gaussian_oracle.oracle import UNKNOWN_LABEL

__all__ = [
    "format_points",
    "write_points",
    "to_dataframe",
    "to_csv",
]


def format_points(dataset: Dataset) -> Iterator[str]:
    """Yield one line per point: space-separated ``%f`` coordinates.

    Lines follow generation order, training points first.
    """
    for row in dataset.samples:
        yield " ".join(f"{x:f}" for x in row)


def write_points(dataset: Dataset, stream: TextIO) -> None:
    """Write :func:`format_points` lines to ``stream``."""
    for line in format_points(dataset):
        stream.write(line + "\n")


def to_dataframe(
    dataset: Dataset,
    *,
    mask_queries: bool = True,
    label_col_name: str = "label",
    partition_col_name: str = "partition",
) -> pd.DataFrame:
    """Convert a dataset to a DataFrame.

    Columns are ``x1 .. x<dim>``, the label column and the partition column
    (``"train"`` / ``"query"``).

    Args:
        dataset: Generated dataset.
        mask_queries: If True, query labels are replaced by ``"?"`` as in the
            oracle's text view, and the label column holds strings.
        label_col_name: Column name for component indices.
        partition_col_name: Column name for the partition tag.

    Returns:
        DataFrame with ``dataset.n_total`` rows.

    Examples:
        >>> df = to_dataframe(dataset)
        >>> df[df.partition == "train"].label.value_counts()
    """
    columns = [f"x{k + 1}" for k in range(dataset.dim)]
    df = pd.DataFrame(dataset.samples, columns=columns)
    is_query = [i >= dataset.n_points for i in range(dataset.n_total)]
    if mask_queries:
        df[label_col_name] = [
            UNKNOWN_LABEL if query else str(int(label)) for label, query in zip(dataset.labels, is_query, strict=True)
        ]
    else:
        df[label_col_name] = dataset.labels
    df[partition_col_name] = ["query" if query else "train" for query in is_query]
    return df


def to_csv(
    dataset: Dataset,
    filepath: str | Path,
    *,
    mask_queries: bool = True,
    **csv_kwargs,
) -> None:
    """Export dataset to CSV file.

    Convenience wrapper around :func:`to_dataframe` + ``DataFrame.to_csv()``.

    Examples:
        >>> to_csv(dataset, "output/points.csv", index=False)
    """
    df = to_dataframe(dataset, mask_queries=mask_queries)
    df.to_csv(filepath, **csv_kwargs)
