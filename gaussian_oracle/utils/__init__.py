# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Export helpers for generated datasets."""

from .export_utils import format_points, to_csv, to_dataframe, write_points

__all__ = [
    "format_points",
    "write_points",
    "to_dataframe",
    "to_csv",
]
