# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Basic usage: load a mixture, generate points and query the oracle."""

from __future__ import annotations

from pathlib import Path

from gaussian_oracle import GeneratorConfig, Oracle, generate_dataset
from gaussian_oracle.utils.export_utils import to_csv

MODEL_FILE = Path(__file__).parent / "two_gaussians.gauss"


def main() -> None:
    print("=" * 60)
    print("Basic Usage Example")
    print("=" * 60)

    cfg = GeneratorConfig(n_points=200, n_queries=20, random_state=42, model_path=str(MODEL_FILE))
    dataset = generate_dataset(cfg)
    oracle = Oracle(dataset)

    print(f"\nGenerated dataset with shape {dataset.samples.shape}")
    print(f"Components: {dataset.component_labels}")
    print(f"Normalized priors: {[round(p, 3) for p in dataset.priors]}")

    print("\nPoints per component:")
    for idx, count in dataset.samples_per_component().items():
        print(f"  {idx} ({dataset.component_labels[idx]}): {count}")

    print("\nOracle queries:")
    print(f"  point_count = {oracle.point_count()}, query_count = {oracle.query_count()}")
    print(f"  field_count(0) = {oracle.field_count(0)}")
    print(f"  field(0, 0) = {oracle.field(0, 0)}  (training label)")
    first_query = oracle.point_count()
    print(f"  field({first_query}, 0) = {oracle.field(first_query, 0)}  (query label withheld)")
    print(f"  distance(0, {first_query}) = {oracle.distance(0, first_query):.4f}")

    to_csv(dataset, "basic_points.csv", index=False)
    print("\nSaved points to basic_points.csv")


if __name__ == "__main__":
    main()
