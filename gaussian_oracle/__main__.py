# Copyright (c) 2025 Sigrun May,
# Ostfalia Hochschule für angewandte Wissenschaften
#
# This software is distributed under the terms of the MIT license
# which is available at https://opensource.org/licenses/MIT

"""Command line interface for dataset generation."""

from __future__ import annotations
import argparse, logging, sys
from .config import GeneratorConfig
from .exceptions import GaussianOracleError
from .generator import generate_dataset
from .utils.export_utils import to_csv, write_points

PROG = "gaussian-oracle"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(PROG, description="Sample a labeled point set from a mixture of Gaussians.")
    ap.add_argument("--config", default=None, help="YAML config path (base values)")
    ap.add_argument("-n", "--n-points", type=int, default=None, help="number of training (data) samples (default 100)")
    ap.add_argument("-q", "--n-queries", type=int, default=None, help="number of test samples (queries) (default 10)")
    ap.add_argument("--seed", type=int, default=None, help="seed for any randomization")
    ap.add_argument("--gauss", default=None, help="filename of Gaussians (default stdin)")
    ap.add_argument("--port", type=int, default=None, help="port number to use (default 5031)")
    ap.add_argument("--trace", action="store_true", help="log every step of model loading")
    ap.add_argument("--verbose-log", action="store_true", help="log progress messages")
    ap.add_argument("--quiet", action="store_true", help="do not print the generated points")
    ap.add_argument("--out", default=None, help="CSV output (optional)")
    return ap


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        raw = GeneratorConfig.from_yaml(args.config).model_dump() if args.config else {}
        overrides = {
            "n_points": args.n_points,
            "n_queries": args.n_queries,
            "random_state": args.seed,
            "model_path": args.gauss,
            "port": args.port,
        }
        raw.update({k: v for k, v in overrides.items() if v is not None})
        if args.trace:
            raw["trace"] = True
        if args.quiet:
            raw["verbose"] = False
        cfg = GeneratorConfig.model_validate(raw)

        level = logging.DEBUG if cfg.trace else logging.INFO if args.verbose_log else logging.WARNING
        logging.basicConfig(level=level, stream=sys.stderr, format=f"{PROG}: %(message)s")
        logging.getLogger(__package__).debug("%s, port %d", cfg, cfg.port)

        dataset = generate_dataset(cfg)
    except (GaussianOracleError, OSError, ValueError) as exc:
        ap.exit(1, f"{PROG}: {exc}\n")

    if cfg.verbose:
        write_points(dataset, sys.stdout)
    if args.out:
        to_csv(dataset, args.out, index=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
