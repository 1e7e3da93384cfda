import argparse
import logging
from pathlib import Path

from .config import Config
from .logging_config import configure_logging
from .pipeline import GrahamScanConfig
from .pipeline import run_random
from .polar_sort import SORT_STRATEGIES

logger = logging.getLogger("graham_hull")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graham-hull",
        description="Convex hull and hull diameter of a random 2D point set.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "config_path",
        type=Path,
        nargs="?",
        default=None,
        help="Path to a config.yaml file (defaults to the packaged one).",
    )
    parser.add_argument("--points", type=int, help="Number of random points.")
    parser.add_argument("--bound", type=float, help="Half-width of the sampling square.")
    parser.add_argument("--seed", type=int, help="Random seed (default: current time).")
    parser.add_argument(
        "--sort-strategy",
        choices=sorted(SORT_STRATEGIES),
        help="Polar-angle sort strategy.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    cfg = Config.load(args.config_path)
    points_cfg = cfg['points']
    log_cfg = cfg['logging']

    configure_logging(
        level=args.log_level or log_cfg['level'],
        fmt=log_cfg['format'],
        datefmt=log_cfg['datefmt'],
        log_file=log_cfg['file'],
    )

    scan_config = GrahamScanConfig.from_config(cfg)
    if args.sort_strategy:
        scan_config.sort_strategy = args.sort_strategy

    count = args.points if args.points is not None else points_cfg['count']
    bound = args.bound if args.bound is not None else points_cfg['bound']
    seed = args.seed if args.seed is not None else points_cfg['seed']

    result = run_random(count, bound=bound, seed=seed, config=scan_config)

    first, second = result.diameter.endpoints(result.cloud, result.hull)
    logger.info("Hull vertices: %d of %d points", len(result), len(result.cloud))
    logger.info(
        "Diameter: (%.6f, %.6f) <-> (%.6f, %.6f), distance %.6f",
        first.x,
        first.y,
        second.x,
        second.y,
        result.diameter.distance,
    )
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except Exception as e:
        logger.exception("An error occurred: %s", e)
        raise SystemExit(1)


if __name__ == "__main__":
    raise SystemExit(main())
