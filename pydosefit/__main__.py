"""Open the fitting explorer: ``python -m pydosefit``."""

from __future__ import annotations

import argparse

from pydosefit._logging import get_logger, set_log_level
from pydosefit.fitting import DEFAULT_GRID, SamplingGrid
from pydosefit.models import list_variants
from pydosefit.session import FitSession

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pydosefit",
        description="Fit a dose-response model to synthetic knockdown data by eye.",
    )
    parser.add_argument("--model", choices=list_variants(), default="Emax")
    parser.add_argument("--dose-max", type=float, default=DEFAULT_GRID.dose_max)
    parser.add_argument("--n-points", type=int, default=DEFAULT_GRID.n_points)
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="print the fit report for the default parameters and exit",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level:
        set_log_level(args.log_level)

    try:
        grid = SamplingGrid(dose_max=args.dose_max, n_points=args.n_points)
    except ValueError as exc:
        parser.error(str(exc))
    session = FitSession(model=args.model, grid=grid)
    logger.info("starting %s session, %d-point grid over [0, %g]", args.model, grid.n_points, grid.dose_max)

    if args.summary:
        print(session.evaluate().summary())
        return 0

    from pydosefit.viz import FitExplorer

    FitExplorer(session).show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
