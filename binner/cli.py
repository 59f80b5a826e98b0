"""
cli.py
Lê números (um por linha) da entrada padrão ou de INPUT e escreve
"<centro>\\t<contagem>" para cada bin, em ordem crescente de centro.
"""
from __future__ import annotations
import sys
import logging
import argparse
from typing import List, Optional

from . import __version__
from .binning_engine import compute_bins
from .reader import open_input, read_values
from .reporting import save_bins_report, write_bins

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="binner",
        description="Read numbers from standard input, output bins and counts",
    )
    parser.add_argument("-w", "--width", dest="bin_width", type=float, default=1.0,
                        metavar="WIDTH", help="Set bin width (default: %(default)s)")
    parser.add_argument("-s", "--start", dest="bin_origin", type=float, default=0.0,
                        metavar="EDGE_START", help="Set bin edge start (default: %(default)s)")
    parser.add_argument("input", nargs="?", default=None, metavar="INPUT",
                        help="Input file (default: standard input)")
    parser.add_argument("--report", metavar="PATH",
                        help="Also save the bin table (.xlsx, .csv or .json)")
    parser.add_argument("--plot", metavar="PATH",
                        help="Also save a bar chart of the bins (e.g. .png)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _save_plot(records, bin_width: float, path: str) -> None:
    import matplotlib
    matplotlib.use("Agg")
    from .reporting import bins_to_frame
    from .visualizations import plot_bins

    ax = plot_bins(bins_to_frame(records), bin_width=bin_width)
    ax.figure.savefig(path)
    logger.info("Gráfico salvo em %s", path)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        with open_input(args.input) as fh:
            values = read_values(fh)
    except OSError as e:
        logger.error("Não foi possível ler '%s': %s", args.input, e)
        return 1

    records = compute_bins(values, args.bin_width, args.bin_origin)
    logger.info("%d valores em %d bins", len(values), len(records))
    write_bins(records, sys.stdout)

    if args.report:
        save_bins_report(records, args.report)
    if args.plot:
        _save_plot(records, args.bin_width, args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
