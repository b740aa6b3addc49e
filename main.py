#!/usr/bin/env python3
"""
Main script for fitting trend lines to a CSV point series.
"""

# Pipeline overview:
# 1) Load two numeric columns from a CSV as (x, y) points.
# 2) Fit an ordinary least-squares ("quick") line and report R^2.
# 3) Fit a Theil-Sen ("robust") line with its 95% confidence interval.
# 4) Export a summary table, per-point predictions, and a trend plot.

import argparse
import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("trend_analysis.log", mode="w"),
    ],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from trend import (
    TrendError,
    add_predictions,
    create_trend_dataframe,
    load_points_csv,
    plot_trends,
    points_to_frame,
    quick,
    robust,
    save_trends_to_csv,
)

DEFAULT_OUTPUT_DIR = "output"


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for script execution."""
    parser = argparse.ArgumentParser(
        description="Fit quick (OLS) and robust (Theil-Sen) trend lines to CSV data."
    )
    parser.add_argument("--input", required=True, help="Path to input CSV file.")
    parser.add_argument("--x-col", default="x", help="Column holding x values (default: x).")
    parser.add_argument("--y-col", default="y", help="Column holding y values (default: y).")
    parser.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--no-plots", action="store_true", help="Skip writing the trend figure."
    )
    return parser


def main(argv=None):
    """Main execution function with step timing logs."""
    args = _build_arg_parser().parse_args(argv)

    start_time = time.time()
    logging.info("Initializing trend analysis pipeline")

    points = load_points_csv(args.input, x_col=args.x_col, y_col=args.y_col)
    logging.info("Loaded %d points from %s", len(points), args.input)

    trends = {}

    step_start = time.time()
    try:
        trends["quick"] = quick(points)
    except TrendError as e:
        logging.error("Quick fit failed: %s", e)
    else:
        logging.info(
            "Quick fit: slope=%.6g intercept=%.6g R^2=%.4f (%.2f seconds)",
            trends["quick"].line.slope,
            trends["quick"].line.intercept,
            trends["quick"].goodness_of_fit(),
            time.time() - step_start,
        )

    step_start = time.time()
    try:
        trends["robust"] = robust(points)
    except TrendError as e:
        logging.error("Robust fit failed: %s", e)
    else:
        lower, upper = trends["robust"].confidence_interval()
        logging.info(
            "Robust fit: slope=%.6g intercept=%.6g, 95%% slope interval [%.6g, %.6g] (%.2f seconds)",
            trends["robust"].line.slope,
            trends["robust"].line.intercept,
            lower.slope,
            upper.slope,
            time.time() - step_start,
        )

    if not trends:
        logging.error("No trend could be fitted. Terminating execution.")
        return 1

    os.makedirs(args.outdir, exist_ok=True)
    logging.info("Output directory ensured: %s", args.outdir)

    summary_csv = save_trends_to_csv(create_trend_dataframe(trends), args.outdir)

    primary = trends.get("robust", trends.get("quick"))
    predictions = add_predictions(points_to_frame(points), primary)
    predictions_csv = os.path.join(args.outdir, "trend_predictions.csv")
    predictions.to_csv(predictions_csv, index=False)

    plot_path = None
    if not args.no_plots:
        plot_path = plot_trends(
            points,
            quick_trend=trends.get("quick"),
            robust_trend=trends.get("robust"),
            output_dir=args.outdir,
            xlabel=args.x_col,
            ylabel=args.y_col,
        )

    total_duration = time.time() - start_time
    logging.info("Total execution time: %.2f seconds", total_duration)
    logging.info("Analysis pipeline completed successfully")
    logging.info("Generated output files:")
    logging.info("  - Trend summary CSV: %s", summary_csv)
    logging.info("  - Predictions CSV: %s", predictions_csv)
    if plot_path:
        logging.info("  - Trend plot: %s", plot_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
