#!/usr/bin/env python3
"""
Sample mathf scalar functions and save them as a curve table CSV.

**Conceptual**: This script evaluates a set of scalar functions over an evenly
spaced x grid (see mathf.analytics.curves) and writes the result to CSV via
mathf.data.io. The output is handy for eyeballing the exact shape of
ping_pong/repeat/round and friends in a spreadsheet or plotting tool, and for
diffing behaviour between versions.

**Usage**:
    # Sample the default curve set over the configured grid
    python actions/export_mathf_curves.py

    # Sample specific curves
    python actions/export_mathf_curves.py --functions ping_pong,repeat,sign

    # Custom grid and output file
    python actions/export_mathf_curves.py --start -720 --stop 720 --num-samples 1441 \
        --functions delta_angle --output data/results/delta_angle.csv

**Defaults** come from mathf.config.settings (MATHF_* environment variables or
.env); flags override them.

**Outputs**:
  - data/results/mathf_curves.csv (or --output): x plus one column per curve.

**Exit codes**:
  - 0: Success
  - 2: Invalid arguments, settings or curve names
"""

import argparse
import sys
from pathlib import Path

import numpy as np

# Add project root to Python path so we can import mathf
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mathf.analytics.curves import DEFAULT_CURVES, build_curve_table, select_curves
from mathf.config.settings import get_settings
from mathf.data.io import CurveSchemaError, write_curve_csv

DEFAULT_OUTPUT_NAME = "mathf_curves.csv"


def parse_function_names(raw: str | None) -> list[str]:
    """
    Split a comma-separated --functions value into names.

    Returns the default curve names when raw is None.
    """
    if raw is None:
        return [spec.column for spec in DEFAULT_CURVES]
    return [name.strip() for name in raw.split(",") if name.strip()]


def main(argv: list[str] | None = None) -> None:
    """
    Main entry point for the curve export script.

    **Workflow**:
      1. Parse command-line arguments
      2. Load settings from environment
      3. Resolve curve names to CurveSpecs
      4. Sample curves and write CSV
      5. Print summary
    """
    parser = argparse.ArgumentParser(
        description="Sample mathf scalar functions and save them as a curve table CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--functions",
        type=str,
        default=None,
        help="Comma-separated curve names. Default: "
             f"{','.join(spec.column for spec in DEFAULT_CURVES)}",
    )

    parser.add_argument(
        "--start",
        type=float,
        default=None,
        help="First x value. Default: MATHF_SAMPLE_START (-4.0).",
    )

    parser.add_argument(
        "--stop",
        type=float,
        default=None,
        help="Last x value. Default: MATHF_SAMPLE_STOP (4.0).",
    )

    parser.add_argument(
        "--num-samples",
        type=int,
        default=None,
        help="Number of grid points. Default: MATHF_NUM_SAMPLES (201).",
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help=f"Output CSV path. Default: MATHF_RESULTS_DIR/{DEFAULT_OUTPUT_NAME}.",
    )

    args = parser.parse_args(argv)

    # Load settings
    try:
        settings = get_settings().curves
    except ValueError as e:
        print(f"ERROR: Failed to load settings: {e}")
        sys.exit(2)

    start = settings.start if args.start is None else args.start
    stop = settings.stop if args.stop is None else args.stop
    num_samples = settings.num_samples if args.num_samples is None else args.num_samples
    output_path = (
        settings.results_dir / DEFAULT_OUTPUT_NAME if args.output is None else Path(args.output)
    )

    names = parse_function_names(args.functions)
    if not names:
        print("ERROR: No functions specified.")
        sys.exit(2)

    try:
        specs = select_curves(names)
    except (KeyError, ValueError) as e:
        print(f"ERROR: {e}")
        sys.exit(2)

    # Print configuration
    print("=" * 60)
    print("mathf Curve Export")
    print("=" * 60)
    print(f"Curves: {', '.join(spec.column for spec in specs)}")
    print(f"Grid: {num_samples} samples over [{start}, {stop}]")
    print(f"Output: {output_path}")
    print("=" * 60)

    try:
        table = build_curve_table(specs, start=start, stop=stop, num_samples=num_samples)
    except ValueError as e:
        print(f"  ✗ Sampling failed: {e}")
        sys.exit(2)
    print(f"  ✓ Sampled {len(specs)} curve(s) at {len(table)} points")

    try:
        write_curve_csv(table, output_path, float_format=settings.float_format)
    except (CurveSchemaError, OSError) as e:
        print(f"  ✗ Failed to write {output_path}: {e}")
        sys.exit(2)
    print(f"  ✓ Saved curve table: {output_path}")

    # Summarise non-finite output, which is expected for some functions
    # (e.g. linear_to_gamma_space on negative x)
    non_finite = (~np.isfinite(table.iloc[:, 1:])).sum()
    flagged = non_finite[non_finite > 0]
    if not flagged.empty:
        print("  Non-finite values (nan/inf) per curve:")
        for col, count in flagged.items():
            print(f"    {col}: {count}")
    print()


if __name__ == "__main__":
    main()
