"""
CSV reader and writer for curve tables, with schema enforcement.

**Conceptual**: A curve table (see mathf.analytics.curves) is written to disk
as a plain CSV: an `x` column followed by one column per sampled function.
Every read and write passes through validate_curve_schema() so a file that
was hand-edited, truncated or produced by another tool is rejected with a
clear message instead of being silently misread.

**Schema**:
  - Column `x` is present and is the first column.
  - At least one function column follows it.
  - Every column is numeric (nan/inf values are allowed, they are legitimate
    outputs of the scalar functions).
  - `x` is strictly ascending with no missing values.
"""

from pathlib import Path

import pandas as pd

CURVE_X_COLUMN = "x"


class CurveSchemaError(Exception):
    """
    Raised when a DataFrame does not conform to the curve table schema.

    The message includes the context (usually the file path) and the specific
    violation.
    """
    pass


def validate_curve_schema(df: pd.DataFrame, context: str | None = None) -> None:
    """
    Validate that a DataFrame is a well-formed curve table.

    Args:
        df: DataFrame to validate.
        context: Optional description (e.g. file path) included in errors.

    Raises:
        CurveSchemaError: If any schema rule is violated.
    """
    where = f" in {context}" if context else ""

    if CURVE_X_COLUMN not in df.columns:
        raise CurveSchemaError(
            f"Missing required column '{CURVE_X_COLUMN}'{where}. "
            f"Found columns: {list(df.columns)}"
        )

    if df.columns[0] != CURVE_X_COLUMN:
        raise CurveSchemaError(
            f"Column '{CURVE_X_COLUMN}' must be the first column{where}, "
            f"found '{df.columns[0]}' first."
        )

    if len(df.columns) < 2:
        raise CurveSchemaError(f"Curve table has no function columns{where}.")

    for col in df.columns:
        if not pd.api.types.is_numeric_dtype(df[col]):
            raise CurveSchemaError(
                f"Column '{col}' must be numeric{where}, got dtype {df[col].dtype}."
            )

    x = df[CURVE_X_COLUMN]
    if x.isna().any():
        raise CurveSchemaError(f"Column '{CURVE_X_COLUMN}' contains missing values{where}.")

    if len(x) > 1 and not (x.diff().iloc[1:] > 0).all():
        raise CurveSchemaError(
            f"Column '{CURVE_X_COLUMN}' must be strictly ascending{where}."
        )


def write_curve_csv(
    df: pd.DataFrame,
    path: Path | str,
    float_format: str | None = None,
) -> None:
    """
    Validate and write a curve table to CSV.

    **Functionally**:
    - Validates the schema before anything touches the disk.
    - Creates the parent directory if it doesn't exist.
    - Writes with index=False; nan and inf are written as "nan" / "inf".

    Args:
        df: Curve table to write.
        path: Destination CSV path.
        float_format: Optional printf-style float format (e.g. "%.10g").

    Raises:
        CurveSchemaError: If df is not a valid curve table.
        OSError: If the file can't be written.
    """
    path = Path(path)
    validate_curve_schema(df, context=str(path))

    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, float_format=float_format, na_rep="nan")


def read_curve_csv(path: Path | str) -> pd.DataFrame:
    """
    Read and validate a curve table CSV.

    Args:
        path: CSV path.

    Returns:
        DataFrame with float64 columns.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        CurveSchemaError: If the file is not a valid curve table.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Curve CSV not found: {path}")

    df = pd.read_csv(path)
    validate_curve_schema(df, context=str(path))

    return df.astype("float64")
