"""
Sample scalar functions into curve tables.

**Conceptual**: The functions in mathf.scalar are easiest to reason about by
looking at their shape: ping_pong is a triangle wave, repeat a sawtooth,
round a staircase with even-biased steps, lerp_unclamped a line with a kink
at t = 1. This module evaluates functions over an evenly spaced x grid and
collects the results into a pandas DataFrame (a "curve table") that can be
inspected, plotted or written to CSV via mathf.data.io.

**Functionally**:
  - FUNCTIONS maps each public scalar function to its snake_case name.
  - A CurveSpec names a function, the fixed arguments to pass alongside x,
    and the position x takes in the argument list.
  - build_curve_table() samples every spec over a shared x grid.

Sampling calls the scalar function once per grid point. The functions are
not re-implemented in vectorized numpy, so the table shows exactly what the
scalar API returns, quirks included.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

import numpy as np
import pandas as pd

from mathf import scalar

FUNCTIONS: dict[str, Callable] = {
    "approximately": scalar.approximately,
    "clamp": scalar.clamp,
    "clamp01": scalar.clamp01,
    "closest_power_of_two": scalar.closest_power_of_two,
    "closest_power_of_two_long": scalar.closest_power_of_two_long,
    "delta_angle": scalar.delta_angle,
    "gamma_to_linear_space": scalar.gamma_to_linear_space,
    "inverse_lerp": scalar.inverse_lerp,
    "is_power_of_two": scalar.is_power_of_two,
    "lerp": scalar.lerp,
    "lerp_angle": scalar.lerp_angle,
    "lerp_unclamped": scalar.lerp_unclamped,
    "linear_to_gamma_space": scalar.linear_to_gamma_space,
    "move_towards": scalar.move_towards,
    "next_power_of_two": scalar.next_power_of_two,
    "ping_pong": scalar.ping_pong,
    "repeat": scalar.repeat,
    "round": scalar.round,
    "sign": scalar.sign,
}


@dataclass(frozen=True)
class CurveSpec:
    """
    One function to sample, with its fixed arguments.

    Attributes:
        function: Name of the function in FUNCTIONS.
        args: Fixed arguments, in call order, excluding x.
        arg_index: Position at which x is inserted into args
                  (0 = first argument, len(args) = last).
        label: Column name in the curve table. Defaults to the function name.

    Example:
        >>> # lerp(0, 10, x): x is the third argument
        >>> CurveSpec("lerp", args=(0.0, 10.0), arg_index=2)
        >>> # ping_pong(x, 2.0)
        >>> CurveSpec("ping_pong", args=(2.0,))
    """
    function: str
    args: tuple = ()
    arg_index: int = 0
    label: str | None = None

    @property
    def column(self) -> str:
        return self.label or self.function


# Functions of a single number, sampled as f(x) without fixed arguments
UNARY_FUNCTIONS = frozenset({
    "clamp01",
    "closest_power_of_two",
    "closest_power_of_two_long",
    "gamma_to_linear_space",
    "is_power_of_two",
    "linear_to_gamma_space",
    "next_power_of_two",
    "round",
    "sign",
})

DEFAULT_CURVES: list[CurveSpec] = [
    CurveSpec("ping_pong", args=(2.0,)),
    CurveSpec("repeat", args=(2.0,)),
    CurveSpec("lerp", args=(0.0, 10.0), arg_index=2),
    CurveSpec("lerp_unclamped", args=(0.0, 10.0), arg_index=2),
    CurveSpec("sign"),
    CurveSpec("round"),
    CurveSpec("delta_angle", args=(0.0,)),
    CurveSpec("gamma_to_linear_space"),
    CurveSpec("linear_to_gamma_space"),
]


def get_function(name: str) -> Callable:
    """
    Look up a scalar function by name.

    Raises:
        KeyError: If name is not a known function. The message lists the
                 available names.
    """
    try:
        return FUNCTIONS[name]
    except KeyError:
        raise KeyError(
            f"Unknown function '{name}'. Available functions: {sorted(FUNCTIONS)}"
        )


def sample_function(
    func: Callable,
    xs: Iterable[float],
    *args,
    arg_index: int = 0,
) -> np.ndarray:
    """
    Evaluate a scalar function at every x.

    **Functionally**:
    - For each x, calls `func(*args_with_x)` where x is inserted into `args`
      at position `arg_index`.
    - Results are stored as float64; boolean results become 1.0 / 0.0 and
      nan/inf results are kept as-is.

    Args:
        func: Scalar function taking plain numbers.
        xs: Grid of x values.
        *args: Fixed arguments (excluding x), in call order.
        arg_index: Position of x in the argument list.

    Returns:
        1-D float64 array, one value per x.

    Raises:
        ValueError: If arg_index is outside [0, len(args)].

    Example:
        >>> from mathf.scalar import lerp
        >>> sample_function(lerp, [0.0, 0.5, 1.0], 0.0, 10.0, arg_index=2)
        array([ 0.,  5., 10.])
    """
    if not 0 <= arg_index <= len(args):
        raise ValueError(
            f"arg_index must be between 0 and {len(args)}, got: {arg_index}"
        )

    xs = np.asarray(xs, dtype=np.float64)
    values = np.empty(len(xs), dtype=np.float64)

    for i, x in enumerate(xs):
        call_args = list(args)
        call_args.insert(arg_index, float(x))
        values[i] = func(*call_args)

    return values


def build_curve_table(
    specs: Sequence[CurveSpec],
    start: float,
    stop: float,
    num_samples: int,
) -> pd.DataFrame:
    """
    Sample several functions over a shared, evenly spaced x grid.

    **Functionally**:
    - x = np.linspace(start, stop, num_samples), both endpoints included.
    - One float64 column per spec, named by CurveSpec.column, in spec order.
    - The first column is always "x".

    Args:
        specs: Functions to sample.
        start: First x value.
        stop: Last x value; must be greater than start.
        num_samples: Number of grid points; must be at least 2.

    Returns:
        DataFrame with columns ["x", <spec columns>...].

    Raises:
        ValueError: If specs is empty, the grid is invalid, or two specs
                   share a column name.
        KeyError: If a spec names an unknown function.

    Example:
        >>> table = build_curve_table(
        ...     [CurveSpec("ping_pong", args=(1.0,))], start=0.0, stop=2.0, num_samples=5
        ... )
        >>> table["ping_pong"].tolist()
        [0.0, 0.5, 1.0, 0.5, 0.0]
    """
    if not specs:
        raise ValueError("At least one curve must be specified.")
    if num_samples < 2:
        raise ValueError(f"num_samples must be at least 2, got: {num_samples}")
    if not start < stop:
        raise ValueError(f"start ({start}) must be less than stop ({stop}).")

    columns = [spec.column for spec in specs]
    if "x" in columns:
        raise ValueError("Curve column name 'x' is reserved for the grid.")
    duplicates = sorted({c for c in columns if columns.count(c) > 1})
    if duplicates:
        raise ValueError(f"Curve column names must be unique, got duplicates: {duplicates}")

    xs = np.linspace(start, stop, num_samples)
    table = pd.DataFrame({"x": xs})

    for spec in specs:
        func = get_function(spec.function)
        table[spec.column] = sample_function(func, xs, *spec.args, arg_index=spec.arg_index)

    return table


def select_curves(names: Iterable[str]) -> list[CurveSpec]:
    """
    Pick curves from DEFAULT_CURVES by column name.

    Names that are not default curves may still be any single-argument
    function in UNARY_FUNCTIONS (e.g. "clamp01", "next_power_of_two"),
    sampled as f(x).

    Raises:
        KeyError: If a name is not a known function.
        ValueError: If a name is a known function that needs fixed arguments
                   and has no default curve.
    """
    defaults = {spec.column: spec for spec in DEFAULT_CURVES}
    selected = []

    for name in names:
        if name in defaults:
            selected.append(defaults[name])
            continue

        get_function(name)
        if name not in UNARY_FUNCTIONS:
            raise ValueError(
                f"Function '{name}' takes more than one argument and has no default curve. "
                f"Build a CurveSpec with its fixed arguments instead."
            )
        selected.append(CurveSpec(name))

    return selected
