"""
Configuration settings for curve sampling and export.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
at construction, so a bad value fails immediately with the name of the
variable that caused it instead of surfacing later as an odd-looking curve.

The scalar functions in mathf.scalar take no configuration at all; settings
only drive the inspection tooling (mathf.analytics.curves, mathf.data.io and
the actions/ scripts): where CSV files go, and the default sampling grid.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (no-op when the file does not exist)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class CurveSettings:
    """
    Configuration for sampling scalar functions into curve tables.

    **Conceptual**: A curve table evaluates one or more functions on a shared,
    evenly spaced x grid. These settings hold the default grid and the
    output location used by actions/export_mathf_curves.py. Command-line
    flags override them per run.

    Attributes:
        results_dir: Directory where curve CSVs are written (default data/results).
        num_samples: Number of grid points, including both endpoints.
                    Must be at least 2.
        start: First x value of the grid (default -4.0).
        stop: Last x value of the grid (default 4.0). Must be greater than start.
        float_format: printf-style format used when writing floats to CSV.
    """
    results_dir: Path = Path("data/results")
    num_samples: int = 201
    start: float = -4.0
    stop: float = 4.0
    float_format: str = "%.10g"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.num_samples < 2:
            raise ValueError(
                f"MATHF_NUM_SAMPLES must be at least 2, got: {self.num_samples}"
            )
        if not self.start < self.stop:
            raise ValueError(
                f"MATHF_SAMPLE_START ({self.start}) must be less than "
                f"MATHF_SAMPLE_STOP ({self.stop})."
            )
        if not self.float_format:
            raise ValueError("MATHF_FLOAT_FORMAT must not be empty.")

    @classmethod
    def from_env(cls) -> "CurveSettings":
        """
        Load curve settings from environment variables.

        **Environment variables** (all optional):
          - MATHF_RESULTS_DIR: Output directory. Defaults to "data/results".
          - MATHF_NUM_SAMPLES: Grid size. Defaults to 201.
          - MATHF_SAMPLE_START: First x value. Defaults to -4.0.
          - MATHF_SAMPLE_STOP: Last x value. Defaults to 4.0.
          - MATHF_FLOAT_FORMAT: CSV float format. Defaults to "%.10g".

        Returns:
            CurveSettings object with values loaded from environment.

        Raises:
            ValueError: If a variable cannot be parsed or fails validation.

        Usage example:
            >>> # In .env file:
            >>> # MATHF_NUM_SAMPLES=1001
            >>> # MATHF_SAMPLE_START=-720
            >>> # MATHF_SAMPLE_STOP=720
            >>>
            >>> settings = CurveSettings.from_env()
            >>> print(settings.num_samples)  # 1001
        """
        results_dir = os.getenv("MATHF_RESULTS_DIR", "data/results")
        num_samples_str = os.getenv("MATHF_NUM_SAMPLES", "201")
        start_str = os.getenv("MATHF_SAMPLE_START", "-4.0")
        stop_str = os.getenv("MATHF_SAMPLE_STOP", "4.0")
        float_format = os.getenv("MATHF_FLOAT_FORMAT", "%.10g")

        try:
            num_samples = int(num_samples_str)
        except ValueError:
            raise ValueError(
                f"MATHF_NUM_SAMPLES must be an integer, got: {num_samples_str}"
            )

        try:
            start = float(start_str)
        except ValueError:
            raise ValueError(
                f"MATHF_SAMPLE_START must be a number, got: {start_str}"
            )

        try:
            stop = float(stop_str)
        except ValueError:
            raise ValueError(
                f"MATHF_SAMPLE_STOP must be a number, got: {stop_str}"
            )

        return cls(
            results_dir=Path(results_dir),
            num_samples=num_samples,
            start=start,
            stop=stop,
            float_format=float_format,
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the mathf tooling.

    **Usage pattern**:
      ```python
      from mathf.config.settings import get_settings

      settings = get_settings()
      grid_size = settings.curves.num_samples
      ```

    Attributes:
        curves: Curve sampling and export settings.
    """
    curves: CurveSettings = field(default_factory=CurveSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Raises:
            ValueError: If any subsystem settings fail to parse or validate.
        """
        return cls(curves=CurveSettings.from_env())


# Loaded lazily on first get_settings() call. Tests construct Settings directly
# or call reset_settings() after changing the environment.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If environment variables are invalid.
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = Settings.from_env()
    return _default_settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _default_settings
    _default_settings = None
