"""
Tests for the curve export action.

**Purpose**: Verify that actions/export_mathf_curves.py writes a valid curve
table, honours flags over settings, and exits with status 2 on bad input.

**Testing philosophy**: Run main() in-process with an explicit argv and point
all output at tmp_path.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path so we can import actions module
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from actions.export_mathf_curves import main, parse_function_names
from mathf.analytics.curves import DEFAULT_CURVES
from mathf.config.settings import reset_settings
from mathf.data.io import read_curve_csv


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Point default output at tmp_path and reload settings for each test."""
    for name in ["MATHF_NUM_SAMPLES", "MATHF_SAMPLE_START", "MATHF_SAMPLE_STOP", "MATHF_FLOAT_FORMAT"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("MATHF_RESULTS_DIR", str(tmp_path / "results"))
    reset_settings()
    yield
    reset_settings()


def test_parse_function_names():
    """Test comma splitting and the default list."""
    assert parse_function_names("ping_pong, repeat,,sign ") == ["ping_pong", "repeat", "sign"]
    assert parse_function_names(None) == [spec.column for spec in DEFAULT_CURVES]


def test_main_writes_default_curves(tmp_path, capsys):
    """Test a run with no flags uses settings for grid and output location."""
    main([])

    output = tmp_path / "results" / "mathf_curves.csv"
    df = read_curve_csv(output)
    assert len(df) == 201
    assert list(df.columns) == ["x"] + [spec.column for spec in DEFAULT_CURVES]
    assert df["x"].iloc[0] == -4.0
    assert df["x"].iloc[-1] == 4.0

    out = capsys.readouterr().out
    assert "✓ Saved curve table" in out
    # gamma of negative x is nan and gets reported
    assert "gamma_to_linear_space" in out


def test_main_flags_override_settings(tmp_path):
    """Test explicit grid, function list and output path."""
    output = tmp_path / "custom" / "ping.csv"
    main([
        "--functions", "ping_pong,sign",
        "--start", "0",
        "--stop", "4",
        "--num-samples", "5",
        "--output", str(output),
    ])

    df = read_curve_csv(output)
    assert df["x"].tolist() == [0.0, 1.0, 2.0, 3.0, 4.0]
    # ping_pong with length 2
    assert np.allclose(df["ping_pong"], [0.0, 1.0, 2.0, 1.0, 0.0])
    assert np.allclose(df["sign"], [1.0, 1.0, 1.0, 1.0, 1.0])


@pytest.mark.parametrize(
    "argv",
    [
        ["--functions", "smooth_damp"],
        ["--functions", "clamp"],
        ["--functions", ","],
        ["--start", "1", "--stop", "0"],
        ["--num-samples", "1"],
    ],
)
def test_main_invalid_input_exits_2(argv, capsys):
    """Test that bad names or grids exit with status 2."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
    out = capsys.readouterr().out
    assert "ERROR" in out or "✗" in out


def test_main_invalid_settings_exits_2(monkeypatch):
    """Test that an invalid environment is reported, not raised."""
    monkeypatch.setenv("MATHF_NUM_SAMPLES", "zero")
    reset_settings()
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2
