"""
Smoke test for the bootstrap entry point.
"""

import main as bootstrap


def test_main_prints_bootstrap_message(capsys):
    """Test that the package imports and reports its constants."""
    bootstrap.main()
    out = capsys.readouterr().out
    assert "bootstrap complete" in out
    assert "deg2rad=0.0174532925" in out
