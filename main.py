"""
mathf – Main entry point.

Minimal bootstrap script to verify the package imports and its constants load.
"""

import mathf


def main() -> None:
    """Print a bootstrap confirmation message."""
    print(f"mathf {mathf.__version__} bootstrap complete (deg2rad={mathf.DEG2RAD}, rad2deg={mathf.RAD2DEG})")


if __name__ == "__main__":
    main()
