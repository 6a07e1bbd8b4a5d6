"""
Curve sampling and tabulation of the scalar functions.

Evaluates mathf.scalar functions over numeric grids and collects the results
into pandas DataFrames for inspection, plotting and export.
"""
