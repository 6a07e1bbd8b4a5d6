"""
CSV I/O and schema enforcement for curve tables.
"""
