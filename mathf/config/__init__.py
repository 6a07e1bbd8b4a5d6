"""
Configuration loading and validation for curve sampling and export.

Provides strongly typed settings objects loaded from environment variables
(optionally via a .env file) with upfront validation.
"""
