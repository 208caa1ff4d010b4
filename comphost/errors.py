"""
errors.py

exceptions for failures that abort the whole run.
per-configuration failures are reported, never raised.
"""

from __future__ import annotations


class ComphostError(Exception):
    pass


class ConfigError(ComphostError):
    """config directory, config file or environment is unusable."""
