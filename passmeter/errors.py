"""
Custom exceptions for PassMeter.
"""


class PassmeterError(Exception):
    """Base exception for PassMeter."""
    pass


class ConfigError(PassmeterError):
    """Invalid or inconsistent analyzer settings."""
    pass
