"""Utility layer errors."""


class ConfigurationError(Exception):
    """Settings that the service refuses to start with."""

    pass
