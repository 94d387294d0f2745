"""Errors raised by adapters to external services."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ExternalServiceError(AdapterError):
    """An external service failed or answered with something unexpected."""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service}: {message}")
