from __future__ import annotations


class InvalidArgument(ValueError, TypeError):
    """Raised when a rate parameter is not a finite positive real number."""

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value
