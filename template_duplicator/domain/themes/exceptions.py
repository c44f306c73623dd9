"""Errors raised by theme store implementations."""


class ThemeStoreError(RuntimeError):
    """Raised when the remote theme store cannot serve a request."""

    def __init__(self, message: str, *, status_code: int = 502) -> None:
        super().__init__(message)
        self.status_code = status_code
