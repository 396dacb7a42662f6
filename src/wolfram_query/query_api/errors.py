"""Exceptions raised by the Wolfram|Alpha query client."""


class WolframError(Exception):
    """Base class for every error raised by this package."""


class TransportError(WolframError):
    """Network or HTTP failure while talking to the API."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WolframError, ValueError):
    """Malformed or unexpectedly shaped JSON.

    Subclasses ValueError so pydantic folds it into the surrounding
    validation error when raised from inside a validator.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(f"{message}: {cause}" if cause is not None else message)
        self.cause = cause


class NoAssumptionError(WolframError):
    """An assumption carries no alternative value to switch to."""


class RenderError(WolframError):
    """An assumption template could not be compiled."""
