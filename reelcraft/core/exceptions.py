__all__ = [
    "BaseError",
    "BadRequestError",
    "DownloadError",
    "GenerationFailedError",
    "InternalError",
    "LoadError",
    "NotFoundError",
    "NotSupportedError",
    "OperationCancelledError",
    "OperationTimeoutError",
    "UnauthorizedError",
    "ValidationError",
]


class BaseError(Exception):
    status_code: int = 500


class BadRequestError(BaseError):
    status_code = 400


class UnauthorizedError(BaseError):
    status_code = 401


class NotFoundError(BaseError):
    status_code = 404


class NotSupportedError(BaseError):
    status_code = 415


class ValidationError(BadRequestError):
    """A mode-specific input required for submission is missing."""


class OperationCancelledError(BaseError):
    status_code = 499


class GenerationFailedError(BaseError):
    """The remote job finished without a usable video."""

    status_code = 502

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason


class DownloadError(BaseError):
    """Fetching the generated video returned a non-success status."""

    status_code = 502

    def __init__(self, message: str, fetch_status: int | None = None):
        super().__init__(message)
        self.fetch_status = fetch_status


class OperationTimeoutError(BaseError):
    status_code = 504


class InternalError(Exception):
    status_code = 500


class LoadError(Exception):
    status_code = 500
