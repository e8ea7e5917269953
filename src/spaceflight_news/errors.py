"""Typed error taxonomy.

Every failure in the data-access layer is raised as a subclass of
``AppError``. Each error carries a numeric ``code`` for its family and a
``user_message`` suitable for showing to a reader of the app.
"""


class AppError(Exception):
    """Base class for all application errors."""

    code = 9999
    prefix = "Error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    @property
    def user_message(self) -> str:
        return f"{self.prefix}: {self.detail}"


# ============================================================
# Network
# ============================================================


class NetworkError(AppError):
    code = 1000
    prefix = "Network error"


class InvalidURLError(NetworkError):
    def __init__(self, url: str = "") -> None:
        super().__init__(f"Invalid URL {url}".rstrip())
        self.url = url


class NoDataError(NetworkError):
    def __init__(self) -> None:
        super().__init__("No data received")


class DecodingError(NetworkError):
    def __init__(self, reason: str = "") -> None:
        super().__init__("Could not process the data")
        self.reason = reason


class ServerError(NetworkError):
    """Non-2xx response from the API."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Server error: {status_code}")
        self.status_code = status_code


class RequestTimeoutError(NetworkError):
    def __init__(self) -> None:
        super().__init__("The request timed out")


class NoConnectionError(NetworkError):
    def __init__(self, reason: str = "") -> None:
        super().__init__("No internet connection")
        self.reason = reason


class TransportError(NetworkError):
    """Any other failure below HTTP (DNS, TLS, protocol)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


# ============================================================
# Data
# ============================================================


class DataError(AppError):
    code = 2000
    prefix = "Data error"


class SaveFailedError(DataError):
    def __init__(self, reason: str = "") -> None:
        super().__init__("Could not save the data")
        self.reason = reason


class LoadFailedError(DataError):
    def __init__(self, reason: str = "") -> None:
        super().__init__("Could not load the data")
        self.reason = reason


class DeleteFailedError(DataError):
    def __init__(self, reason: str = "") -> None:
        super().__init__("Could not delete the data")
        self.reason = reason


class InvalidDataError(DataError):
    def __init__(self, reason: str = "") -> None:
        super().__init__("Invalid data")
        self.reason = reason


# ============================================================
# Validation
# ============================================================


class ValidationError(AppError):
    code = 3000
    prefix = "Validation error"


class InvalidInputError(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid input in {field}")
        self.field = field


class RequiredFieldError(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"The field {field} is required")
        self.field = field


# ============================================================
# Unexpected
# ============================================================


class UnexpectedError(AppError):
    code = 9999
    prefix = "Unexpected error"


def describe_error(error: BaseException) -> str:
    """Map any exception to a message for the reader.

    Exceptions outside the taxonomy are reported as ``UnexpectedError``.
    """
    if isinstance(error, AppError):
        return error.user_message
    return UnexpectedError(str(error) or type(error).__name__).user_message
