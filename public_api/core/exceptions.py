"""Application exception classes and handlers."""

from fastapi import Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, code: str, status_code: int = 400) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)


# --- Configuration (500) ---


class ConfigurationError(AppException):
    """Base configuration error."""

    def __init__(
        self, message: str = "Invalid configuration", code: str = "CONFIGURATION_ERROR"
    ) -> None:
        super().__init__(message=message, code=code, status_code=500)


class ConfigFileNotFoundError(ConfigurationError):
    """Configuration file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            message=f"Configuration file not found: {path}",
            code="CONFIG_FILE_NOT_FOUND",
        )


class InvalidConfigurationError(ConfigurationError):
    """Configuration content could not be decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="INVALID_CONFIGURATION")


# --- Exception Handler ---


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Central exception handler for AppException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": exc.status_code,
            "message": exc.message,
            "code": exc.code,
        },
    )
