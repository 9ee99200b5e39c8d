"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class CatalogError(ApplicationError):
    """Exception raised when a product catalog cannot be loaded."""

    def __init__(self, message: str = "Catalog could not be loaded", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Catalog Error: {message}"
