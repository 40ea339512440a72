"""
API Error Types

Every failure a guard or handler can report is classified at the point of
detection. The exception handlers in ``app.main`` render them as
``{"status": <code>, "message": <text>}``.
"""


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        """Convert to the JSON error body."""
        return {"status": self.status_code, "message": self.message}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.status_code}: {self.message}>"


class ValidationError(ApiError):
    """Missing or invalid field, inconsistent id or illegal status change."""

    status_code = 400


class NotFoundError(ApiError):
    """Unknown dish or order id."""

    status_code = 404
