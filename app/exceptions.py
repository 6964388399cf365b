"""
Application Errors

Domain exceptions raised by the service layer and surfaced by GraphQL.

Each error carries a machine-readable `code`. graphql-core copies an
exception's `extensions` dict into the error payload, so clients see:

    {"message": "Person with ID ... not found",
     "path": ["person"],
     "extensions": {"code": "NOT_FOUND"}}
"""


class APIError(Exception):
    """Base class for errors that are safe to show to API clients."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict:
        return {"code": self.code}


class NotFoundError(APIError):
    """Raised when a referenced entity ID does not resolve."""

    code = "NOT_FOUND"


class ValidationError(APIError):
    """Raised when submitted field values are empty or malformed."""

    code = "BAD_USER_INPUT"

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []

    @property
    def extensions(self) -> dict:
        extensions = super().extensions
        if self.fields:
            extensions["fields"] = self.fields
        return extensions


class InternalError(APIError):
    """
    Raised when storage or runtime fails unexpectedly.

    The message is only shown outside production; see
    app.graphql.should_mask_error.
    """

    code = "INTERNAL_SERVER_ERROR"
