"""Error taxonomy shared by the API layer and the client."""
from typing import Dict, Optional


class RecordShopError(Exception):
    """Base error; the API renders it as {"message": ...} with status_code."""

    status_code = 500
    default_message = "Unexpected error."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class RecordNotFound(RecordShopError):
    status_code = 404
    default_message = "Record not found."

    def __init__(self, record_id: Optional[int] = None, message: Optional[str] = None) -> None:
        self.record_id = record_id
        super().__init__(message)


class InvalidCredentials(RecordShopError):
    status_code = 401
    default_message = "Invalid email or password."


class AuthenticationRequired(RecordShopError):
    status_code = 401
    default_message = "Authentication required."


class PermissionDenied(RecordShopError):
    status_code = 403
    default_message = "You do not have permission to perform this action."


class ClientValidationFailure(RecordShopError):
    """Form submit blocked; never reaches the network."""

    status_code = 400
    default_message = "Please correct the highlighted fields."

    def __init__(self, field_errors: Dict[str, str]) -> None:
        self.field_errors = field_errors
        super().__init__()


class EmptyExportError(RecordShopError):
    status_code = 400
    default_message = "No records to export"
