from __future__ import annotations


class CustomerError(Exception):
    """Base for conditions the customers service maps to an HTTP status."""

    status_code = 500
    message = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidContentTypeError(CustomerError):
    status_code = 415
    message = "Content-Type must be application/json."


class InvalidCustomerIdError(CustomerError):
    status_code = 400
    message = "ID must be a positive integer."


class CustomerValidationError(CustomerError):
    status_code = 400
    message = "Invalid customer data."

    def __init__(self, errors: list[str], message: str | None = None) -> None:
        self.errors = list(errors)
        super().__init__(message)


class DuplicateEmailError(CustomerError):
    status_code = 409
    message = "Email is already registered."


class CustomerNotFoundError(CustomerError):
    status_code = 404
    message = "Customer not found."


class InternalFailureError(CustomerError):
    status_code = 500
    message = "Internal server error."
