# app/exceptions.py
"""Errors raised by the product service.

Each carries the HTTP status it maps to, so the API layer can render
all of them through one handler.
"""


class ProductServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ProductServiceError):
    """Missing required field or non-positive price."""
    status_code = 400


class ConflictError(ProductServiceError):
    """A product with the same id is already stored."""
    status_code = 400


class NotFoundError(ProductServiceError):
    status_code = 404
