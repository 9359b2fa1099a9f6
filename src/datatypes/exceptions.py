"""
Exceptions raised by the datatypes library.

Every error carries an HTTP-like status ``code`` and a ``details`` dict so
callers at an API boundary can translate them directly into responses.
Argument errors also derive from the matching built-in category
(``ValueError``, ``LookupError``, ``ZeroDivisionError``) so plain Python
code can catch them without importing this module.
"""

from typing import Any


class DatatypesError(Exception):
    """Base exception for all datatypes errors."""

    default_message = "An unexpected error occurred."
    code = 500

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        code: int | None = None,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details or {}
        if code is not None:
            self.code = code


# HTTP-style taxonomy


class DeniedAccessError(DatatypesError):
    default_message = "Access denied."
    code = 401


class ForbiddenError(DatatypesError):
    default_message = "You are not allowed to perform this action."
    code = 403


class NotFoundError(DatatypesError, LookupError):
    """Raised when a requested ID or key is absent."""

    default_message = "The requested resource was not found."
    code = 404

    @classmethod
    def with_id(cls, entity_id: Any) -> "NotFoundError":
        return cls(f"No entry with id '{entity_id}' was found.", details={"id": entity_id})


class MethodNotAllowedError(DatatypesError):
    default_message = "Method not allowed."
    code = 405


class NotAcceptableError(DatatypesError):
    default_message = "Not acceptable."
    code = 406


class ConflictError(DatatypesError):
    default_message = "The request conflicts with the current state."
    code = 409


class GoneError(DatatypesError):
    default_message = "The requested resource is no longer available."
    code = 410


class PreconditionFailedError(DatatypesError):
    default_message = "Precondition failed."
    code = 412


class UnsupportedMediaTypeError(DatatypesError):
    default_message = "Unsupported media type."
    code = 415


class RequestedRangeNotSatisfiableError(DatatypesError):
    default_message = "Requested range not satisfiable."
    code = 416


class ExpectationFailedError(DatatypesError):
    default_message = "Expectation failed."
    code = 417


class UnprocessableEntityError(DatatypesError):
    """Raised when input is well-formed but semantically invalid."""

    default_message = "The given data was invalid."
    code = 422

    @classmethod
    def with_name(cls, name: str) -> "UnprocessableEntityError":
        return cls(f"The parameter '{name}' is invalid.", details={"name": name})


class FailedDependencyError(DatatypesError):
    default_message = "Failed dependency."
    code = 424


class PreconditionRequiredError(DatatypesError):
    default_message = "Precondition required."
    code = 428


class TooManyRequestsError(DatatypesError):
    default_message = "Too many requests."
    code = 429


# Argument errors


class InvalidArgumentError(UnprocessableEntityError, ValueError):
    """Generic invalid argument."""

    default_message = "Invalid argument."


class EmptyInputError(InvalidArgumentError):
    """A required non-empty string argument was empty."""

    default_message = "The value must be a non-empty string."


class InvalidLengthError(InvalidArgumentError):
    """A length or count argument was non-positive."""

    default_message = "The length must be a positive integer."


class PositiveIntegerError(InvalidArgumentError):
    """An ID or capacity argument was not a positive integer."""

    default_message = "The value must be a positive integer."


NonPositiveIntegerError = PositiveIntegerError


class NonNegativeNumberError(InvalidArgumentError):
    default_message = "The value must be a non-negative number."


class InvalidEmailError(InvalidArgumentError):
    default_message = "The value must be a valid email address."


class DivisionByZeroError(InvalidArgumentError, ZeroDivisionError):
    default_message = "Cannot divide by zero"


class OutOfRangeError(UnprocessableEntityError, ValueError):
    """A start/length window or capacity was exceeded."""

    default_message = "The value is out of range."


class ParameterOutOfRangeError(OutOfRangeError):
    """A named parameter is out of range."""

    default_message = "The parameter is out of range."

    @classmethod
    def with_name(cls, name: str) -> "ParameterOutOfRangeError":
        return cls(f"The parameter '{name}' is out of range.", details={"name": name})


# Value object errors


class RequiredFieldMissingError(UnprocessableEntityError, ValueError):
    """A required field is absent from the input mapping."""

    def __init__(self, field_name: str) -> None:
        super().__init__(
            f"Required field '{field_name}' was not supplied as a parameter.",
            details={"field": field_name},
        )
        self.field_name = field_name


class UnexpectedFieldValueError(UnprocessableEntityError, ValueError):
    """A field received a value of an unexpected shape."""

    def __init__(self, field_name: str, value: Any) -> None:
        super().__init__(
            f"Unexpected value for field '{field_name}': {value!r}",
            details={"field": field_name, "value": repr(value)},
        )
        self.field_name = field_name


# Collection errors


class DuplicateEntryError(UnprocessableEntityError):
    """EntityCollection insert with an existing ID."""

    default_message = "The entry already exists."

    @classmethod
    def with_id(cls, entity_id: Any) -> "DuplicateEntryError":
        return cls(f"An entry with id '{entity_id}' already exists.", details={"id": entity_id})
