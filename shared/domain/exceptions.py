"""
Domain Exceptions

Typed failures raised by the application services. The REST layer maps
each kind to an HTTP status in
``shared.infrastructure.exception_handler``; nothing below knows about HTTP.
"""


class DomainError(Exception):
    """Base class for all expected business failures."""

    code = 'domain_error'
    default_message = 'Operation failed.'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# ===== NotFound =====

class NotFoundError(DomainError):
    code = 'not_found'
    default_message = 'Record not found.'


class PropertyNotFound(NotFoundError):
    default_message = 'Property not found.'


class ContractNotFound(NotFoundError):
    default_message = 'Contract not found.'


class OfferNotFound(NotFoundError):
    default_message = 'Offer not found.'


class SolicitationNotFound(NotFoundError):
    default_message = 'Solicitation not found.'


class UserNotFound(NotFoundError):
    default_message = 'User not found.'


class ReviewNotFound(NotFoundError):
    default_message = 'Review not found.'


# ===== Validation =====

class DomainValidationError(DomainError):
    code = 'validation_error'
    default_message = 'Invalid data.'


# ===== Conflict =====

class ConflictError(DomainError):
    code = 'conflict'
    default_message = 'The request conflicts with the current state.'


class PropertyAlreadyRented(ConflictError):
    default_message = 'Property is already rented!'


class PropertyNotAvailable(ConflictError):
    default_message = 'Property is not available!'


class DuplicateSolicitation(ConflictError):
    default_message = 'You have already requested this property.'


class OfferAlreadyApplied(ConflictError):
    default_message = 'An offer is already applied to this property.'


class DuplicateLocation(ConflictError):
    default_message = 'A property with this location already exists.'


class DuplicateUser(ConflictError):
    default_message = 'A user with this username or email already exists.'


# ===== Authentication =====

class AuthenticationRequired(DomainError):
    code = 'not_authenticated'
    default_message = 'User not logged in.'
