"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart with no lines."""


class CheckoutFailedError(DomainException):
    """The sale could not be persisted. The cart is left as it was."""


class HistoryLoadError(DomainException):
    """Sales for the requested period could not be loaded."""


class PersistenceError(Exception):
    """The backing store failed to read or write.

    Raised by repository implementations; application services translate
    it into the matching DomainException.
    """
