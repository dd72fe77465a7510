"""Domain-level exceptions.

All storefront failures are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly
messages.  None of them is fatal: the cart is never left half-mutated
and the shopper can always retry.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or input rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthenticationError(DomainException):
    """The identity provider rejected a sign-in or sign-up."""


class UnauthenticatedError(DomainException):
    """Checkout was attempted without a signed-in identity."""


class EmptyCartError(DomainException):
    """Checkout was attempted with nothing in the cart."""


class CheckoutInProgressError(DomainException):
    """A second checkout was issued while one is still outstanding."""


class CatalogUnavailableError(DomainException):
    """The catalog provider could not be reached or returned an error."""


class SinkFailure(DomainException):
    """The order sink rejected or failed to record an order.

    Retryable: the cart is left untouched.
    """
